"""Tests for ISO code validators."""

import pytest

from rulecheck.exceptions import WrongTypeError
from rulecheck.validators.codes import (
    country_code2,
    country_code3,
    currency_code,
    language_code2,
    language_code3,
)


class TestCodes:
    """Test code lookups."""

    @pytest.mark.parametrize("validator, value", [
        (country_code2, "US"),
        (country_code3, "USA"),
        (currency_code, "EUR"),
        (language_code2, "en"),
        (language_code3, "eng"),
    ])
    def test_known_codes(self, validator, value):
        assert validator(value) is None

    @pytest.mark.parametrize("validator, value", [
        (country_code2, "us"),
        (country_code2, "ZZ"),
        (country_code2, "USA"),
        (country_code3, "US"),
        (currency_code, "usd"),
        (language_code2, "EN"),
        (language_code3, "en"),
    ])
    def test_unknown_codes(self, validator, value):
        assert validator(value) is not None

    def test_country_code2_is_exact(self):
        assert country_code2("RU") is None
        assert country_code2("ru") is not None
        assert country_code2("RUS") is not None

    def test_message(self):
        assert country_code2("ZZ").message == "must be a valid country code in AA format"

    def test_non_text_raises(self):
        with pytest.raises(WrongTypeError):
            currency_code(840)
