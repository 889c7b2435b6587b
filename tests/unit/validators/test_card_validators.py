"""Tests for payment card validation."""

import pytest

from rulecheck.exceptions import WrongTypeError
from rulecheck.validators.cards import credit_card, luhn


class TestLuhn:
    """Test luhn()."""

    @pytest.mark.parametrize("number", ["4111111111111111", "5500000000000004", "4012888888881881", "378282246310005"])
    def test_valid_numbers(self, number):
        assert luhn(number)

    def test_bad_checksum(self):
        assert not luhn("4111111111111112")

    @pytest.mark.parametrize("number", ["0", "000000000000", "00000000000000000000"])
    def test_length_bounds(self, number):
        assert not luhn(number)

    @pytest.mark.parametrize("number", ["4111 1111 1111 1111", "5500 0000 0000 0004", "4111-1111-1111-1111", "４１１１１１１１１１１１１１１１"])
    def test_only_ascii_digits(self, number):
        assert not luhn(number)


class TestCreditCard:
    """Test credit_card."""

    def test_valid(self):
        assert credit_card("4111111111111111") is None

    def test_invalid(self):
        assert credit_card("1234567890123").message == "must be a valid credit card number"

    def test_numbers_are_not_text(self):
        with pytest.raises(WrongTypeError):
            credit_card(4111111111111111)
