"""Tests for date and time validators."""

from datetime import datetime, timedelta

import pytest

from rulecheck.exceptions import RuleParameterError, WrongTypeError
from rulecheck.validators.dates import date, date_gt, date_gte, date_lt, date_lte, resolve_boundary, time

LAYOUT = "02-01-2006"


def days_from_today(days: int) -> str:
    return (datetime.now() + timedelta(days=days)).strftime("%d-%m-%Y")


class TestDate:
    """Test date."""

    def test_matching_layout(self):
        assert date("31-12-2020", LAYOUT) is None

    def test_iso_layout(self):
        assert date("2020-12-31", "2006-01-02") is None

    def test_strptime_layout(self):
        assert date("2020/12/31", "%Y/%m/%d") is None

    @pytest.mark.parametrize("value", ["2020-12-31", "32-01-2020", "31-12-20", ""])
    def test_not_matching(self, value):
        assert date(value, LAYOUT) is not None

    @pytest.mark.parametrize("value", ["1-1-2020", "01-1-2020", "1-01-2020", "01-01-20200"])
    def test_zero_padded_tokens_need_every_digit(self, value):
        assert date(value, LAYOUT) is not None

    def test_unpadded_tokens_accept_one_digit(self):
        assert date("1-1-2020", "2-1-2006") is None

    def test_message_includes_layout(self):
        assert date("nope", LAYOUT).message == "must be a valid date in 02-01-2006 format"

    def test_missing_layout(self):
        with pytest.raises(RuleParameterError):
            date("31-12-2020")

    def test_non_text_raises(self):
        with pytest.raises(WrongTypeError):
            date(20201231, LAYOUT)


class TestTime:
    """Test time."""

    @pytest.mark.parametrize("value", ["00:00:00", "23:59:59", "12:30:05", "1:02:03"])
    def test_valid(self, value):
        assert time(value) is None

    @pytest.mark.parametrize("value", ["24:00:00", "12:30", "noon", "1:2:3", "12:3:04", "12:03:4"])
    def test_invalid(self, value):
        assert time(value) is not None


class TestResolveBoundary:
    """Test resolve_boundary()."""

    def test_literal_date(self):
        assert resolve_boundary("15-06-2021", LAYOUT) == datetime(2021, 6, 15)

    def test_placeholder_truncated_to_layout(self):
        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)

        assert resolve_boundary("now", LAYOUT) == today

    def test_unparseable_target(self):
        assert resolve_boundary("someday", LAYOUT) is None


class TestDateComparisons:
    """Test date_gte, date_lte, date_gt and date_lt."""

    def test_gte_relative(self):
        today = days_from_today(0)

        assert date_gte(today, LAYOUT, "-1D") is None
        assert date_gte(today, LAYOUT, "today") is None
        assert date_gte(today, LAYOUT, "+1D") is not None

    def test_lte_relative(self):
        today = days_from_today(0)

        assert date_lte(today, LAYOUT, "+1D") is None
        assert date_lte(today, LAYOUT, "yesterday") is not None

    def test_strict_comparisons(self):
        today = days_from_today(0)

        assert date_gt(today, LAYOUT, "today") is not None
        assert date_gt(days_from_today(2), LAYOUT, "tomorrow") is None
        assert date_lt(today, LAYOUT, "today") is not None
        assert date_lt(days_from_today(-3), LAYOUT, "-1D") is None

    def test_literal_boundary(self):
        assert date_lt("01-01-2020", LAYOUT, "02-01-2020") is None
        assert date_gt("01-01-2020", LAYOUT, "02-01-2020") is not None

    def test_adult_age_check(self):
        assert date_lte("01-01-1990", LAYOUT, "-18Y") is None

    def test_unparseable_value_fails(self):
        assert date_gte("not a date", LAYOUT, "today") is not None

    def test_unparseable_boundary_fails(self):
        assert date_gte("01-01-2020", LAYOUT, "someday") is not None

    def test_message(self):
        failure = date_gte("01-01-2020", LAYOUT, "02-01-2020")

        assert failure.message == "must be a date in 02-01-2006 format not before 02-01-2020"

    def test_missing_target(self):
        with pytest.raises(RuleParameterError):
            date_gte("01-01-2020", LAYOUT)
