"""ISO code lookup validators (case sensitive)."""

from typing import Any

from ..results import Failure
from ..utils.codes import COUNTRY_CODES2, COUNTRY_CODES3, CURRENCY_CODES, LANGUAGE_CODES2, LANGUAGE_CODES3
from .helpers import check_code


def country_code2(value: Any, *params: Any) -> Failure | None:
    return check_code("country_code2", value, 2, COUNTRY_CODES2)


def country_code3(value: Any, *params: Any) -> Failure | None:
    return check_code("country_code3", value, 3, COUNTRY_CODES3)


def currency_code(value: Any, *params: Any) -> Failure | None:
    return check_code("currency_code", value, 3, CURRENCY_CODES)


def language_code2(value: Any, *params: Any) -> Failure | None:
    return check_code("language_code2", value, 2, LANGUAGE_CODES2)


def language_code3(value: Any, *params: Any) -> Failure | None:
    return check_code("language_code3", value, 3, LANGUAGE_CODES3)
