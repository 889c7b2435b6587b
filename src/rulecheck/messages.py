"""Failure message templates.

Templates carry positional placeholders ``{0}``, ``{1}``, ... that are
replaced by the rule's parameters in order. Rules without a template fall
back to a generic message.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .results import Failure

logger = logging.getLogger(__name__)


class MessageTable(dict):
    """Rule name → message template."""

    def add(self, rule: str, template: str) -> None:
        self[rule] = template

    def render(self, rule: str, params: tuple[Any, ...] = ()) -> str:
        """Build the message for a rule, substituting its parameters."""
        message = self.get(rule) or f"validation by {rule} not pass."
        for index, param in enumerate(params):
            message = message.replace(f"{{{index}}}", str(param))
        return message


DEFAULT_MESSAGES = {
    "required": "is required",
    "empty": "must be empty",
    "email": "must be a valid email address",
    "url": "must be a valid url",
    "accepted": "must be accepted",
    "alpha": "must contain only latin letters",
    "alpha_numeric": "must contain only latin letters and digits",
    "alpha_under": "must contain only latin letters and underscores",
    "alpha_dash": "must contain only latin letters and dashes",
    "ascii": "must contain only ASCII characters",
    "int": "must be an integer number",
    "float": "must be a float number",
    "json": "must be a valid JSON string",
    "ip": "must be a valid IP address",
    "ipv4": "must be a valid IPv4 address",
    "ipv6": "must be a valid IPv6 address",
    "time": "must be a valid time in HH:MM:SS format",
    "upper_case": "must be in upper case",
    "lower_case": "must be in lower case",
    "country_code2": "must be a valid country code in AA format",
    "country_code3": "must be a valid country code in AAA format",
    "currency_code": "must be a valid currency code",
    "language_code2": "must be a valid language code in aa format",
    "language_code3": "must be a valid language code in aaa format",
    "credit_card": "must be a valid credit card number",
    "password": "must be at least 8 characters long and contain lower and upper case letters and digits",
    "min": "must be greater or equal of {0}",
    "max": "must be lower or equal of {0}",
    "len": "must have length {0}",
    "gt": "must be greater than {0}",
    "lt": "must be lower than {0}",
    "in": "must be in {0}",
    "not_in": "must not be in {0}",
    "date": "must be a valid date in {0} format",
    "date_gte": "must be a date in {0} format not before {1}",
    "date_lte": "must be a date in {0} format not after {1}",
    "date_gt": "must be a date in {0} format after {1}",
    "date_lt": "must be a date in {0} format before {1}",
    "regex": "must match pattern {0}",
    "contains": "must contain {0}",
    "has_prefix": "must start with {0}",
    "has_suffix": "must end with {0}",
    "has_keys": "must have keys {0}",
    "has_only_keys": "must have only keys {0}",
    "file_exists": "must be an existing path",
}

MESSAGES = MessageTable(DEFAULT_MESSAGES)


def add_message(rule: str, template: str) -> None:
    """Add or replace the message template for one rule."""
    MESSAGES.add(rule, template)


def update_messages(templates: Mapping[str, str]) -> None:
    """Add or replace several message templates at once."""
    MESSAGES.update(templates)
    logger.info(f"Updated {len(templates)} message templates")


def error_message(rule: str, *params: Any) -> Failure:
    """Return the failure for a rule with its message already rendered."""
    return Failure(rule, MESSAGES.render(rule, params), params)
