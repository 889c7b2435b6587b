"""Payment card number validation."""

from typing import Any

from ..results import Failure
from .helpers import check_text

CARD_MIN_LENGTH = 13
CARD_MAX_LENGTH = 19


def luhn(number: str) -> bool:
    """Check a card number with the Luhn checksum.

    Walking from the rightmost digit, every second digit is doubled and
    reduced by 9 when it exceeds 9; the number is valid when the digit
    sum is a multiple of 10. Anything but 13-19 ASCII digits is invalid.
    """
    if not CARD_MIN_LENGTH <= len(number) <= CARD_MAX_LENGTH:
        return False
    if not (number.isascii() and number.isdigit()):
        return False

    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def credit_card(value: Any, *params: Any) -> Failure | None:
    return check_text("credit_card", value, (), luhn)
