"""rulecheck - Declarative validation of values and records.

Rules are written as compact specifications such as
``"required|max:255|in:x,y,z"`` and resolved against registries of
validators, options and transforms.

Basic usage:
    from rulecheck import validate_value

    errors = validate_value("ab", "required|min:3")
    if not errors.empty():
        print(errors.to_json())
"""

__version__ = "0.1.0"
__author__ = "rulecheck contributors"
__description__ = "Declarative validation of values and records with compact rule specifications"

from rulecheck.exceptions import (
    ArgumentShapeError,
    RecordTypeError,
    RuleNotFoundError,
    RuleParameterError,
    RulecheckError,
    WrongTypeError,
)
from rulecheck.messages import MESSAGES, add_message, update_messages
from rulecheck.results import ErrorList, ErrorMap, Failure
from rulecheck.rules import (
    IGNORE,
    LAZY,
    REQUIRED,
    Option,
    Rule,
    add_action,
    add_option,
    add_validator,
    is_,
    parse,
    rule,
)
from rulecheck.validation import (
    by,
    inspect_record,
    set_default_tag,
    transform,
    validate_record,
    validate_value,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "validate_value",
    "validate_record",
    "inspect_record",
    "set_default_tag",
    "by",
    "transform",
    "parse",
    "rule",
    "is_",
    "Rule",
    "Option",
    "REQUIRED",
    "IGNORE",
    "LAZY",
    "add_validator",
    "add_option",
    "add_action",
    "MESSAGES",
    "add_message",
    "update_messages",
    "Failure",
    "ErrorList",
    "ErrorMap",
    "RulecheckError",
    "RuleNotFoundError",
    "ArgumentShapeError",
    "WrongTypeError",
    "RecordTypeError",
    "RuleParameterError",
]
