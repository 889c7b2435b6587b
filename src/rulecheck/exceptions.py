"""Fatal configuration and programmer errors raised by rulecheck.

Validation failures are data (see ``rulecheck.results``); the exceptions
below signal a mistake in how the engine is being used and are never
downgraded to failures.
"""

WRONG_TYPE_MESSAGE = "Value type not allowed."


class RulecheckError(Exception):
    """Base class for every fatal rulecheck error."""


class RuleNotFoundError(RulecheckError, LookupError):
    """Raised when a rule name is not a validator, option or action."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Rule "{name}" not found')


class ArgumentShapeError(RulecheckError, TypeError):
    """Raised when validate_value receives an argument it cannot use."""

    def __init__(self, argument: object):
        self.argument = argument
        super().__init__(f"{WRONG_TYPE_MESSAGE} {type(argument).__name__}")


class WrongTypeError(RulecheckError, TypeError):
    """Raised when a validator or transform gets a value kind it does not support."""

    def __init__(self, value: object = None, rule: str | None = None):
        self.value = value
        self.rule = rule
        message = WRONG_TYPE_MESSAGE
        if rule:
            message += f" Rule {rule!r} got {type(value).__name__}"
        super().__init__(message)


class RecordTypeError(RulecheckError, TypeError):
    """Raised when record validation is given something that is not a record."""

    def __init__(self, record: object):
        self.record = record
        super().__init__(f"value must be a dataclass or pydantic model instance, got {type(record).__name__}")


class RuleParameterError(RulecheckError, ValueError):
    """Raised when a rule clause carries a parameter the validator cannot use."""

    def __init__(self, rule: str, message: str, params: tuple = ()):
        self.rule = rule
        self.params = params
        super().__init__(f"{rule}: {message}")
