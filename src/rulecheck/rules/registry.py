"""Process-wide registries of validators, options and actions.

The registries are seeded with the built-ins at import time and may be
extended by the application. They are not synchronized: register custom
entries during startup, before validation runs concurrently.
"""

import logging

from ..actions import DEFAULT_ACTIONS
from ..validators import BUILTIN_VALIDATORS
from .models import IGNORE, LAZY, REQUIRED, Action, Option, OptionList, Validator

logger = logging.getLogger(__name__)


class ValidatorMap(dict):
    """Application-registered validators. Built-ins are looked up first."""

    def add(self, name: str, validator: Validator) -> None:
        if name in BUILTIN_VALIDATORS:
            logger.warning(f"Validator '{name}' is built in; the registered one will never be reached")
        self[name] = validator
        logger.info(f"Registered validator '{name}'")

    def has(self, name: str) -> bool:
        return name in BUILTIN_VALIDATORS or name in self

    def lookup(self, name: str) -> tuple[Validator | None, bool]:
        """Return ``(validator, is_builtin)``; the validator is None when absent."""
        if name in BUILTIN_VALIDATORS:
            return BUILTIN_VALIDATORS[name], True
        return self.get(name), False


class ActionMap(dict):
    """Named value transforms."""

    def add(self, name: str, action: Action) -> None:
        self[name] = action
        logger.info(f"Registered action '{name}'")

    def has(self, name: str) -> bool:
        return name in self


VALIDATORS = ValidatorMap()
OPTIONS = OptionList([REQUIRED, IGNORE, LAZY])
ACTIONS = ActionMap(DEFAULT_ACTIONS)


def add_validator(name: str, validator: Validator) -> None:
    """Register a validator callable under a rule name.

    The callable is invoked as ``validator(value, *params)`` with the raw
    value and returns None, a message string or a Failure.
    """
    VALIDATORS.add(name, validator)


def add_option(name: str) -> Option:
    """Register an extra option name and return it."""
    option = Option(name)
    if not OPTIONS.has(option):
        OPTIONS.add(option)
        logger.info(f"Registered option '{name}'")
    return option


def add_action(name: str, action: Action) -> None:
    """Register a value transform under a rule name."""
    ACTIONS.add(name, action)
