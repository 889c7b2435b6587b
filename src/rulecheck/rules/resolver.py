"""Resolution of rule names into validators, options or actions.

Namespaces are consulted in a fixed order: validators (built-in, then
application-registered), options, actions. The first hit wins, so a
name registered in more than one namespace is only reachable through
the first. An unknown name is a configuration error.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..exceptions import RuleNotFoundError
from .models import Option, Rule
from .registry import ACTIONS, OPTIONS, VALIDATORS

logger = logging.getLogger(__name__)


class RuleKind(str, Enum):
    """Namespace a rule name resolved to."""
    VALIDATOR = "validator"
    OPTION = "option"
    ACTION = "action"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one rule."""
    rule: Rule
    kind: RuleKind
    target: Any
    builtin: bool = False


def find(rule: Rule) -> Resolution | None:
    """Resolve a rule, returning None when no namespace knows its name."""
    validator, builtin = VALIDATORS.lookup(rule.name)
    if validator is not None:
        return Resolution(rule, RuleKind.VALIDATOR, validator, builtin)

    if OPTIONS.has(rule.name):
        return Resolution(rule, RuleKind.OPTION, Option(rule.name))

    if ACTIONS.has(rule.name):
        return Resolution(rule, RuleKind.ACTION, ACTIONS[rule.name])

    return None


def resolve(rule: Rule) -> Resolution:
    """Resolve a rule.

    Raises:
        RuleNotFoundError: if the name is unknown in all three namespaces
    """
    resolution = find(rule)
    if resolution is None:
        raise RuleNotFoundError(rule.name)
    logger.debug(f"Resolved rule '{rule.name}' as {resolution.kind.value}")
    return resolution


def exists(rule: Rule) -> bool:
    return find(rule) is not None


def is_builtin(rule: Rule) -> bool:
    """Check whether the rule names a built-in validator.

    Options and actions are never reported as built-in.
    """
    _, builtin = VALIDATORS.lookup(rule.name)
    return builtin
