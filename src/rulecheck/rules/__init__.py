"""Rule models, grammar, registries and name resolution."""

from .models import (
    IGNORE,
    LAZY,
    REQUIRED,
    BoundValidator,
    Check,
    ExecutionPlan,
    Option,
    OptionList,
    Rule,
    Transform,
)
from .parser import parse
from .registry import (
    ACTIONS,
    OPTIONS,
    VALIDATORS,
    ActionMap,
    ValidatorMap,
    add_action,
    add_option,
    add_validator,
)
from .resolver import Resolution, RuleKind, exists, is_builtin, resolve
from .shortcuts import is_, rule

__all__ = [
    "Rule",
    "Option",
    "OptionList",
    "Check",
    "Transform",
    "BoundValidator",
    "ExecutionPlan",
    "REQUIRED",
    "IGNORE",
    "LAZY",
    "parse",
    "VALIDATORS",
    "OPTIONS",
    "ACTIONS",
    "ValidatorMap",
    "ActionMap",
    "add_validator",
    "add_option",
    "add_action",
    "Resolution",
    "RuleKind",
    "resolve",
    "exists",
    "is_builtin",
    "rule",
    "is_",
]
