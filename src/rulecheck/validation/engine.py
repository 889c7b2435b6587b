"""Execution of rules against a single value.

A call runs through fixed stages: collect every argument into an
execution plan, apply transforms in order, stop early for ``ignore``,
stop early for empty values unless ``required`` is present, then run
the validators in the order given. With ``lazy`` the run stops at
the first failure. Exceptions raised by validators propagate unchanged.
"""

import logging
from typing import Any

from ..exceptions import ArgumentShapeError, RulecheckError
from ..metrics import is_empty, measure
from ..results import ErrorList, Failure
from ..rules.models import (
    IGNORE,
    LAZY,
    REQUIRED,
    Action,
    BoundValidator,
    Check,
    ExecutionPlan,
    Option,
    Rule,
    Transform,
    Validator,
)
from ..rules.parser import parse
from ..rules.resolver import RuleKind, resolve

logger = logging.getLogger(__name__)


def by(function: Validator, *params: Any, name: str | None = None) -> Check:
    """Reference a validator function directly, binding its params."""
    return Check(function, params, name)


def transform(function: Action) -> Transform:
    """Mark a function as a value transform for validate_value."""
    return Transform(function)


def _add_rule(plan: ExecutionPlan, rule: Rule) -> None:
    resolution = resolve(rule)
    if resolution.kind == RuleKind.VALIDATOR:
        plan.validators.append(BoundValidator(rule.name, resolution.target, rule.params, resolution.builtin))
    elif resolution.kind == RuleKind.OPTION:
        plan.options.add(resolution.target)
    else:
        plan.add_action(resolution.target)


def prepare_rules(*args: Any) -> ExecutionPlan:
    """Group rule text, rule objects, options, transforms and validators into a plan.

    Raises:
        RuleNotFoundError: if a rule name is not registered anywhere
        ArgumentShapeError: if an argument is none of the accepted shapes
    """
    plan = ExecutionPlan()

    for arg in args:
        if isinstance(arg, Option):
            plan.options.add(arg)
        elif isinstance(arg, str):
            for rule in parse(arg):
                _add_rule(plan, rule)
        elif isinstance(arg, Rule):
            _add_rule(plan, arg)
        elif isinstance(arg, Check):
            plan.validators.append(BoundValidator(arg.rule_name, arg.function, arg.params))
        elif isinstance(arg, Transform):
            plan.add_action(arg.function)
        elif callable(arg):
            plan.validators.append(BoundValidator(getattr(arg, "__name__", "custom"), arg))
        else:
            raise ArgumentShapeError(arg)

    logger.debug(
        f"Prepared plan: {len(plan.validators)} validators, "
        f"options {list(plan.options)}, {len(plan.actions)} actions"
    )
    return plan


def _as_failure(result: Any, rule: str) -> Failure | None:
    if result is None or isinstance(result, Failure):
        return result
    if isinstance(result, (str, Exception)):
        return Failure(rule, str(result))
    raise RulecheckError(f"Validator {rule!r} returned {type(result).__name__}; expected None, str or Failure")


def run_plan(plan: ExecutionPlan, value: Any) -> ErrorList:
    """Execute a prepared plan against a value."""
    errors = ErrorList()

    for action in plan.actions.values():
        value = action(value)

    if plan.options.has(IGNORE):
        logger.debug("Skipping validation: ignore option present")
        return errors

    measured = measure(value)
    if not plan.options.has(REQUIRED) and is_empty(measured):
        logger.debug("Skipping validation: empty value without required option")
        return errors

    for validator in plan.validators:
        argument = measured if validator.builtin else value
        failure = _as_failure(validator.function(argument, *validator.params), validator.name)
        if failure is None:
            continue
        errors.append(failure)
        if plan.options.has(LAZY):
            logger.debug(f"Stopping after '{validator.name}': lazy option present")
            return errors

    return errors


def validate_value(value: Any, *args: Any) -> ErrorList:
    """Validate one value.

    Args:
        value: Any value
        *args: Rule text (``"required|max:255"``), ``Rule`` objects,
            options, ``by()`` validator references, plain validator
            callables and ``transform()`` wrapped functions, in any mix

    Returns:
        ErrorList of failures, empty when the value passed
    """
    return run_plan(prepare_rules(*args), value)
