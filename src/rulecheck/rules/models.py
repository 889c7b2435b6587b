"""Rule, option, transform and execution plan models."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Validator = Callable[..., Any]
Action = Callable[[Any], Any]


@dataclass(frozen=True)
class Rule:
    """One clause of a rule specification: a name and positional params."""
    name: str
    params: tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    def __str__(self) -> str:
        if not self.params:
            return self.name
        return f"{self.name}:{','.join(str(param) for param in self.params)}"


class Option(str):
    """Execution flag that changes how validation runs, not what it checks."""

    def __repr__(self) -> str:
        return f"Option({str.__repr__(self)})"


# Empty values are validated instead of passing trivially
REQUIRED = Option("required")
# Validation is skipped entirely
IGNORE = Option("ignore")
# Validation stops at the first failure
LAZY = Option("lazy")


class OptionList(list):
    """Ordered collection of options."""

    def has(self, option: str) -> bool:
        return any(option == item for item in self)

    def add(self, option: str) -> None:
        self.append(option if isinstance(option, Option) else Option(option))


@dataclass(frozen=True)
class Check:
    """A direct validator reference with bound parameters."""
    function: Validator
    params: tuple[Any, ...] = ()
    name: str | None = None

    @property
    def rule_name(self) -> str:
        return self.name or getattr(self.function, "__name__", "custom")


@dataclass(frozen=True)
class Transform:
    """A value → value function applied before validation."""
    function: Action

    def __call__(self, value: Any) -> Any:
        return self.function(value)


@dataclass(frozen=True)
class BoundValidator:
    """A validator ready to run: function, params and how to pass the value."""
    name: str
    function: Validator
    params: tuple[Any, ...] = ()
    builtin: bool = False


@dataclass
class ExecutionPlan:
    """Resolved validators, options and transforms for one validation call."""
    validators: list[BoundValidator] = field(default_factory=list)
    options: OptionList = field(default_factory=OptionList)
    actions: dict[str, Action] = field(default_factory=dict)

    def add_action(self, action: Action) -> None:
        # Unnamed transforms each get their own slot, in insertion order
        self.actions[f"_{len(self.actions)}_"] = action
