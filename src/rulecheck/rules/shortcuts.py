"""Build rules in code instead of writing rule text.

    validate_value(email, is_.required(), is_.email(), is_.max(255))

Attribute names are rule names; a trailing underscore is dropped so
keyword-like names stay usable (``is_.in_("a", "b")``).
"""

from typing import Any

from .models import Option, Rule
from .registry import OPTIONS


def rule(name: str, *params: Any) -> Rule:
    return Rule(name, params)


class RuleNamespace:
    """Attribute access that returns rule or option builders."""

    def __getattr__(self, attribute: str):
        if attribute.startswith("__"):
            raise AttributeError(attribute)
        name = attribute[:-1] if attribute.endswith("_") else attribute

        if OPTIONS.has(name):
            def build_option(*params: Any) -> Option:
                return Option(name)
            build_option.__name__ = attribute
            return build_option

        def build_rule(*params: Any) -> Rule:
            return Rule(name, params)
        build_rule.__name__ = attribute
        return build_rule


is_ = RuleNamespace()
