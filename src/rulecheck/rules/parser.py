"""Rule specification grammar.

    spec   := clause ("|" clause)*
    clause := name [":" params]
    params := value ("," value)*

The ``regex`` clause keeps everything after its first colon as a single
parameter so patterns may contain commas and colons. Whitespace is never
trimmed.
"""

from .models import Rule

RULE_SEPARATOR = "|"
NAME_SEPARATOR = ":"
PARAM_SEPARATOR = ","
OPAQUE_RULES = frozenset({"regex"})


def parse_clause(clause: str) -> Rule:
    name, colon, rest = clause.partition(NAME_SEPARATOR)
    if not colon:
        return Rule(name)
    if name in OPAQUE_RULES:
        return Rule(name, (rest,))
    return Rule(name, tuple(rest.split(PARAM_SEPARATOR)))


def parse(spec: str) -> list[Rule]:
    """Parse a rule specification into rules, in order.

    Example:
        >>> [str(rule) for rule in parse("required|max:255|in:x,y,z")]
        ['required', 'max:255', 'in:x,y,z']
    """
    if not spec:
        return []
    return [parse_clause(clause) for clause in spec.split(RULE_SEPARATOR)]
