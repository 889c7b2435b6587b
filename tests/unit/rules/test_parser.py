"""Tests for the rule specification grammar."""

from rulecheck.rules import Rule, parse


class TestParse:
    """Test parse()."""

    def test_mixed_specification(self):
        rules = parse("required|max:255|in:x,y,z")

        assert len(rules) == 3
        assert rules[0] == Rule("required")
        assert rules[1] == Rule("max", ("255",))
        assert rules[2] == Rule("in", ("x", "y", "z"))

    def test_empty_specification_yields_no_rules(self):
        assert parse("") == []

    def test_rule_without_params(self):
        rules = parse("email")

        assert rules == [Rule("email")]
        assert rules[0].params == ()

    def test_regex_keeps_single_parameter(self):
        """Commas and colons inside a pattern stay in one parameter."""
        rules = parse(r"regex:^\d{1,3}:[a-z]+$|max:10")

        assert rules[0] == Rule("regex", (r"^\d{1,3}:[a-z]+$",))
        assert rules[1] == Rule("max", ("10",))

    def test_only_first_colon_splits_name(self):
        rules = parse("date_gte:15:04:05,now")

        assert rules == [Rule("date_gte", ("15:04:05", "now"))]

    def test_whitespace_is_preserved(self):
        rules = parse(" required | in: a ,b")

        assert rules[0].name == " required "
        assert rules[1] == Rule(" in", (" a ", "b"))

    def test_trailing_separator_yields_empty_name(self):
        rules = parse("required|")

        assert len(rules) == 2
        assert rules[1].name == ""

    def test_empty_params_are_kept(self):
        assert parse("in:,x,") == [Rule("in", ("", "x", ""))]


class TestRule:
    """Test the Rule model."""

    def test_params_are_converted_to_tuple(self):
        rule = Rule("in", ["a", "b"])

        assert rule.params == ("a", "b")

    def test_str_renders_clause(self):
        assert str(Rule("in", ("a", "b"))) == "in:a,b"
        assert str(Rule("email")) == "email"

    def test_rules_are_hashable(self):
        assert len({Rule("max", ("1",)), Rule("max", ("1",))}) == 1
