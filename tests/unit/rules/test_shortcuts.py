"""Tests for rule shortcuts."""

from rulecheck.rules import LAZY, REQUIRED, Option, Rule, add_option, is_, rule


class TestRuleShortcuts:
    """Test rule() and the is_ namespace."""

    def test_rule_builds_rule(self):
        assert rule("max", 255) == Rule("max", (255,))

    def test_namespace_builds_validator_rules(self):
        assert is_.email() == Rule("email")
        assert is_.max(255) == Rule("max", (255,))
        assert is_.has_keys("a", "b") == Rule("has_keys", ("a", "b"))

    def test_trailing_underscore_is_dropped(self):
        assert is_.in_("a", "b") == Rule("in", ("a", "b"))

    def test_namespace_builds_options(self):
        assert is_.required() == REQUIRED
        assert isinstance(is_.lazy(), Option)
        assert is_.lazy() == LAZY

    def test_registered_options_are_recognized(self):
        add_option("audit")

        assert is_.audit() == Option("audit")
