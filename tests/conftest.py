"""Shared fixtures for rulecheck tests."""

import pytest

from rulecheck.messages import MESSAGES
from rulecheck.rules import ACTIONS, OPTIONS, VALIDATORS
from rulecheck.validation import get_default_tag, set_default_tag


@pytest.fixture(autouse=True)
def restore_registries():
    """Undo registry, message and default tag changes made by a test."""
    validators = dict(VALIDATORS)
    options = list(OPTIONS)
    actions = dict(ACTIONS)
    messages = dict(MESSAGES)
    default_tag = get_default_tag()

    yield

    VALIDATORS.clear()
    VALIDATORS.update(validators)
    OPTIONS[:] = options
    ACTIONS.clear()
    ACTIONS.update(actions)
    MESSAGES.clear()
    MESSAGES.update(messages)
    set_default_tag(default_tag)
