"""Shared fixtures and helper rules for ruleknobs tests."""

import sys
from enum import Enum
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ruleknobs import (  # noqa: E402
    PASSED,
    Failed,
    InvalidValueReason,
    ValidationRule,
    ValidationRulesComposition,
)


class SampleReason(InvalidValueReason, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


class AlwaysValidRule(ValidationRule):
    def check(self, value):
        return PASSED


class AlwaysInvalidRule(ValidationRule):
    def __init__(self, reason):
        self.reason = reason

    def check(self, value):
        return Failed(self.reason)


class ShortStringRule(ValidationRule):
    """Fails with TOO_SHORT when the string is shorter than ``min_length``."""

    def __init__(self, min_length):
        self.min_length = min_length

    def check(self, value):
        return PASSED if len(value) >= self.min_length else Failed(SampleReason.TOO_SHORT)


class CountingRule(ValidationRule):
    """Records every value it checks."""

    def __init__(self, reason=None):
        self.reason = reason
        self.seen = []

    def check(self, value):
        self.seen.append(value)
        return PASSED if self.reason is None else Failed(self.reason)


class EmptyComposition(ValidationRulesComposition):
    def rules_for(self, value):
        return []


class LengthComposition(ValidationRulesComposition):
    """Picks a stricter minimum length for values starting with 'admin'."""

    def __init__(self):
        self.calls = 0

    def rules_for(self, value):
        self.calls += 1
        if value.startswith("admin"):
            return [ShortStringRule(10)]
        return [ShortStringRule(3)]


@pytest.fixture
def always_valid():
    return AlwaysValidRule()


@pytest.fixture
def always_empty():
    return AlwaysInvalidRule(SampleReason.EMPTY)


@pytest.fixture
def min_length_five():
    return ShortStringRule(5)
