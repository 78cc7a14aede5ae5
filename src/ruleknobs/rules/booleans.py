"""Rules for ``bool`` values."""

from __future__ import annotations

from enum import Enum

from ..reasons import InvalidValueReason
from ..result import CheckResult, check_result
from ..rule import ValidationRule


class BooleanInvalidValueReason(InvalidValueReason, Enum):
    NOT_TRUE = "not_true"
    NOT_FALSE = "not_false"


class IsTrueRule(ValidationRule[bool]):
    def check(self, value: bool) -> CheckResult:
        return check_result(value is True, BooleanInvalidValueReason.NOT_TRUE)


class IsFalseRule(ValidationRule[bool]):
    def check(self, value: bool) -> CheckResult:
        return check_result(value is False, BooleanInvalidValueReason.NOT_FALSE)
