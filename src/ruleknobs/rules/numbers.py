"""Rules for ``int`` and ``float`` values.

Python integers are unbounded, so a single family of integer rules covers
every fixed-width integer kind; use ``MinValueIntRule``/``MaxValueIntRule``
to enforce a width.
"""

from __future__ import annotations

import math
from enum import Enum

from ..exceptions import RuleConfigurationError
from ..reasons import InvalidValueReason
from ..result import CheckResult, check_result
from ..rule import ValidationRule


class IntInvalidValueReason(InvalidValueReason, Enum):
    """Reasons reported by the integer rules."""

    NOT_POSITIVE = "not_positive"
    NOT_NEGATIVE = "not_negative"
    NOT_ZERO = "not_zero"
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    NOT_EVEN = "not_even"
    NOT_ODD = "not_odd"


class FloatInvalidValueReason(InvalidValueReason, Enum):
    """Reasons reported by the float rules."""

    NOT_POSITIVE = "not_positive"
    NOT_NEGATIVE = "not_negative"
    NOT_ZERO = "not_zero"
    MIN_VALUE = "min_value"
    MAX_VALUE = "max_value"
    NOT_EVEN = "not_even"
    NOT_ODD = "not_odd"
    NOT_POSITIVE_WITH_PRECISION = "not_positive_with_precision"
    HAS_FRACTIONAL_PART = "has_fractional_part"


def _not_nan(rule: str, name: str, value: float) -> float:
    if isinstance(value, float) and math.isnan(value):
        raise RuleConfigurationError(
            f"{name} cannot be NaN",
            context={"rule": rule, name: value},
        )
    return value


# =============================================================================
# INTEGER RULES
# =============================================================================

class IsPositiveIntRule(ValidationRule[int]):
    def check(self, value: int) -> CheckResult:
        return check_result(value > 0, IntInvalidValueReason.NOT_POSITIVE)


class IsNegativeIntRule(ValidationRule[int]):
    def check(self, value: int) -> CheckResult:
        return check_result(value < 0, IntInvalidValueReason.NOT_NEGATIVE)


class IsZeroIntRule(ValidationRule[int]):
    def check(self, value: int) -> CheckResult:
        return check_result(value == 0, IntInvalidValueReason.NOT_ZERO)


class MinValueIntRule(ValidationRule[int]):
    """Integer must be greater than or equal to ``min_value``."""

    def __init__(self, min_value: int):
        self.min_value = min_value

    def check(self, value: int) -> CheckResult:
        return check_result(value >= self.min_value, IntInvalidValueReason.MIN_VALUE)


class MaxValueIntRule(ValidationRule[int]):
    """Integer must be less than or equal to ``max_value``."""

    def __init__(self, max_value: int):
        self.max_value = max_value

    def check(self, value: int) -> CheckResult:
        return check_result(value <= self.max_value, IntInvalidValueReason.MAX_VALUE)


class IsEvenIntRule(ValidationRule[int]):
    def check(self, value: int) -> CheckResult:
        return check_result(value % 2 == 0, IntInvalidValueReason.NOT_EVEN)


class IsOddIntRule(ValidationRule[int]):
    def check(self, value: int) -> CheckResult:
        return check_result(value % 2 != 0, IntInvalidValueReason.NOT_ODD)


# =============================================================================
# FLOAT RULES
# =============================================================================
# NaN fails every comparison, so it fails every rule below.

class IsPositiveFloatRule(ValidationRule[float]):
    def check(self, value: float) -> CheckResult:
        return check_result(value > 0, FloatInvalidValueReason.NOT_POSITIVE)


class IsNegativeFloatRule(ValidationRule[float]):
    def check(self, value: float) -> CheckResult:
        return check_result(value < 0, FloatInvalidValueReason.NOT_NEGATIVE)


class IsZeroFloatRule(ValidationRule[float]):
    def check(self, value: float) -> CheckResult:
        return check_result(value == 0.0, FloatInvalidValueReason.NOT_ZERO)


class MinValueFloatRule(ValidationRule[float]):
    """Float must be greater than or equal to ``min_value``."""

    def __init__(self, min_value: float):
        self.min_value = _not_nan("MinValueFloatRule", "min_value", min_value)

    def check(self, value: float) -> CheckResult:
        return check_result(value >= self.min_value, FloatInvalidValueReason.MIN_VALUE)


class MaxValueFloatRule(ValidationRule[float]):
    """Float must be less than or equal to ``max_value``."""

    def __init__(self, max_value: float):
        self.max_value = _not_nan("MaxValueFloatRule", "max_value", max_value)

    def check(self, value: float) -> CheckResult:
        return check_result(value <= self.max_value, FloatInvalidValueReason.MAX_VALUE)


class IsEvenFloatRule(ValidationRule[float]):
    """Float must be a whole number divisible by two."""

    def check(self, value: float) -> CheckResult:
        return check_result(
            math.isfinite(value) and value % 2 == 0.0, FloatInvalidValueReason.NOT_EVEN
        )


class IsOddFloatRule(ValidationRule[float]):
    """Float must be a whole number with remainder one when divided by two."""

    def check(self, value: float) -> CheckResult:
        return check_result(
            math.isfinite(value) and value % 2 == 1.0, FloatInvalidValueReason.NOT_ODD
        )


class IsPositiveFloatWithPrecisionRule(ValidationRule[float]):
    """Float must exceed ``precision``, treating smaller values as zero."""

    def __init__(self, precision: float):
        _not_nan("IsPositiveFloatWithPrecisionRule", "precision", precision)
        if precision < 0:
            raise RuleConfigurationError(
                f"precision cannot be negative: {precision}",
                context={"rule": "IsPositiveFloatWithPrecisionRule", "precision": precision},
            )
        self.precision = precision

    def check(self, value: float) -> CheckResult:
        return check_result(
            value > self.precision, FloatInvalidValueReason.NOT_POSITIVE_WITH_PRECISION
        )


class FloatIsIntegerRule(ValidationRule[float]):
    def check(self, value: float) -> CheckResult:
        return check_result(
            math.isfinite(value) and value % 1 == 0.0,
            FloatInvalidValueReason.HAS_FRACTIONAL_PART,
        )
