"""Rules for single characters, given as one-character ``str`` values."""

from __future__ import annotations

from enum import Enum

from ..exceptions import RuleConfigurationError
from ..reasons import InvalidValueReason
from ..result import CheckResult, check_result
from ..rule import ValidationRule


class CharInvalidValueReason(InvalidValueReason, Enum):
    """Reasons reported by the character rules."""

    NOT_A_LETTER = "not_a_letter"
    NOT_A_DIGIT = "not_a_digit"
    NOT_WHITESPACE = "not_whitespace"
    NOT_SPECIAL_CHARACTER = "not_special_character"
    NOT_IN_RANGE = "not_in_range"


class CharIsLetterRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(value.isalpha(), CharInvalidValueReason.NOT_A_LETTER)


class CharIsDigitRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(value.isdigit(), CharInvalidValueReason.NOT_A_DIGIT)


class CharIsWhitespaceRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(value.isspace(), CharInvalidValueReason.NOT_WHITESPACE)


class IsSpecialCharacterRule(ValidationRule[str]):
    """Character must be neither a letter nor a digit."""

    def check(self, value: str) -> CheckResult:
        return check_result(
            len(value) == 1 and not value.isalnum(),
            CharInvalidValueReason.NOT_SPECIAL_CHARACTER,
        )


class CharInRangeRule(ValidationRule[str]):
    """Character must fall within ``[min_char, max_char]`` by code point."""

    def __init__(self, min_char: str, max_char: str):
        for name, bound in (("min_char", min_char), ("max_char", max_char)):
            if not isinstance(bound, str) or len(bound) != 1:
                raise RuleConfigurationError(
                    f"{name} must be a single character: {bound!r}",
                    context={"rule": "CharInRangeRule", name: bound},
                )
        if min_char > max_char:
            raise RuleConfigurationError(
                f"min_char ({min_char!r}) cannot be greater than max_char ({max_char!r})",
                context={"rule": "CharInRangeRule", "min_char": min_char, "max_char": max_char},
            )
        self.min_char = min_char
        self.max_char = max_char

    def check(self, value: str) -> CheckResult:
        return check_result(
            len(value) == 1 and self.min_char <= value <= self.max_char,
            CharInvalidValueReason.NOT_IN_RANGE,
        )
