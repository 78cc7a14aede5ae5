"""Rules for ``str`` values."""

from __future__ import annotations

import re
from enum import Enum
from re import Pattern as RegexPattern

from ..exceptions import RuleConfigurationError, RuleContractError
from ..reasons import InvalidValueReason
from ..result import CheckResult, check_result
from ..rule import ValidationRule


class StringInvalidValueReason(InvalidValueReason, Enum):
    """Reasons reported by the string rules."""

    EMPTY = "empty"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    LENGTH_NOT_EQUAL = "length_not_equal"
    INVALID_FORMAT = "invalid_format"
    MISSING_LETTERS = "missing_letters"
    ONLY_LETTERS = "only_letters"
    MISSING_DIGIT = "missing_digit"
    ONLY_DIGIT = "only_digit"
    SPACES_NOT_ALLOWED = "spaces_not_allowed"
    SPECIAL_CHARACTERS_NOT_ALLOWED = "special_characters_not_allowed"
    MISSING_SPECIAL_CHARACTERS = "missing_special_characters"
    UPPERCASE_NOT_ALLOWED = "uppercase_not_allowed"
    LOWERCASE_NOT_ALLOWED = "lowercase_not_allowed"
    MISSING_UPPERCASE = "missing_uppercase"
    MISSING_LOWERCASE = "missing_lowercase"
    NOT_STARTS_WITH = "not_starts_with"
    NOT_ENDS_WITH = "not_ends_with"
    NOT_CONTAIN_SUBSTRING = "not_contain_substring"
    SUBSTRING_LENGTH_TOO_SHORT = "substring_length_too_short"
    SUBSTRING_LENGTH_TOO_LONG = "substring_length_too_long"


def _non_negative(rule: str, name: str, value: int) -> int:
    if value < 0:
        raise RuleConfigurationError(
            f"{name} cannot be negative: {value}",
            context={"rule": rule, name: value},
        )
    return value


class IsNotEmptyRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(len(value) > 0, StringInvalidValueReason.EMPTY)


class MinLengthRule(ValidationRule[str]):
    """String must be at least ``min_length`` characters long."""

    def __init__(self, min_length: int):
        self.min_length = _non_negative("MinLengthRule", "min_length", min_length)

    def check(self, value: str) -> CheckResult:
        return check_result(len(value) >= self.min_length, StringInvalidValueReason.MIN_LENGTH)


class MaxLengthRule(ValidationRule[str]):
    """String must be at most ``max_length`` characters long."""

    def __init__(self, max_length: int):
        self.max_length = _non_negative("MaxLengthRule", "max_length", max_length)

    def check(self, value: str) -> CheckResult:
        return check_result(len(value) <= self.max_length, StringInvalidValueReason.MAX_LENGTH)


class LengthEqualRule(ValidationRule[str]):
    """String must be exactly ``length`` characters long."""

    def __init__(self, length: int):
        self.length = _non_negative("LengthEqualRule", "length", length)

    def check(self, value: str) -> CheckResult:
        return check_result(len(value) == self.length, StringInvalidValueReason.LENGTH_NOT_EQUAL)


class RegexMatchRule(ValidationRule[str]):
    """Whole string must match a regular expression."""

    def __init__(self, pattern: str | RegexPattern):
        """Initialize regex rule.

        Args:
            pattern: Regex pattern (string or compiled pattern)
        """
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise RuleConfigurationError(
                    f"Invalid regular expression {pattern!r}: {e}",
                    context={"rule": "RegexMatchRule", "pattern": pattern},
                ) from e
        elif isinstance(pattern, RegexPattern):
            self.regex = pattern
        else:
            raise RuleConfigurationError(
                f"pattern must be a string or compiled pattern, got {type(pattern).__name__}",
                context={"rule": "RegexMatchRule", "pattern_type": type(pattern).__name__},
            )

    def check(self, value: str) -> CheckResult:
        return check_result(
            self.regex.fullmatch(value) is not None,
            StringInvalidValueReason.INVALID_FORMAT,
        )


class ContainsLettersRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            any(c.isalpha() for c in value), StringInvalidValueReason.MISSING_LETTERS
        )


class LettersOnlyRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            all(c.isalpha() for c in value), StringInvalidValueReason.ONLY_LETTERS
        )


class ContainsDigitRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            any(c.isdigit() for c in value), StringInvalidValueReason.MISSING_DIGIT
        )


class DigitOnlyRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            all(c.isdigit() for c in value), StringInvalidValueReason.ONLY_DIGIT
        )


class NoSpacesRule(ValidationRule[str]):
    """String must not contain the space character."""

    def check(self, value: str) -> CheckResult:
        return check_result(" " not in value, StringInvalidValueReason.SPACES_NOT_ALLOWED)


class NoSpecialCharactersRule(ValidationRule[str]):
    """Every character must be a letter or a digit."""

    def check(self, value: str) -> CheckResult:
        return check_result(
            all(c.isalnum() for c in value),
            StringInvalidValueReason.SPECIAL_CHARACTERS_NOT_ALLOWED,
        )


class ContainsSpecialCharactersRule(ValidationRule[str]):
    """At least one character must be neither a letter nor a digit."""

    def check(self, value: str) -> CheckResult:
        return check_result(
            any(not c.isalnum() for c in value),
            StringInvalidValueReason.MISSING_SPECIAL_CHARACTERS,
        )


class NoUppercaseRule(ValidationRule[str]):
    """String must not contain uppercase letters. Digits and symbols are allowed."""

    def check(self, value: str) -> CheckResult:
        return check_result(
            not any(c.isupper() for c in value),
            StringInvalidValueReason.UPPERCASE_NOT_ALLOWED,
        )


class NoLowercaseRule(ValidationRule[str]):
    """String must not contain lowercase letters. Digits and symbols are allowed."""

    def check(self, value: str) -> CheckResult:
        return check_result(
            not any(c.islower() for c in value),
            StringInvalidValueReason.LOWERCASE_NOT_ALLOWED,
        )


class ContainsUppercaseRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            any(c.isupper() for c in value), StringInvalidValueReason.MISSING_UPPERCASE
        )


class ContainsLowercaseRule(ValidationRule[str]):
    def check(self, value: str) -> CheckResult:
        return check_result(
            any(c.islower() for c in value), StringInvalidValueReason.MISSING_LOWERCASE
        )


class StartsWithRule(ValidationRule[str]):
    def __init__(self, prefix: str):
        self.prefix = prefix

    def check(self, value: str) -> CheckResult:
        return check_result(value.startswith(self.prefix), StringInvalidValueReason.NOT_STARTS_WITH)


class EndsWithRule(ValidationRule[str]):
    def __init__(self, suffix: str):
        self.suffix = suffix

    def check(self, value: str) -> CheckResult:
        return check_result(value.endswith(self.suffix), StringInvalidValueReason.NOT_ENDS_WITH)


class ContainsSubstringRule(ValidationRule[str]):
    """String must contain ``substring``, optionally ignoring case."""

    def __init__(self, substring: str, ignore_case: bool = False):
        self.substring = substring
        self.ignore_case = ignore_case

    def check(self, value: str) -> CheckResult:
        if self.ignore_case:
            found = self.substring.casefold() in value.casefold()
        else:
            found = self.substring in value
        return check_result(found, StringInvalidValueReason.NOT_CONTAIN_SUBSTRING)


class _SubstringLengthRule(ValidationRule[str]):
    """Shared bounds handling for the substring length rules.

    The ``[start_index, end_index)`` range must lie inside every value the
    rule is applied to. A value too short for the range is a usage error
    and raises instead of being reported as a reason.
    """

    def __init__(self, start_index: int, end_index: int, limit: int):
        rule = type(self).__name__
        _non_negative(rule, "start_index", start_index)
        _non_negative(rule, "limit", limit)
        if end_index < start_index:
            raise RuleConfigurationError(
                f"end_index ({end_index}) cannot be less than start_index ({start_index})",
                context={"rule": rule, "start_index": start_index, "end_index": end_index},
            )
        self.start_index = start_index
        self.end_index = end_index
        self.limit = limit

    def _substring(self, value: str) -> str:
        if self.end_index > len(value):
            raise RuleContractError(
                f"{self.name}: range [{self.start_index}, {self.end_index}) "
                f"is outside a value of length {len(value)}",
                context={
                    "rule": self.name,
                    "start_index": self.start_index,
                    "end_index": self.end_index,
                    "length": len(value),
                },
            )
        return value[self.start_index:self.end_index]


class SubstringMinLengthRule(_SubstringLengthRule):
    """``value[start_index:end_index]`` must be at least ``min_length`` long."""

    def __init__(self, start_index: int, end_index: int, min_length: int):
        super().__init__(start_index, end_index, min_length)

    def check(self, value: str) -> CheckResult:
        return check_result(
            len(self._substring(value)) >= self.limit,
            StringInvalidValueReason.SUBSTRING_LENGTH_TOO_SHORT,
        )


class SubstringMaxLengthRule(_SubstringLengthRule):
    """``value[start_index:end_index]`` must be at most ``max_length`` long."""

    def __init__(self, start_index: int, end_index: int, max_length: int):
        super().__init__(start_index, end_index, max_length)

    def check(self, value: str) -> CheckResult:
        return check_result(
            len(self._substring(value)) <= self.limit,
            StringInvalidValueReason.SUBSTRING_LENGTH_TOO_LONG,
        )
