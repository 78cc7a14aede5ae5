"""Tests for the built-in string rules."""

import re

import pytest

from ruleknobs import PASSED, Failed, RuleConfigurationError, RuleContractError, validate
from ruleknobs.rules import (
    ContainsDigitRule,
    ContainsLettersRule,
    ContainsLowercaseRule,
    ContainsSpecialCharactersRule,
    ContainsSubstringRule,
    ContainsUppercaseRule,
    DigitOnlyRule,
    EndsWithRule,
    IsNotEmptyRule,
    LengthEqualRule,
    LettersOnlyRule,
    MaxLengthRule,
    MinLengthRule,
    NoLowercaseRule,
    NoSpacesRule,
    NoSpecialCharactersRule,
    NoUppercaseRule,
    RegexMatchRule,
    StartsWithRule,
    StringInvalidValueReason as Reason,
    SubstringMaxLengthRule,
    SubstringMinLengthRule,
)


@pytest.mark.parametrize(
    "rule, passing, failing, reason",
    [
        (IsNotEmptyRule(), "a", "", Reason.EMPTY),
        (MinLengthRule(3), "abc", "ab", Reason.MIN_LENGTH),
        (MaxLengthRule(3), "abc", "abcd", Reason.MAX_LENGTH),
        (LengthEqualRule(2), "ab", "abc", Reason.LENGTH_NOT_EQUAL),
        (ContainsLettersRule(), "12a", "123", Reason.MISSING_LETTERS),
        (LettersOnlyRule(), "abc", "ab1", Reason.ONLY_LETTERS),
        (ContainsDigitRule(), "ab1", "abc", Reason.MISSING_DIGIT),
        (DigitOnlyRule(), "123", "12a", Reason.ONLY_DIGIT),
        (NoSpacesRule(), "a_b", "a b", Reason.SPACES_NOT_ALLOWED),
        (NoSpecialCharactersRule(), "ab12", "ab-12", Reason.SPECIAL_CHARACTERS_NOT_ALLOWED),
        (ContainsSpecialCharactersRule(), "ab!", "ab1", Reason.MISSING_SPECIAL_CHARACTERS),
        (NoUppercaseRule(), "abc1!", "aBc", Reason.UPPERCASE_NOT_ALLOWED),
        (NoLowercaseRule(), "ABC1!", "AbC", Reason.LOWERCASE_NOT_ALLOWED),
        (ContainsUppercaseRule(), "aBc", "abc", Reason.MISSING_UPPERCASE),
        (ContainsLowercaseRule(), "AbC", "ABC", Reason.MISSING_LOWERCASE),
        (StartsWithRule("ab"), "abc", "cab", Reason.NOT_STARTS_WITH),
        (EndsWithRule("bc"), "abc", "bca", Reason.NOT_ENDS_WITH),
        (ContainsSubstringRule("lo w"), "hello world", "hello", Reason.NOT_CONTAIN_SUBSTRING),
    ],
)
def test_string_rule_pass_and_fail(rule, passing, failing, reason):
    assert rule.check(passing) is PASSED
    assert rule.check(failing) == Failed(reason)


class TestLengthRules:
    """Test length rule boundaries and parameters."""

    def test_boundaries_are_inclusive(self):
        assert MinLengthRule(0).check("") is PASSED
        assert MaxLengthRule(0).check("") is PASSED

    @pytest.mark.parametrize("rule_class", [MinLengthRule, MaxLengthRule, LengthEqualRule])
    def test_negative_length_rejected(self, rule_class):
        with pytest.raises(RuleConfigurationError, match="cannot be negative"):
            rule_class(-1)


class TestRegexMatchRule:
    """Test whole-string regex matching."""

    def test_requires_full_match(self):
        rule = RegexMatchRule(r"[a-z]+")
        assert rule.check("abc") is PASSED
        assert rule.check("abc1") == Failed(Reason.INVALID_FORMAT)

    def test_accepts_compiled_pattern(self):
        rule = RegexMatchRule(re.compile(r"\d{3}", re.ASCII))
        assert rule.check("123") is PASSED
        assert rule.check("12") == Failed(Reason.INVALID_FORMAT)

    def test_invalid_pattern_rejected(self):
        with pytest.raises(RuleConfigurationError, match="Invalid regular expression"):
            RegexMatchRule("[unclosed")

    @pytest.mark.parametrize("pattern", [42, None, b"[a-z]+"])
    def test_non_pattern_rejected(self, pattern):
        with pytest.raises(RuleConfigurationError, match="string or compiled pattern"):
            RegexMatchRule(pattern)


class TestCharacterClassRules:
    """Test character class edge cases."""

    def test_only_rules_accept_empty_string(self):
        assert LettersOnlyRule().check("") is PASSED
        assert DigitOnlyRule().check("") is PASSED
        assert NoSpecialCharactersRule().check("") is PASSED

    def test_contains_rules_reject_empty_string(self):
        assert ContainsLettersRule().check("") == Failed(Reason.MISSING_LETTERS)
        assert ContainsDigitRule().check("") == Failed(Reason.MISSING_DIGIT)

    def test_space_counts_as_special_character(self):
        assert ContainsSpecialCharactersRule().check("a b") is PASSED

    def test_unicode_letters(self):
        assert LettersOnlyRule().check("héllo") is PASSED


class TestContainsSubstringRule:
    def test_case_sensitive_by_default(self):
        assert ContainsSubstringRule("World").check("hello world") == Failed(
            Reason.NOT_CONTAIN_SUBSTRING
        )

    def test_ignore_case(self):
        assert ContainsSubstringRule("World", ignore_case=True).check("hello WORLD") is PASSED


class TestSubstringLengthRules:
    """Test substring range rules and their bounds contract."""

    def test_min_length(self):
        rule = SubstringMinLengthRule(1, 4, 3)
        assert rule.check("abcdef") is PASSED

    def test_min_length_too_short(self):
        rule = SubstringMinLengthRule(1, 3, 3)
        assert rule.check("abcdef") == Failed(Reason.SUBSTRING_LENGTH_TOO_SHORT)

    def test_max_length(self):
        assert SubstringMaxLengthRule(0, 2, 2).check("abcdef") is PASSED
        assert SubstringMaxLengthRule(0, 3, 2).check("abcdef") == Failed(
            Reason.SUBSTRING_LENGTH_TOO_LONG
        )

    def test_range_outside_value_raises(self):
        rule = SubstringMinLengthRule(2, 10, 1)
        with pytest.raises(RuleContractError) as exc_info:
            rule.check("abcd")
        assert exc_info.value.context["length"] == 4
        assert exc_info.value.context["end_index"] == 10

    def test_range_error_is_not_folded_into_reasons(self):
        with pytest.raises(RuleContractError):
            validate("ab", [MinLengthRule(5), SubstringMaxLengthRule(0, 5, 1)])

    def test_end_before_start_rejected(self):
        with pytest.raises(RuleConfigurationError, match="end_index"):
            SubstringMaxLengthRule(4, 2, 1)

    def test_negative_start_rejected(self):
        with pytest.raises(RuleConfigurationError, match="start_index"):
            SubstringMinLengthRule(-1, 2, 1)


class TestPasswordScenario:
    """Test collecting every unmet password requirement."""

    def test_all_failures_reported_in_order(self):
        rules = [
            MinLengthRule(12),
            ContainsDigitRule(),
            ContainsSpecialCharactersRule(),
            ContainsUppercaseRule(),
        ]
        result = validate("password", rules)
        assert result.errors == (
            Reason.MIN_LENGTH,
            Reason.MISSING_DIGIT,
            Reason.MISSING_SPECIAL_CHARACTERS,
            Reason.MISSING_UPPERCASE,
        )

    def test_strong_password_passes(self):
        rules = [MinLengthRule(12), ContainsDigitRule(), ContainsSpecialCharactersRule()]
        assert validate("correct-horse-42", rules).is_valid
