"""Built-in rule catalog for Python's primitive value types."""

from .booleans import BooleanInvalidValueReason, IsFalseRule, IsTrueRule
from .chars import (
    CharInRangeRule,
    CharInvalidValueReason,
    CharIsDigitRule,
    CharIsLetterRule,
    CharIsWhitespaceRule,
    IsSpecialCharacterRule,
)
from .numbers import (
    FloatInvalidValueReason,
    FloatIsIntegerRule,
    IntInvalidValueReason,
    IsEvenFloatRule,
    IsEvenIntRule,
    IsNegativeFloatRule,
    IsNegativeIntRule,
    IsOddFloatRule,
    IsOddIntRule,
    IsPositiveFloatRule,
    IsPositiveFloatWithPrecisionRule,
    IsPositiveIntRule,
    IsZeroFloatRule,
    IsZeroIntRule,
    MaxValueFloatRule,
    MaxValueIntRule,
    MinValueFloatRule,
    MinValueIntRule,
)
from .strings import (
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
    StringInvalidValueReason,
    SubstringMaxLengthRule,
    SubstringMinLengthRule,
)

__all__ = [
    # Reasons
    "StringInvalidValueReason",
    "CharInvalidValueReason",
    "IntInvalidValueReason",
    "FloatInvalidValueReason",
    "BooleanInvalidValueReason",
    # String rules
    "IsNotEmptyRule",
    "MinLengthRule",
    "MaxLengthRule",
    "LengthEqualRule",
    "RegexMatchRule",
    "ContainsLettersRule",
    "LettersOnlyRule",
    "ContainsDigitRule",
    "DigitOnlyRule",
    "NoSpacesRule",
    "NoSpecialCharactersRule",
    "ContainsSpecialCharactersRule",
    "NoUppercaseRule",
    "NoLowercaseRule",
    "ContainsUppercaseRule",
    "ContainsLowercaseRule",
    "StartsWithRule",
    "EndsWithRule",
    "ContainsSubstringRule",
    "SubstringMinLengthRule",
    "SubstringMaxLengthRule",
    # Character rules
    "CharIsLetterRule",
    "CharIsDigitRule",
    "CharIsWhitespaceRule",
    "IsSpecialCharacterRule",
    "CharInRangeRule",
    # Integer rules
    "IsPositiveIntRule",
    "IsNegativeIntRule",
    "IsZeroIntRule",
    "MinValueIntRule",
    "MaxValueIntRule",
    "IsEvenIntRule",
    "IsOddIntRule",
    # Float rules
    "IsPositiveFloatRule",
    "IsNegativeFloatRule",
    "IsZeroFloatRule",
    "MinValueFloatRule",
    "MaxValueFloatRule",
    "IsEvenFloatRule",
    "IsOddFloatRule",
    "IsPositiveFloatWithPrecisionRule",
    "FloatIsIntegerRule",
    # Boolean rules
    "IsTrueRule",
    "IsFalseRule",
]
