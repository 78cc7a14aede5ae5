"""Live validated value holder.

``Validated`` pairs a mutable value with a rule list fixed at construction
and keeps the value's reasons up to date. Every write goes through
``set_value``, which re-checks the new value and replaces the stored reasons.

Example:
    ```python
    name = Validated("John", combine(IsNotEmptyRule(), MinLengthRule(5)))
    name.is_valid
    # False

    name.set_value("Jonathan")
    name.is_valid
    # True
    ```
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from .rule import ValidationRulesComposition, resolve_rules
from .validation import Invalid, Valid, Validation

if TYPE_CHECKING:
    from .reasons import InvalidValueReason
    from .rule import RuleSource, ValidationRule

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValidityState(Enum):
    """Validity of a ``Validated`` holder, derived from its reasons."""

    VALID = "valid"
    INVALID = "invalid"


class Validated(Generic[T]):
    """Mutable value cell that re-validates on every write.

    The rule list is resolved once, when the holder is built. A composition
    is asked for its rules against the initial value only; later values are
    checked against that same frozen list even if the composition would pick
    different rules for them.

    The holder is meant for a single owner and is not synchronized.

    Args:
        initial_value: Value to hold and validate immediately
        rules: Single rule, sequence of rules, or composition
    """

    def __init__(self, initial_value: T, rules: RuleSource[T]):
        """Initialize holder and validate ``initial_value``.

        Raises:
            RuleContractError: If ``rules`` is not a valid rule source
        """
        self._rules: tuple[ValidationRule[T], ...] = tuple(resolve_rules(rules, initial_value))
        if isinstance(rules, ValidationRulesComposition):
            logger.debug(
                f"Froze {len(self._rules)} rule(s) from {type(rules).__name__} "
                f"for initial value {initial_value!r}"
            )
        self._value = initial_value
        self._errors: tuple[InvalidValueReason, ...] = self._check(initial_value).errors

    @property
    def value(self) -> T:
        """The current value."""
        return self._value

    @property
    def rules(self) -> tuple[ValidationRule[T], ...]:
        """The frozen rules applied on every write."""
        return self._rules

    @property
    def errors(self) -> tuple[InvalidValueReason, ...]:
        """Reasons from the latest validation, in rule order."""
        return self._errors

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def is_invalid(self) -> bool:
        return bool(self._errors)

    @property
    def state(self) -> ValidityState:
        return ValidityState.VALID if self.is_valid else ValidityState.INVALID

    def set_value(self, new_value: T) -> Validation[T]:
        """Replace the value and re-validate it.

        The stored reasons are replaced wholesale by those of ``new_value``;
        nothing is carried over from the previous value. If a rule raises,
        the holder keeps its previous value and reasons.

        Args:
            new_value: Value to hold

        Returns:
            Snapshot for ``new_value``

        Raises:
            RuleContractError: If a rule is misused for ``new_value``
        """
        previous = self.state
        result = self._check(new_value)
        self._value = new_value
        self._errors = result.errors
        if self.state is not previous:
            logger.debug(f"Validated value moved from {previous.value} to {self.state.value}")
        return result

    def snapshot(self) -> Validation[T]:
        """Return the current value and reasons as a snapshot, without re-checking."""
        if self._errors:
            return Invalid(self._value, self._errors)
        return Valid(self._value)

    def _check(self, value: T) -> Validation[T]:
        return Validation.unit(value).bind_all(self._rules)

    def __repr__(self) -> str:
        return f"Validated(value={self._value!r}, state={self.state.value}, errors={list(self._errors)!r})"


# Holders for the primitive value types. Characters are one-character strings.
ValidatedString = Validated[str]
ValidatedChar = Validated[str]
ValidatedInt = Validated[int]
ValidatedFloat = Validated[float]
ValidatedBoolean = Validated[bool]
