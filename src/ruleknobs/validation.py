"""Error-accumulating validation snapshots.

A ``Validation`` is an immutable snapshot of a subject value together with
every reason collected so far. It has exactly two variants:

- ``Valid(value)``: no reasons collected
- ``Invalid(value, reasons)``: one or more reasons, in rule order

Rules are folded in with ``bind``. Folding never short-circuits: every rule
is checked against the original value, and each failing rule appends its
reason to the end of the list.

Example:
    ```python
    result = (
        Validation.unit("ab")
        .bind(MinLengthRule(5))
        .bind(ContainsDigitRule())
    )
    result.errors
    # (StringInvalidValueReason.MIN_LENGTH, StringInvalidValueReason.MISSING_DIGIT)
    ```
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import RuleContractError
from .result import Failed, Passed

if TYPE_CHECKING:
    from collections.abc import Callable

    from .reasons import InvalidValueReason
    from .rule import ValidationRule

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Validation(ABC, Generic[T]):
    """Base of the closed ``Valid`` / ``Invalid`` snapshot pair.

    Only ``Valid`` and ``Invalid`` may extend this class.
    """

    value: T

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Validation is closed to Valid and Invalid; cannot subclass as {cls.__name__}"
            )

    @staticmethod
    def unit(value: T) -> Validation[T]:
        """Create the identity snapshot for ``value`` (valid, no reasons).

        Args:
            value: Subject value

        Returns:
            ``Valid(value)``
        """
        return Valid(value)

    @property
    @abstractmethod
    def errors(self) -> tuple[InvalidValueReason, ...]:
        """Reasons collected so far, in rule order (empty when valid)."""
        pass

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_invalid(self) -> bool:
        return bool(self.errors)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def bind(self, rule: ValidationRule[T]) -> Validation[T]:
        """Fold one more rule into this snapshot.

        The rule is checked against the original subject value. A failure
        appends its reason after the existing ones; a pass leaves them as
        they are. This snapshot is not modified.

        Args:
            rule: Rule to check

        Returns:
            New snapshot, ``Valid`` iff no reasons have been collected

        Raises:
            RuleContractError: If the rule returns something other than
                ``Passed`` or ``Failed``
        """
        outcome = rule.check(self.value)

        if isinstance(outcome, Failed):
            errors = (*self.errors, outcome.reason)
            logger.debug(f"Rule {rule.name} failed with reason {outcome.reason}")
        elif isinstance(outcome, Passed):
            errors = self.errors
        else:
            raise RuleContractError(
                f"Rule {rule.name} returned {type(outcome).__name__}, expected Passed or Failed",
                context={"rule": rule.name, "outcome_type": type(outcome).__name__},
            )

        if errors:
            return Invalid(self.value, errors)
        return Valid(self.value)

    def bind_all(self, rules: Iterable[ValidationRule[T]]) -> Validation[T]:
        """Fold every rule in order, collecting all failures."""
        result: Validation[T] = self
        for rule in rules:
            result = result.bind(rule)
        return result

    @abstractmethod
    def fold(
        self,
        on_valid: Callable[[T], R],
        on_invalid: Callable[[T, tuple[InvalidValueReason, ...]], R],
    ) -> R:
        """Convert this snapshot by calling exactly one of the callbacks.

        Args:
            on_valid: Called with the value when valid
            on_invalid: Called with the value and reasons when invalid

        Returns:
            The result of whichever callback was called
        """
        pass

    def on_valid(self, effect: Callable[[T], Any]) -> Validation[T]:
        """Run ``effect`` with the value if valid; return this snapshot."""
        if isinstance(self, Valid):
            effect(self.value)
        return self

    def on_invalid(
        self, effect: Callable[[T, tuple[InvalidValueReason, ...]], Any]
    ) -> Validation[T]:
        """Run ``effect`` with the value and reasons if invalid; return this snapshot."""
        if isinstance(self, Invalid):
            effect(self.value, self.errors)
        return self


@dataclass(frozen=True)
class Valid(Validation[T]):
    """Snapshot of a value that has passed every rule folded so far."""

    value: T

    @property
    def errors(self) -> tuple[InvalidValueReason, ...]:
        return ()

    def fold(
        self,
        on_valid: Callable[[T], R],
        on_invalid: Callable[[T, tuple[InvalidValueReason, ...]], R],
    ) -> R:
        return on_valid(self.value)


@dataclass(frozen=True)
class Invalid(Validation[T]):
    """Snapshot of a value that has failed at least one rule.

    Attributes:
        value: The original value
        reasons: Non-empty tuple of reasons, in the order their rules were
            folded (also exposed as ``errors``)
    """

    value: T
    reasons: tuple[InvalidValueReason, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.reasons, tuple):
            object.__setattr__(self, "reasons", tuple(self.reasons))
        if not self.reasons:
            raise RuleContractError(
                "Invalid requires at least one reason; use Valid for a value with no reasons",
                context={"value": repr(self.value)},
            )

    @property
    def errors(self) -> tuple[InvalidValueReason, ...]:
        return self.reasons

    def fold(
        self,
        on_valid: Callable[[T], R],
        on_invalid: Callable[[T, tuple[InvalidValueReason, ...]], R],
    ) -> R:
        return on_invalid(self.value, self.reasons)
