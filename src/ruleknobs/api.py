"""Convenience entry points for validating a value in one call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import RuleContractError
from .rule import resolve_rules
from .validation import Validation

if TYPE_CHECKING:
    from collections.abc import Callable

    from .reasons import InvalidValueReason
    from .rule import RuleSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate(
    value: T,
    rules: RuleSource[T],
    on_valid: Callable[[T], Any] | None = None,
    on_invalid: Callable[[T, tuple[InvalidValueReason, ...]], Any] | None = None,
) -> Any:
    """Validate ``value`` against a rule, a list of rules, or a composition.

    Starts from ``Validation.unit(value)`` and folds every resolved rule in
    order. A composition is resolved once against ``value``; an empty rule
    list yields a valid snapshot.

    Args:
        value: Value to validate
        rules: Single rule, sequence of rules, or composition
        on_valid: Optional callback for a valid result
        on_invalid: Optional callback for an invalid result

    Returns:
        The final ``Validation`` snapshot, or, when both callbacks are given,
        the result of the callback matching that snapshot

    Raises:
        RuleContractError: If only one callback is given, or ``rules`` is not
            a valid rule source

    Example:
        ```python
        message = validate(
            "abc",
            [MinLengthRule(5), ContainsDigitRule()],
            on_valid=lambda v: f"Valid: {v}",
            on_invalid=lambda v, errors: f"Invalid: {v}; reasons: {errors}",
        )
        ```
    """
    if (on_valid is None) != (on_invalid is None):
        raise RuleContractError(
            "on_valid and on_invalid must be given together",
            context={
                "on_valid": on_valid is not None,
                "on_invalid": on_invalid is not None,
            },
        )

    resolved = resolve_rules(rules, value)
    result = Validation.unit(value).bind_all(resolved)
    logger.debug(
        f"Validated {value!r} against {len(resolved)} rule(s): "
        f"{len(result.errors)} failure(s)"
    )

    if on_valid is not None and on_invalid is not None:
        return result.fold(on_valid, on_invalid)
    return result


def fold(
    snapshot: Validation[T],
    on_valid: Callable[[T], Any],
    on_invalid: Callable[[T, tuple[InvalidValueReason, ...]], Any],
) -> Any:
    """Function form of ``Validation.fold``."""
    return snapshot.fold(on_valid, on_invalid)


def on_valid(snapshot: Validation[T], effect: Callable[[T], Any]) -> Validation[T]:
    """Function form of ``Validation.on_valid``."""
    return snapshot.on_valid(effect)


def on_invalid(
    snapshot: Validation[T],
    effect: Callable[[T, tuple[InvalidValueReason, ...]], Any],
) -> Validation[T]:
    """Function form of ``Validation.on_invalid``."""
    return snapshot.on_invalid(effect)
