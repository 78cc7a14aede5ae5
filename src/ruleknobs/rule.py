"""Rule and rule composition abstractions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar, Union

from .exceptions import RuleContractError
from .result import CheckResult, check_result

if TYPE_CHECKING:
    from collections.abc import Callable

    from .reasons import InvalidValueReason

T = TypeVar("T")


class ValidationRule(ABC, Generic[T]):
    """A single, total check of one value.

    ``check`` must terminate and must not raise for any value of the
    declared input type. It may depend only on its argument and on
    parameters fixed at construction.

    Example:
        ```python
        class NotEmptyRule(ValidationRule[str]):
            def check(self, value: str) -> CheckResult:
                return check_result(bool(value), StringInvalidValueReason.EMPTY)
        ```
    """

    @abstractmethod
    def check(self, value: T) -> CheckResult:
        """Check ``value`` against this rule.

        Args:
            value: Value to check

        Returns:
            ``PASSED`` if the value satisfies the rule, otherwise
            ``Failed`` carrying the reason
        """
        pass

    @property
    def name(self) -> str:
        """Rule name used in logs and error context."""
        return type(self).__name__

    def __repr__(self) -> str:
        params = ", ".join(
            f"{key.lstrip('_')}={value!r}" for key, value in vars(self).items()
        )
        return f"{self.name}({params})"


class FunctionRule(ValidationRule[T]):
    """Rule backed by a boolean predicate.

    The predicate is expected to be total. Exceptions it raises propagate
    to the caller unchanged.
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        reason: InvalidValueReason,
        name: str | None = None,
    ):
        """Initialize function rule.

        Args:
            predicate: Callable returning True when the value is acceptable
            reason: Reason reported when the predicate returns False
            name: Optional display name (defaults to the predicate's name)
        """
        self._predicate = predicate
        self._reason = reason
        self._name = name or getattr(predicate, "__name__", "FunctionRule")

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: T) -> CheckResult:
        return check_result(bool(self._predicate(value)), self._reason)


class ValidationRulesComposition(ABC, Generic[T]):
    """Selects the ordered rules that apply to a given value.

    The returned order is significant: reasons are reported in the order
    their rules appear. An empty list means the value is vacuously valid.

    Example:
        ```python
        class UsernameRules(ValidationRulesComposition[str]):
            def rules_for(self, value: str) -> list[ValidationRule[str]]:
                if value.startswith("svc-"):
                    return combine(MinLengthRule(8), NoSpacesRule())
                return combine(MinLengthRule(3), LettersOnlyRule())
        ```
    """

    @abstractmethod
    def rules_for(self, value: T) -> list[ValidationRule[T]]:
        """Return the rules to apply to ``value``, in evaluation order."""
        pass


class StaticComposition(ValidationRulesComposition[T]):
    """Composition that returns the same rules for every value."""

    def __init__(self, rules: Sequence[ValidationRule[T]]):
        self._rules = list(rules)

    def rules_for(self, value: T) -> list[ValidationRule[T]]:
        return list(self._rules)


class SelectingComposition(ValidationRulesComposition[T]):
    """Composition delegating rule selection to a callable."""

    def __init__(self, selector: Callable[[T], Sequence[ValidationRule[T]]]):
        self._selector = selector

    def rules_for(self, value: T) -> list[ValidationRule[T]]:
        return list(self._selector(value))


RuleSource = Union[
    ValidationRule[T],
    Sequence[ValidationRule[T]],
    ValidationRulesComposition[T],
]


def combine(first: ValidationRule[T], *rest: ValidationRule[T]) -> list[ValidationRule[T]]:
    """Build an ordered rule list from individual rules.

    Args:
        first: First rule to apply
        *rest: Further rules, applied in the given order

    Returns:
        New list ``[first, *rest]``
    """
    return [first, *rest]


def append_rule(
    rules: Sequence[ValidationRule[T]], rule: ValidationRule[T]
) -> list[ValidationRule[T]]:
    """Return a new list with ``rule`` appended after ``rules``.

    The input sequence is left untouched.
    """
    return [*rules, rule]


def resolve_rules(source: RuleSource[T], value: T) -> list[ValidationRule[T]]:
    """Normalize a rule source into the ordered rule list for ``value``.

    A composition is resolved exactly once against ``value``.

    Args:
        source: A single rule, a sequence of rules, or a composition
        value: Subject value, used only when ``source`` is a composition

    Returns:
        List of rules in evaluation order

    Raises:
        RuleContractError: If ``source`` (or anything it yields) is not a rule
    """
    if isinstance(source, ValidationRule):
        return [source]

    if isinstance(source, ValidationRulesComposition):
        rules = list(source.rules_for(value))
    elif isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
        rules = list(source)
    else:
        raise RuleContractError(
            f"Unsupported rule source: {type(source).__name__}",
            context={"source_type": type(source).__name__},
        )

    for index, rule in enumerate(rules):
        if not isinstance(rule, ValidationRule):
            raise RuleContractError(
                f"Rule at position {index} is not a ValidationRule: {type(rule).__name__}",
                context={"index": index, "rule_type": type(rule).__name__},
            )
    return rules
