"""Named registry of rule types.

Maps configuration names such as ``"min_length"`` to the callables that
build the corresponding rules. The factory looks rule types up here, so
registering a custom rule makes it available to configuration files.

Example:
    ```python
    from ruleknobs.registry import default_registry

    registry = default_registry()
    registry.register("postcode", PostcodeRule)
    rule = registry.create("postcode", country="NL")
    ```
"""

import logging
import threading
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    TypeVar,
)

from . import rules as catalog
from .exceptions import NotFoundError, OperationError
from .rule import ValidationRule

logger = logging.getLogger(__name__)

T = TypeVar("T")

RuleBuilder = Callable[..., ValidationRule[Any]]


class Registry(Generic[T]):
    """Thread-safe registry of items keyed by name.

    Args:
        name: Name for this registry instance, used in error messages
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to allow overwriting existing items

        Raises:
            OperationError: If item already exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def unregister(self, key: str) -> T:
        """Unregister and return an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            return self._items.pop(key)

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": sorted(self._items.keys()),
                    },
                )
            return self._items[key]

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._items.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, count={self.count()})"


class RuleRegistry(Registry[RuleBuilder]):
    """Registry of rule builders (usually rule classes) by configuration name.

    Rule names are case-insensitive and stored lowercased, matching how the
    factory reads the ``type`` key.
    """

    def __init__(self, name: str = "rules"):
        super().__init__(name)

    def register(self, key: str, item: RuleBuilder, allow_overwrite: bool = False) -> None:
        super().register(key.lower(), item, allow_overwrite=allow_overwrite)

    def unregister(self, key: str) -> RuleBuilder:
        return super().unregister(key.lower())

    def get(self, key: str) -> RuleBuilder:
        return super().get(key.lower())

    def has(self, key: str) -> bool:
        return super().has(key.lower())

    def create(self, rule_type: str, **params: Any) -> ValidationRule[Any]:
        """Build a rule from its registered name and constructor parameters.

        Args:
            rule_type: Registered rule name
            **params: Keyword arguments for the rule builder

        Returns:
            New rule instance

        Raises:
            NotFoundError: If ``rule_type`` is not registered
            RuleConfigurationError: If the rule rejects its parameters
        """
        builder = self.get(rule_type)
        return builder(**params)

    def register_builtins(self) -> "RuleRegistry":
        """Register the built-in catalog under its default names (fluent API)."""
        for key, builder in BUILTIN_RULES.items():
            self.register(key, builder, allow_overwrite=True)
        logger.debug(f"Registered {len(BUILTIN_RULES)} built-in rules in {self.name}")
        return self


BUILTIN_RULES: Dict[str, RuleBuilder] = {
    # Strings
    "is_not_empty": catalog.IsNotEmptyRule,
    "min_length": catalog.MinLengthRule,
    "max_length": catalog.MaxLengthRule,
    "length_equal": catalog.LengthEqualRule,
    "regex_match": catalog.RegexMatchRule,
    "contains_letters": catalog.ContainsLettersRule,
    "letters_only": catalog.LettersOnlyRule,
    "contains_digit": catalog.ContainsDigitRule,
    "digit_only": catalog.DigitOnlyRule,
    "no_spaces": catalog.NoSpacesRule,
    "no_special_characters": catalog.NoSpecialCharactersRule,
    "contains_special_characters": catalog.ContainsSpecialCharactersRule,
    "no_uppercase": catalog.NoUppercaseRule,
    "no_lowercase": catalog.NoLowercaseRule,
    "contains_uppercase": catalog.ContainsUppercaseRule,
    "contains_lowercase": catalog.ContainsLowercaseRule,
    "starts_with": catalog.StartsWithRule,
    "ends_with": catalog.EndsWithRule,
    "contains_substring": catalog.ContainsSubstringRule,
    "substring_min_length": catalog.SubstringMinLengthRule,
    "substring_max_length": catalog.SubstringMaxLengthRule,
    # Characters
    "char_is_letter": catalog.CharIsLetterRule,
    "char_is_digit": catalog.CharIsDigitRule,
    "char_is_whitespace": catalog.CharIsWhitespaceRule,
    "is_special_character": catalog.IsSpecialCharacterRule,
    "char_in_range": catalog.CharInRangeRule,
    # Integers
    "is_positive_int": catalog.IsPositiveIntRule,
    "is_negative_int": catalog.IsNegativeIntRule,
    "is_zero_int": catalog.IsZeroIntRule,
    "min_value_int": catalog.MinValueIntRule,
    "max_value_int": catalog.MaxValueIntRule,
    "is_even_int": catalog.IsEvenIntRule,
    "is_odd_int": catalog.IsOddIntRule,
    # Floats
    "is_positive_float": catalog.IsPositiveFloatRule,
    "is_negative_float": catalog.IsNegativeFloatRule,
    "is_zero_float": catalog.IsZeroFloatRule,
    "min_value_float": catalog.MinValueFloatRule,
    "max_value_float": catalog.MaxValueFloatRule,
    "is_even_float": catalog.IsEvenFloatRule,
    "is_odd_float": catalog.IsOddFloatRule,
    "is_positive_float_with_precision": catalog.IsPositiveFloatWithPrecisionRule,
    "float_is_integer": catalog.FloatIsIntegerRule,
    # Booleans
    "is_true": catalog.IsTrueRule,
    "is_false": catalog.IsFalseRule,
}


_default_registry: RuleRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> RuleRegistry:
    """Get the shared registry, populated with the built-in rules on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = RuleRegistry("default").register_builtins()
        return _default_registry
