"""Exception hierarchy for ruleknobs.

Validation failures are never raised: they are reported as the ordered reason
list carried by an ``Invalid`` snapshot or a ``Validated`` holder. The
exceptions here cover the other channel, programmer and configuration
mistakes that must surface at the point of misuse.

Example:
    ```python
    from ruleknobs.exceptions import RuleConfigurationError, RuleknobsError

    try:
        MinLengthRule(-1)
    except RuleConfigurationError as e:
        logger.error(f"Bad rule: {e}")
        logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class RuleknobsError(Exception):
    """Base exception for all ruleknobs errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (rule names, bounds, etc.)
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = RuleknobsError(
            "Rule misused",
            context={"rule": "SubstringMinLengthRule", "end_index": 12}
        )
        str(error)
        # 'Rule misused'
        error.context
        # {'rule': 'SubstringMinLengthRule', 'end_index': 12}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class RuleContractError(RuleknobsError, ValueError):
    """Raised when the validation core is used outside its contract.

    Common scenarios include:
    - A substring-range rule whose bounds fall outside the subject value
    - A rule source that is neither a rule, a sequence of rules, nor a composition
    - A rule whose ``check`` returns something other than ``Passed``/``Failed``
    - Supplying only one of the ``on_valid``/``on_invalid`` callbacks

    Example:
        ```python
        raise RuleContractError(
            "Substring bounds exceed value length",
            context={"start_index": 2, "end_index": 10, "length": 4}
        )
        ```
    """

    pass


class RuleConfigurationError(RuleknobsError, ValueError):
    """Raised when a rule is constructed with inconsistent parameters.

    Example:
        ```python
        raise RuleConfigurationError(
            "min length cannot be negative: -1",
            context={"rule": "MinLengthRule", "min_length": -1}
        )
        ```
    """

    pass


class ConfigurationError(RuleknobsError):
    """Raised when rule configuration data is invalid.

    Covers unknown rule types, missing ``type`` keys, unsupported file
    formats and malformed configuration documents.
    """

    pass


class NotFoundError(RuleknobsError):
    """Raised when a registered rule type or configuration file is not found."""

    pass


class OperationError(RuleknobsError):
    """Raised when a registry operation fails, e.g. a duplicate registration."""

    pass


__all__ = [
    "RuleknobsError",
    "RuleContractError",
    "RuleConfigurationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
