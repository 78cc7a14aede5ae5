"""Error-accumulating value validation with composable rules.

ruleknobs checks a value against every rule it is given and reports all
violated constraints, in rule order, instead of stopping at the first one.

- **Rules**: ``ValidationRule`` subclasses returning ``PASSED`` or ``Failed(reason)``
- **Compositions**: value-dependent selection of an ordered rule list
- **Snapshots**: immutable ``Valid`` / ``Invalid`` results folded with ``bind``
- **Holders**: ``Validated`` values that re-validate on every ``set_value``
- **Configuration**: rule lists built from dictionaries or YAML/JSON files

Example:
    ```python
    from ruleknobs import validate
    from ruleknobs.rules import ContainsDigitRule, MinLengthRule

    result = validate("secret", [MinLengthRule(12), ContainsDigitRule()])
    result.errors
    # (StringInvalidValueReason.MIN_LENGTH, StringInvalidValueReason.MISSING_DIGIT)
    ```
"""

from ruleknobs.api import fold, on_invalid, on_valid, validate
from ruleknobs.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    RuleConfigurationError,
    RuleContractError,
    RuleknobsError,
)
from ruleknobs.factory import RuleFactory, load_rules, read_config_file
from ruleknobs.reasons import InvalidValueReason, NamedReason
from ruleknobs.registry import BUILTIN_RULES, Registry, RuleRegistry, default_registry
from ruleknobs.result import PASSED, CheckResult, Failed, Passed, check_result
from ruleknobs.rule import (
    FunctionRule,
    RuleSource,
    SelectingComposition,
    StaticComposition,
    ValidationRule,
    ValidationRulesComposition,
    append_rule,
    combine,
    resolve_rules,
)
from ruleknobs.validated import (
    Validated,
    ValidatedBoolean,
    ValidatedChar,
    ValidatedFloat,
    ValidatedInt,
    ValidatedString,
    ValidityState,
)
from ruleknobs.validation import Invalid, Valid, Validation

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Reasons and outcomes
    "InvalidValueReason",
    "NamedReason",
    "CheckResult",
    "Passed",
    "Failed",
    "PASSED",
    "check_result",
    # Rules
    "ValidationRule",
    "FunctionRule",
    "ValidationRulesComposition",
    "StaticComposition",
    "SelectingComposition",
    "RuleSource",
    "combine",
    "append_rule",
    "resolve_rules",
    # Snapshots
    "Validation",
    "Valid",
    "Invalid",
    # Holder
    "Validated",
    "ValidatedString",
    "ValidatedChar",
    "ValidatedInt",
    "ValidatedFloat",
    "ValidatedBoolean",
    "ValidityState",
    # Entry points
    "validate",
    "fold",
    "on_valid",
    "on_invalid",
    # Configuration
    "RuleFactory",
    "load_rules",
    "read_config_file",
    "Registry",
    "RuleRegistry",
    "BUILTIN_RULES",
    "default_registry",
    # Exceptions
    "RuleknobsError",
    "RuleContractError",
    "RuleConfigurationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
