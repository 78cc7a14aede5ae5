"""Build rule lists from configuration.

Configuration Options:
    rules (list): Ordered list of rule definitions

Rule Definition Options:
    type (str): Registered rule name (see ``ruleknobs.registry.BUILTIN_RULES``)
    <param> (any): Every other key is passed to the rule constructor

Example Configuration:
    ```yaml
    rules:
      - type: is_not_empty
      - type: min_length
        min_length: 12
      - type: contains_digit
      - type: contains_special_characters
    ```
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError, NotFoundError
from .registry import RuleRegistry, default_registry
from .rule import StaticComposition, ValidationRule

logger = logging.getLogger(__name__)


class RuleFactory:
    """Factory for creating ordered rule lists from configuration.

    Args:
        registry: Registry used to resolve rule types (defaults to the shared
            registry holding the built-in catalog)
    """

    def __init__(self, registry: RuleRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()

    def create(self, **config: Any) -> List[ValidationRule[Any]]:
        """Create the rule list described by ``config``.

        Args:
            **config: Configuration with a ``rules`` list

        Returns:
            Rules in configuration order

        Raises:
            ConfigurationError: If the configuration is malformed or names an
                unknown rule type
            RuleConfigurationError: If a rule rejects its parameters
        """
        rule_configs = config.get("rules", [])
        if not isinstance(rule_configs, list):
            raise ConfigurationError(
                f"'rules' must be a list, got {type(rule_configs).__name__}",
                context={"rules_type": type(rule_configs).__name__},
            )

        rules = [self.build_rule(rule_config, index) for index, rule_config in enumerate(rule_configs)]
        logger.info(f"Created {len(rules)} rule(s) from configuration")
        return rules

    def create_composition(self, **config: Any) -> StaticComposition[Any]:
        """Create a composition returning the configured rules for every value."""
        return StaticComposition(self.create(**config))

    def build_rule(self, rule_config: Dict[str, Any], index: int = 0) -> ValidationRule[Any]:
        """Build one rule from its definition.

        Args:
            rule_config: Rule definition with a ``type`` key
            index: Position of the definition, used in error context

        Returns:
            Rule instance
        """
        if not isinstance(rule_config, dict):
            raise ConfigurationError(
                f"Rule definition at position {index} must be a mapping",
                context={"index": index, "definition": repr(rule_config)},
            )

        params = dict(rule_config)
        rule_type = str(params.pop("type", "")).lower()
        if not rule_type:
            raise ConfigurationError(
                f"Rule definition at position {index} is missing 'type'",
                context={"index": index},
            )

        try:
            return self.registry.create(rule_type, **params)
        except NotFoundError as e:
            raise ConfigurationError(
                f"Unknown rule type: {rule_type}",
                context={
                    "index": index,
                    "type": rule_type,
                    "available_types": sorted(self.registry.list_keys()),
                },
            ) from e
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid parameters for rule type '{rule_type}': {e}",
                context={"index": index, "type": rule_type, "params": sorted(params)},
            ) from e


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML or JSON configuration file into a dictionary.

    Raises:
        NotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported or the document is
            not a mapping
    """
    path = Path(path).resolve()
    if not path.exists():
        raise NotFoundError(
            f"Configuration file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    if suffix not in [".yaml", ".yml", ".json"]:
        raise ConfigurationError(
            f"Unsupported file format: {suffix}",
            context={"path": str(path), "suffix": suffix},
        )

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot parse configuration file {path}: {e}",
                context={"path": str(path)},
            ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            context={"path": str(path), "document_type": type(data).__name__},
        )
    return data


def load_rules(
    path: Union[str, Path], registry: RuleRegistry | None = None
) -> List[ValidationRule[Any]]:
    """Load an ordered rule list from a YAML or JSON file.

    Args:
        path: Path to the configuration file
        registry: Optional registry for rule lookup

    Returns:
        Rules in file order
    """
    logger.info(f"Loading rules from {path}")
    return RuleFactory(registry).create(**read_config_file(path))

