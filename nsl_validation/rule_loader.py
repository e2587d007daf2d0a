"""
Rule Loader - Convention-based rule discovery and the rule registry

## Key Design Principle: Filename as Single Source of Truth

A rule's identity is its module name. Nothing inside a rule body repeats it.

Example:
- Config lists: `V010` in family `entity`, section `Entity Definition`
- File: `nsl_validation/logic/rules/entity/v010.py`
- Contains: `class Rule(EntityRule)`
- Instantiation: `Rule(rule_id="V010")`

## How It Works

1. business-config.yaml lists families, their sections, and rule ids per section
2. Loader imports `<rules package>.<family>.<rule id lower-cased>`
3. Looks for the standard class name "Rule"
4. Checks that `Rule.validates()` names the family it was listed under
5. Freezes everything into a RuleRegistry: family -> ordered RuleEntry tuple

The registry is built once per engine. Rule classes are instantiated fresh
for every run, so no rule state can leak from one document to the next.
"""

import importlib
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)

RULES_PACKAGE = "nsl_validation.logic.rules"


@dataclass(frozen=True)
class RuleEntry:
    """One registered rule: its id, the section it is reported under, and its class."""

    rule_id: str
    section: str
    rule_class: type

    def instantiate(self):
        return self.rule_class(self.rule_id)


class RuleRegistry:
    """Immutable mapping family -> ordered tuple of RuleEntry."""

    def __init__(self, families: Dict[str, Tuple[RuleEntry, ...]], metadata: Dict[str, dict]):
        self._families = MappingProxyType({name: tuple(entries) for name, entries in families.items()})
        self._metadata = MappingProxyType({name: dict(meta) for name, meta in metadata.items()})

    def __contains__(self, family: str) -> bool:
        return family in self._families

    def families(self) -> List[str]:
        return list(self._families)

    def entries(self, family: str) -> Tuple[RuleEntry, ...]:
        """
        Rules of a family in execution order.

        Raises:
            ValueError: If family is not registered
        """
        if family not in self._families:
            raise ValueError(
                f"Unknown rule family: {family!r}. Known families: {', '.join(self._families)}"
            )
        return self._families[family]

    def sections(self, family: str) -> List[str]:
        """Section names of a family in display order."""
        seen = []
        for entry in self.entries(family):
            if entry.section not in seen:
                seen.append(entry.section)
        return seen

    def metadata(self, family: str) -> dict:
        self.entries(family)
        return dict(self._metadata.get(family, {}))


class RuleLoader:
    """Dynamically loads validation rules and builds the registry"""

    def __init__(self, config: dict, rules_package: str = RULES_PACKAGE):
        """
        Initialize rule loader.

        Args:
            config: Business configuration dict (already schema-checked)
            rules_package: Dotted package holding one sub-package per family
        """
        self.config = config
        self.rules_package = rules_package
        self.loaded_rules: Dict[Tuple[str, str], type] = {}  # Cache: (family, rule_id) -> rule_class

    def build_registry(self) -> RuleRegistry:
        """
        Load every rule named in the business config.

        Returns:
            RuleRegistry with one entry per configured rule id

        Raises:
            ValueError: Duplicate rule id within a family, or a rule whose
                validates() does not match the family it is listed under
            ImportError: Rule module missing
            AttributeError: Rule module without a class named "Rule"
        """
        families = {}
        metadata = {}
        for family, family_config in self.config.get("families", {}).items():
            entries = []
            seen = set()
            for section in family_config.get("sections", []):
                for rule_id in section.get("rules", []):
                    if rule_id in seen:
                        raise ValueError(f"Duplicate rule id {rule_id} in family {family}")
                    seen.add(rule_id)
                    rule_class = self._load_rule_class(family, rule_id)
                    entries.append(RuleEntry(rule_id, section["name"], rule_class))

            families[family] = tuple(entries)
            metadata[family] = family_config.get("metadata", {})
            logger.debug(
                "Rule family loaded",
                extra={"family": family, "rule_count": len(entries)},
            )

        return RuleRegistry(families, metadata)

    def _load_rule_class(self, family: str, rule_id: str) -> Any:
        """
        Load a single rule class by family and ID.

        Args:
            family: Rule family (e.g., "entity")
            rule_id: Rule identifier (e.g., "V010")

        Returns:
            The module's Rule class
        """
        key = (family, rule_id)
        if key in self.loaded_rules:
            return self.loaded_rules[key]

        module_name = f"{self.rules_package}.{family}.{rule_id.lower()}"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            raise ImportError(f"Failed to import rule {rule_id}: {e}. Expected module {module_name}") from e

        # Get rule class (always named "Rule")
        class_name = "Rule"
        if not hasattr(module, class_name):
            raise AttributeError(
                f"Rule class '{class_name}' not found in {module_name}. "
                f"All rules must define a class named 'Rule'."
            )

        rule_class = getattr(module, class_name)
        declared = rule_class(rule_id).validates()
        if declared != family:
            raise ValueError(
                f"Rule {rule_id} validates {declared!r} but is listed under family {family!r}"
            )

        self.loaded_rules[key] = rule_class
        return rule_class
