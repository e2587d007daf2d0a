import copy
import logging
from importlib.resources import files
from typing import Any, Dict, List

import yaml

from .logic.extractors import create_document_helper
from .logic.rules.base import DisabledCheck
from .reference_data import ReferenceDataProxy
from .report import build_report
from .rule_executor import RuleExecutor
from .rule_loader import RuleLoader

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Core validation business logic, independent of transport"""

    def __init__(self, config_loader):
        """
        Initialize validation engine from a loaded configuration.

        Builds the rule registry once; it is immutable for the engine's lifetime.

        Args:
            config_loader: ConfigLoader instance

        Raises:
            ValueError: Duplicate rule ids or family mismatches in the config
            ImportError: A configured rule module does not exist
        """
        self.config_loader = config_loader
        self.config = config_loader.get_business_config()

        self.rule_loader = RuleLoader(self.config)
        self.registry = self.rule_loader.build_registry()
        self.reference_proxy = ReferenceDataProxy(config_loader.get_reference_defaults())
        self.samples = self._load_samples()

        # Vocabulary terms per family, collected once from required_data()
        self._required_terms = {
            family: self._collect_required_terms(family) for family in self.registry.families()
        }

        logger.info(
            "Validation engine initialized",
            extra={"families": self.registry.families()},
        )

    def _load_samples(self) -> Dict[str, Any]:
        with files("nsl_validation.logic").joinpath("samples.yaml").open() as f:
            return yaml.safe_load(f) or {}

    def _collect_required_terms(self, family: str) -> List[str]:
        terms = []
        for entry in self.registry.entries(family):
            for term in entry.instantiate().required_data():
                if term not in terms:
                    terms.append(term)
        return terms

    def get_required_data(self, family: str) -> List[str]:
        """
        Introspect a family's rules and return the reference terms they consult.

        Raises:
            ValueError: If family is unknown
        """
        self.registry.entries(family)
        return list(self._required_terms[family])

    def validate(self, family: str, document: Any) -> Dict[str, Any]:
        """
        Run every rule of a family against a document.

        Args:
            family: Rule family ("entity", "go", "tenant", "lo")
            document: Dict with "input", "output" and optional reference lists

        Returns:
            Report dict: {"family", "results", "summary"}

        Raises:
            ValueError: If family is unknown
        """
        entries = self.registry.entries(family)
        reference_data = self.reference_proxy.get_reference_data(
            family, document, self._required_terms[family]
        )

        executor = RuleExecutor(entries, document, reference_data)
        report = build_report(family, executor.execute())

        logger.info(
            "Document validated",
            extra={"family": family, **report["summary"]},
        )
        return report

    def discover_rules(self, family: str) -> Dict[str, Dict]:
        """
        Discover a family's rules and their metadata.

        Each rule is run once against the family's bundled sample with access
        tracking switched on, to record which document fields it reads.

        Returns:
            Dict mapping rule_id to:
            - rule_id, family, section, description
            - required_data: reference-list terms consulted
            - field_dependencies: document fields read
            - disabled: True for placeholder checks that always pass
        """
        entries = self.registry.entries(family)
        sample = self.sample_document(family)
        reference_data = self.reference_proxy.get_reference_data(
            family, sample, self._required_terms[family]
        )

        result = {}
        for entry in entries:
            rule = entry.instantiate()
            helper = create_document_helper(sample, track_access=True)

            rule.document = helper
            rule.set_required_data({k: reference_data.get(k) for k in rule.required_data()})
            try:
                rule.run()
            except Exception as e:
                # Only the field access pattern matters here
                logger.debug(
                    "Rule raised during discovery",
                    extra={"rule_id": entry.rule_id, "error": str(e)},
                )

            result[entry.rule_id] = {
                "rule_id": entry.rule_id,
                "family": rule.validates(),
                "section": entry.section,
                "description": rule.description(),
                "required_data": rule.required_data(),
                "field_dependencies": helper.get_accesses(),
                "disabled": isinstance(rule, DisabledCheck),
            }

        return result

    def discover_families(self) -> Dict[str, Dict]:
        """
        Discover available families with metadata and statistics.

        Returns:
            Dict mapping family to {metadata, stats} where stats has
            total_rules, rules_by_section, disabled_rules and required_data
        """
        result = {}
        for family in self.registry.families():
            entries = self.registry.entries(family)
            rules_by_section = {}
            for entry in entries:
                rules_by_section[entry.section] = rules_by_section.get(entry.section, 0) + 1

            result[family] = {
                "metadata": self.registry.metadata(family),
                "stats": {
                    "total_rules": len(entries),
                    "rules_by_section": rules_by_section,
                    "disabled_rules": [
                        e.rule_id for e in entries if issubclass(e.rule_class, DisabledCheck)
                    ],
                    "required_data": list(self._required_terms[family]),
                },
            }
        return result

    def sample_document(self, family: str) -> Dict[str, Any]:
        """
        Bundled sample document for a family (a fresh copy each call).

        Raises:
            ValueError: If family is unknown
        """
        self.registry.entries(family)
        return copy.deepcopy(self.samples.get(family, {"input": "", "output": ""}))
