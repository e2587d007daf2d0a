"""Two-tier configuration loading: bundled local config + business config."""

import os
import yaml
import urllib.parse
from pathlib import Path
from typing import Dict, Any, List, Optional
from importlib.resources import files

from jsonschema import Draft7Validator

# Shape of business-config.yaml. Checked once at load so that a broken
# registry definition fails at service construction, never mid-run.
BUSINESS_CONFIG_SCHEMA = {
    "type": "object",
    "required": ["families"],
    "properties": {
        "families": {
            "type": "object",
            "minProperties": 1,
            "additionalProperties": {
                "type": "object",
                "required": ["sections"],
                "properties": {
                    "metadata": {"type": "object"},
                    "sections": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "rules"],
                            "properties": {
                                "name": {"type": "string", "minLength": 1},
                                "rules": {
                                    "type": "array",
                                    "items": {"type": "string", "pattern": "^[A-Za-z][A-Za-z0-9_]*$"},
                                },
                            },
                        },
                    },
                },
            },
        },
        "reference_data": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
    },
}


class ConfigLoader:
    """Handles two-tier configuration: local config + business config."""

    DEFAULT_BUSINESS_CONFIG_FILENAME = "business-config.yaml"

    def __init__(self, local_config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            local_config_path: Optional path to a local-config.yaml. Defaults to
                the file bundled in the nsl_validation package.

        Raises:
            ValueError: If the business config does not match BUSINESS_CONFIG_SCHEMA
        """
        if local_config_path is None:
            config_file = files('nsl_validation').joinpath('local-config.yaml')
            self.local_config_path = str(config_file)
        else:
            self.local_config_path = os.path.abspath(local_config_path)

        self.local_config = self._load_yaml(self.local_config_path) or {}

        business_config_uri = self.get_business_config_uri()
        self.business_config = self._load_config_from_uri(business_config_uri)

        self._check_business_config(self.business_config, business_config_uri)

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file from disk."""
        with open(path) as f:
            return yaml.safe_load(f)

    def _load_config_from_uri(self, uri: str) -> Dict[str, Any]:
        """
        Load config from URI.

        Supports:
        - Relative paths - resolved against the local config directory
        - file:// - Local filesystem (absolute paths)

        Args:
            uri: Config URI or relative path

        Returns:
            Parsed YAML config
        """
        return self._load_yaml(self._resolve_path(uri))

    def _resolve_path(self, uri: str) -> str:
        parsed = urllib.parse.urlparse(uri)

        if not parsed.scheme:
            config_dir = os.path.dirname(os.path.abspath(self.local_config_path))
            return os.path.normpath(os.path.join(config_dir, uri))

        if parsed.scheme == 'file':
            return urllib.parse.unquote(parsed.path)

        raise ValueError(f"Unsupported URI scheme: {parsed.scheme} in {uri}")

    def _check_business_config(self, config: Any, uri: str) -> None:
        """Raise ValueError listing every schema violation in the business config."""
        validator = Draft7Validator(BUSINESS_CONFIG_SCHEMA)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        if errors:
            problems = []
            for error in errors:
                error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
                problems.append(f"{error_path}: {error.message}")
            raise ValueError(f"Invalid business config {uri}: {'; '.join(problems)}")

    def get_business_config(self) -> Dict[str, Any]:
        """Get business configuration (tier 2)."""
        return self.business_config

    def get_local_config(self) -> Dict[str, Any]:
        """Get local configuration (tier 1)."""
        return self.local_config

    def get_business_config_uri(self) -> str:
        """Construct business config URI from logic_directory_location + business_config_filename."""
        logic_dir = self.local_config.get('logic_directory_location', 'logic')
        config_filename = self.local_config.get(
            'business_config_filename', self.DEFAULT_BUSINESS_CONFIG_FILENAME
        )
        separator = '/' if not logic_dir.endswith('/') else ''
        return f"{logic_dir}{separator}{config_filename}"

    def get_logic_dir(self) -> Path:
        """Absolute path of the directory holding the business config."""
        return Path(self._resolve_path(self.get_business_config_uri())).parent

    def get_families(self) -> Dict[str, Any]:
        """Family name -> {metadata, sections} from the business config."""
        return self.business_config.get('families', {})

    def get_reference_defaults(self) -> Dict[str, List[str]]:
        """Default reference lists (common_words, approved_functions, ...)."""
        return self.business_config.get('reference_data', {}) or {}

    def get_batch_parallelism(self) -> bool:
        return bool(self.local_config.get('batch_parallelism', False))

    def get_batch_max_workers(self) -> Optional[int]:
        return self.local_config.get('batch_max_workers')

    def get_log_level(self) -> str:
        return str(self.local_config.get('log_level', 'WARNING')).upper()
