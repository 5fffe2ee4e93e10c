"""
Configuration Manager.

Reads user preferences for the recommender and CLI from an optional
YAML or JSON file. Missing keys fall back to DEFAULT_CONFIG. The manager
never writes to disk.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from modelpick.schemas.purpose import PurposeProfile
from modelpick.services.recommendation.purposes import PurposeRegistry, build_registry
from modelpick.utils.logger import log


class ConfigManager:
    """
    Read-only configuration with nested key access.

    Lookup order for the config file:
    1. The path passed to the constructor
    2. $MODELPICK_CONFIG
    3. ~/.modelpick/config.yaml, if it exists

    With none of these the defaults are used as-is.
    """

    ENV_VAR = "MODELPICK_CONFIG"
    CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".modelpick")
    CONFIG_FILE = os.path.join(CONFIG_DIR, "config.yaml")

    DEFAULT_CONFIG = {
        "recommend": {
            "count": 1,
            "provider_diversity": True,
            "text_only": True,
        },

        "logging": {
            "level": "WARNING",
        },

        "catalog": {
            "path": None,  # Default catalog file for the CLI
        },

        # Extra purpose profiles, keyed by name. Same shape as
        # PurposeProfile.from_dict(); a built-in name overrides the built-in.
        "purposes": {},
    }

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the config manager and load config.

        Args:
            path: Explicit config file. A missing explicit file is logged and
                the defaults are used.
        """
        self.path = self._resolve_path(path)
        self.config = self._load_config()
        self._validate_structure()

    def _resolve_path(self, path: Optional[Union[str, Path]]) -> Optional[Path]:
        """Pick the config file to read, or None for defaults only."""
        if path is not None:
            return Path(path)

        env_path = os.environ.get(self.ENV_VAR)
        if env_path:
            return Path(env_path)

        if os.path.exists(self.CONFIG_FILE):
            return Path(self.CONFIG_FILE)
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load config from file, or defaults when there is no usable file."""
        if self.path is None:
            return self._deep_copy(self.DEFAULT_CONFIG)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            log.warning(f"Config file not found: {self.path}. Using defaults.")
            return self._deep_copy(self.DEFAULT_CONFIG)
        except (yaml.YAMLError, OSError) as e:
            log.error(f"Failed to load config: {e}. Using defaults.")
            return self._deep_copy(self.DEFAULT_CONFIG)

        if not isinstance(data, dict):
            log.error(f"Config file {self.path} must contain a mapping. Using defaults.")
            return self._deep_copy(self.DEFAULT_CONFIG)

        log.debug(f"Loaded config from {self.path}")
        return data

    def _validate_structure(self) -> None:
        """Ensure config has all required keys with correct types."""
        for key, default in self.DEFAULT_CONFIG.items():
            if key not in self.config:
                self.config[key] = self._deep_copy(default)
            elif isinstance(default, dict) and not isinstance(self.config[key], dict):
                log.warning(f"Config section '{key}' must be a mapping, using defaults")
                self.config[key] = self._deep_copy(default)
            elif isinstance(default, dict):
                for subkey, subdefault in default.items():
                    if subkey not in self.config[key]:
                        self.config[key][subkey] = self._deep_copy(subdefault)

    def _deep_copy(self, obj: Any) -> Any:
        """Deep copy a plain config object."""
        if isinstance(obj, dict):
            return {k: self._deep_copy(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._deep_copy(i) for i in obj]
        return obj

    # =========================================================================
    # Public API
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by key.

        Supports dot notation for nested keys:
            manager.get("recommend.count")
            manager.get("purposes.triage.weights.cost")

        Args:
            key: The config key (supports dot notation)
            default: Default value if key not found

        Returns:
            The config value or default
        """
        parts = key.split(".")
        value = self.config

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_custom_purposes(self) -> Dict[str, PurposeProfile]:
        """
        Parse the 'purposes' section into profiles.

        Raises:
            ValueError: If any profile is malformed. The message names the profile.
        """
        profiles = {}
        for name, data in self.config.get("purposes", {}).items():
            try:
                profiles[str(name)] = PurposeProfile.from_dict(data)
            except ValueError as e:
                raise ValueError(f"Invalid purpose '{name}' in config: {e}") from None
        return profiles

    def get_purpose_registry(self) -> PurposeRegistry:
        """Built-in purposes merged with the ones defined in config."""
        return build_registry(self.get_custom_purposes())
