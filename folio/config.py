"""
Configuration management for Folio.

This module handles loading and accessing configuration values from config.yaml.
Values found in the file are merged over the built-in defaults, so a partial
file only needs to mention the settings it changes.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG: Dict[str, Any] = {
    "policy": {
        "popular_views_threshold": 10000,
        "locked_title_keyword": "Merchant"
    },
    "prototypes": {
        "clone_id_infix": "copy",
        "clone_title_suffix": " (Clone)"
    },
    "display": {
        "meta_preview": 3,
        "default_sort": "date"
    },
    "paths": {
        "data_file": "portfolio.yaml",
        "log_file": "folio.log"
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """
    Manages configuration loading and access for Folio.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logging.warning(f"Configuration file not found: {self.config_path}, using defaults")
            self._config = self._get_default_config()
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            self._config = self._get_default_config()
            return

        if not isinstance(loaded, dict):
            logging.error(f"Configuration root must be a mapping: {self.config_path}")
            self._config = self._get_default_config()
            return

        self._config = _merge(DEFAULT_CONFIG, loaded)
        logging.info(f"Configuration loaded from {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "policy.locked_title_keyword")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("display.meta_preview")  # Returns 3
            config.get("policy.popular_views_threshold")  # Returns 10000
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def popular_views_threshold(self) -> int:
        """Views above this count mark a video as popular."""
        return int(self.get("policy.popular_views_threshold", 10000))

    @property
    def locked_title_keyword(self) -> str:
        """Titles containing this keyword are locked."""
        return self.get("policy.locked_title_keyword", "Merchant")

    @property
    def clone_id_infix(self) -> str:
        return self.get("prototypes.clone_id_infix", "copy")

    @property
    def clone_title_suffix(self) -> str:
        return self.get("prototypes.clone_title_suffix", " (Clone)")

    @property
    def meta_preview(self) -> int:
        """Number of tags shown in truncated displays."""
        return int(self.get("display.meta_preview", 3))

    @property
    def default_sort(self) -> str:
        return self.get("display.default_sort", "date")

    @property
    def data_filename(self) -> str:
        """Get the YAML fixture file name."""
        return self.get("paths.data_file", "portfolio.yaml")

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "folio.log")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
