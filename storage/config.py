"""
Object Store Configuration Handler

Manages the YAML configuration file for the local object store.
Provides defaults and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from storage.constants import DEFAULT_CONFIG_PATH, DEFAULT_STORE_BASE, GUESS_CONTENT_TYPE


class ObjectStoreConfig:
    """
    Object store configuration with YAML file support.

    Reads from config/object_store.yaml if it exists,
    otherwise uses defaults from constants.py.

    Usage:
        config = ObjectStoreConfig()
        base_path = config.base_path
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

        self.logger.debug(f"Object store config loaded ({self.config_path})")

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from constants"""
        return {
            "base_path": str(DEFAULT_STORE_BASE),
            "create_base_path": True,
            "guess_content_type": GUESS_CONTENT_TYPE,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}

                if isinstance(file_config, dict):
                    # File overrides defaults
                    config.update(file_config)
                    self.logger.info(f"Loaded config from {self.config_path}")
                else:
                    self.logger.warning(
                        f"Config file {self.config_path} is not a mapping. "
                        f"Using defaults.",
                    )

            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults.",
                )

        self._validate_config(config)
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        base_path = Path(config["base_path"])
        if not base_path.is_absolute():
            raise ValueError(f"base_path must be absolute path: {base_path}")

    def save(self) -> None:
        """Save configuration to YAML file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            yaml.dump(
                self._config,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=2,
            )

        self.logger.info(f"Config saved to {self.config_path}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def base_path(self) -> Path:
        """Bucket root directory"""
        return Path(self._config["base_path"])

    @property
    def create_base_path(self) -> bool:
        """Create the bucket root if it is missing"""
        return bool(self._config["create_base_path"])

    @property
    def guess_content_type(self) -> bool:
        """Derive content type from the key extension when not recorded"""
        return bool(self._config["guess_content_type"])

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = False) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately

        Raises:
            ValueError: If the new value is invalid (config is left unchanged)
        """
        updated = dict(self._config)
        updated[key] = value
        self._validate_config(updated)
        self._config = updated

        if save:
            self.save()

    def to_dict(self) -> Dict[str, Any]:
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ObjectStoreConfig(path={self.config_path})"
