"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from src.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from src.config.schemas import AppConfig, CreatorConfig, LoggingConfig, StrategyConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources are layered in this order, later ones winning:
    - ``DEFAULT_CONFIG``
    - an optional JSON or YAML file
    - ``PATTERNS_*`` environment variable overrides

    Loading is lazy and the typed view is cached until ``reload()``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def raw_config(self) -> Dict[str, Any]:
        """Lazy load the merged raw configuration."""
        if self._raw_config is None:
            with self._lock:
                if self._raw_config is None:
                    self._raw_config = self._load_raw_config()
        return self._raw_config

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._create_app_config(self.raw_config)
        return self._app_config

    def _load_raw_config(self) -> Dict[str, Any]:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            file_data = self.load_from_file(self._config_file)
            config_data = _deep_merge(config_data, file_data)

        config_data = self.apply_environment_overrides(config_data)
        return expand_config_env_vars(config_data)

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """
        Load a configuration file.

        Args:
            config_file: Path to a ``.json``, ``.yaml`` or ``.yml`` file

        Returns:
            Parsed configuration mapping

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )

        logger.debug("Loaded configuration file %s", config_file)
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``PATTERNS_*`` environment variables on top of ``config_data``."""
        result = copy.deepcopy(config_data)
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            result.setdefault(section, {})[key] = value
            logger.debug("Applied environment override %s -> %s.%s", env_var, section, key)
        return result

    @staticmethod
    def _create_app_config(config_data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.raw_config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_typed(self, config_type: Type[T]) -> T:
        """
        Get typed configuration object.

        Raises:
            ConfigurationError: If the type is not part of the application configuration
        """
        config_mapping: Dict[Type, Any] = {
            AppConfig: self.app_config,
            LoggingConfig: self.app_config.logging,
            StrategyConfig: self.app_config.strategy,
            CreatorConfig: self.app_config.creator,
        }
        if config_type not in config_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return config_mapping[config_type]

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._raw_config = None
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    A new manager is created when none exists yet or when a different
    ``config_file`` is requested.
    """
    global _config_manager

    with _manager_lock:
        if _config_manager is None or (
            config_file is not None and _config_manager.config_file != config_file
        ):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager


def reset_config_manager() -> None:
    """Drop the process-wide configuration manager."""
    global _config_manager

    with _manager_lock:
        _config_manager = None
