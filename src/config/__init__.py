"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    CreatorConfig,
    LoggingConfig,
    StrategyConfig,
)

# Configuration management
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    'AppConfig',

    # Specific configurations
    'LoggingConfig',
    'StrategyConfig',
    'CreatorConfig',

    # Management
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]
