"""Configuration schemas package."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .pattern_schema import CreatorConfig, StrategyConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "StrategyConfig",
    "CreatorConfig",
]
