"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .logging_schema import LoggingConfig
from .pattern_schema import CreatorConfig, StrategyConfig


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    strategy: StrategyConfig = Field(default_factory=lambda: StrategyConfig())
    creator: CreatorConfig = Field(default_factory=lambda: CreatorConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Build and validate configuration from a plain dictionary."""
        return cls.model_validate(data)
