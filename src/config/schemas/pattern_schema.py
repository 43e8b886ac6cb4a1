"""Pattern selection configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StrategyConfig(BaseModel):
    """Which transform strategy the application uses by default."""
    model_config = ConfigDict(extra="forbid")

    default: str = Field("sort", description="Registered strategy name")

    @field_validator("default")
    @classmethod
    def validate_default(cls, v: str) -> str:
        """Strategy names are non-empty and case-insensitive."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Default strategy name must not be empty")
        return v


class CreatorConfig(BaseModel):
    """Which creator the application uses by default."""
    model_config = ConfigDict(extra="forbid")

    default: str = Field("creator1", description="Registered creator name")

    @field_validator("default")
    @classmethod
    def validate_default(cls, v: str) -> str:
        """Creator names are non-empty and case-insensitive."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Default creator name must not be empty")
        return v
