"""Environment-based configuration using pydantic-settings.

Example:
    >>> from flowcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.lift.check_signature
    True

    # Or with environment variables:
    # FLOWCASE_LOG_LEVEL=DEBUG
    # FLOWCASE_LOG_TRACE_STEPS=true
    # FLOWCASE_LIFT_CHECK_SIGNATURE=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVEL_NUMBERS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FLOWCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    trace_steps: bool = Field(default=False, description="Emit a DEBUG record for every chain step")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @computed_field
    @property
    def level_no(self) -> int:
        """Numeric level for the stdlib logging module."""
        return _LEVEL_NUMBERS[self.level]


class LiftSettings(BaseSettings):
    """Behaviour of lift()-wrapped callables."""

    model_config = SettingsConfigDict(
        env_prefix="FLOWCASE_LIFT_",
        extra="ignore",
    )

    check_signature: bool = Field(
        default=True,
        description=(
            "Bind arguments against the callable's signature before invoking it. "
            "This is the only way lift() detects a wrong call site: when disabled, "
            "arity errors no longer raise SignatureMismatch and come back as "
            "captured Failures instead."
        ),
    )


class FlowcaseSettings(BaseSettings):
    """Root settings, loaded from FLOWCASE_* variables and an optional .env file.

    Example environment variables:
        FLOWCASE_DEBUG=true
        FLOWCASE_LOG_LEVEL=DEBUG
        FLOWCASE_LOG_TRACE_STEPS=true
        FLOWCASE_LIFT_CHECK_SIGNATURE=false
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOWCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode (implies step tracing)")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    lift: LiftSettings = Field(default_factory=LiftSettings)

    @computed_field
    @property
    def trace_steps(self) -> bool:
        """Whether chains should log each step."""
        return self.debug or self.logging.trace_steps


@lru_cache(maxsize=1)
def get_settings() -> FlowcaseSettings:
    """Cached global settings instance."""
    return FlowcaseSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
