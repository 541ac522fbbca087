"""Configuration management with pydantic-settings.

Nothing in userror reads these settings on its own. A host program that wants
its users to control color through the environment builds its printer once at
startup with ``Printer.from_settings()``.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from userror.printer import ColorMode

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class UserrorSettings(BaseSettings):
    """userror settings loaded from environment variables.

    All settings use the USERROR_ prefix for environment variables.
    """

    color: ColorMode = Field(
        default=ColorMode.ENABLED,
        description="Color mode for labels: enabled or disabled",
    )

    # Logging configuration for the library's own diagnostics
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="USERROR_",
        extra="ignore",
    )

    @field_validator("color", mode="before")
    @classmethod
    def _coerce_color(cls, value: Any) -> Any:
        """Accept booleans and on/off style strings as well as mode names."""
        if isinstance(value, bool):
            return ColorMode.ENABLED if value else ColorMode.DISABLED
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUTHY:
                return ColorMode.ENABLED
            if lowered in _FALSY:
                return ColorMode.DISABLED
            return lowered
        return value


# Global settings instance
_settings: UserrorSettings | None = None


def get_settings() -> UserrorSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = UserrorSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
