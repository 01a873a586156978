"""Configuration loading for the invoice engine.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Statement rendering
    report_indent: int = Field(
        default=2,
        description="Spaces of indentation per level of a split invoice",
    )
    report_precision: int = Field(
        default=2,
        description="Decimal places shown for amounts in statements",
    )
    report_currency: str = Field(
        default="",
        description="Prefix printed before every amount (e.g. '$')",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("report_indent")
    @classmethod
    def validate_report_indent(cls, v: int) -> int:
        """Ensure indentation is positive."""
        if v <= 0:
            raise ValueError("report_indent must be positive")
        return v

    @field_validator("report_precision")
    @classmethod
    def validate_report_precision(cls, v: int) -> int:
        """Ensure precision is in a printable range."""
        if v < 0 or v > 10:
            raise ValueError("report_precision must be between 0 and 10")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
