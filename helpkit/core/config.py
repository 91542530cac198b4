"""
Configuration management for helpkit.

Provides centralized, validated configuration from environment variables
with proper type checking and defaults.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from rich.console import Console
from rich.table import Table

from helpkit.core.exceptions import ConfigurationError
from helpkit.core.models import RoundingMode


def _parse_flag(v) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes")
    return bool(v)


class Settings(BaseSettings):
    """Main helpkit settings."""

    debug: bool = Field(default=False, alias="HELPKIT_DEBUG")
    json_logs: bool = Field(default=False, alias="HELPKIT_JSON_LOGS")

    # Locale resolution
    default_fallback_locales: Annotated[List[str], NoDecode] = Field(
        default_factory=list, alias="HELPKIT_DEFAULT_FALLBACK_LOCALES"
    )

    # Rounding
    rounding_mode: RoundingMode = Field(
        default=RoundingMode.HALF_EVEN, alias="HELPKIT_ROUNDING_MODE"
    )

    @field_validator("default_fallback_locales", mode="before")
    @classmethod
    def parse_fallback_locales(cls, v):
        if isinstance(v, str):
            return [locale.strip() for locale in v.split(",") if locale.strip()]
        return v or []

    @field_validator("debug", "json_logs", mode="before")
    @classmethod
    def parse_flags(cls, v):
        return _parse_flag(v)

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def parse_rounding_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid helpkit configuration", details={"errors": e.errors()}
            ) from e
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global settings
    settings = None


def print_configuration_summary(console: Optional[Console] = None) -> None:
    """Print a summary of the current configuration."""
    console = console or Console()
    config = get_settings()

    table = Table(title="helpkit configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Debug", "✓" if config.debug else "✗")
    table.add_row("JSON logs", "✓" if config.json_logs else "✗")
    table.add_row(
        "Default fallback locales",
        ", ".join(config.default_fallback_locales) or "(none)",
    )
    table.add_row("Rounding mode", config.rounding_mode.value)

    console.print(table)
