"""Application configuration with environment validation.

Usage:
    from swimtally.config import get_settings

    settings = get_settings()

    # Access configuration
    print(settings.pool_length)
    print(settings.environment)

Settings are read from environment variables and an optional .env file in
the working directory. The parser never reads them directly: front ends
pass `settings.parser_options()` to `parse_session`.
"""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swimtally.parser.options import ParserOptions


class Environment(StrEnum):
    """Application environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class LogFormat(StrEnum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.LOCAL

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Log output format")

    # Totals check
    pool_length: int = Field(default=25, gt=0, description="Pool length in metres")

    # Parser
    split_slash_strokes: bool = Field(
        default=False, description="Split 'FC/BK' lines evenly across the listed strokes"
    )
    repeat_max_lines: int = Field(
        default=2, ge=1, description="Most prior lines a 'repeat' line replays"
    )

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.environment == Environment.LOCAL

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    def parser_options(self, **overrides: object) -> ParserOptions:
        """Build parser options from settings, with optional overrides."""
        values = {
            "split_slash_strokes": self.split_slash_strokes,
            "repeat_max_lines": self.repeat_max_lines,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ParserOptions(**values)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
        get_settings.cache_clear()

    Returns:
        Application settings
    """
    return Settings()
