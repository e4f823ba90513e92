"""Configuration management for Cygnus using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CYGNUS_",
        extra="ignore",
    )

    # Game data
    data_dir: Path = Field(
        default=PACKAGE_DATA_DIR,
        description="Directory holding races, classes, items and spells YAML files",
    )
    default_character: str = Field(
        default="sigma.yaml",
        description="Character sheet loaded when none is given on the command line",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    @property
    def characters_dir(self) -> Path:
        """Get the character sheet directory path."""
        return self.data_dir / "characters"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
