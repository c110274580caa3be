"""Application configuration using Pydantic settings."""

import logging
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Installed package directory, home of the bundled maps
PACKAGE_DIR = Path(__file__).resolve().parent


class PresenterKind(str, Enum):
    """Available front ends."""

    CONSOLE = "console"
    WINDOW = "window"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "mazetrace"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "WARNING"

    # Mazes
    maps_dir: Path = PACKAGE_DIR / "maps"
    default_map: str = "SmallMap.txt"

    # Presentation
    presenter: PresenterKind = PresenterKind.CONSOLE
    use_ansi: bool = True
    window_size: int = Field(800, gt=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, DEBUG when debug is enabled."""
        if self.debug:
            return "DEBUG"
        return self.log_level


class SessionConfig(BaseModel):
    """Everything needed to set up one play session."""

    maze_path: Path
    presenter: PresenterKind = PresenterKind.CONSOLE


def resolve_maze_path(name: str, settings: Settings) -> Path:
    """
    Resolve a maze name to a file path.

    An existing path is used as given, anything else is looked up in the
    maps directory.
    """
    path = Path(name)
    if path.exists():
        return path
    return settings.maps_dir / name


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
