"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Gameplay tuning. Defaults keep the classic feel."""

    model_config = SettingsConfigDict(env_prefix="STACKER_GAME_", extra="ignore")

    # Tower
    base_height: float = Field(default=24.0, gt=0)
    base_width_ratio: float = Field(default=0.8, gt=0, le=1.0)

    # Mover speed (pixels per tick)
    initial_speed: float = Field(default=3.2, gt=0)
    speed_step: float = Field(default=0.12, ge=0)
    max_speed: float = Field(default=12.0, gt=0)

    # Scoring
    perfect_tolerance: float = Field(default=4.0, ge=0)
    perfect_points: int = Field(default=2, ge=0)
    normal_points: int = Field(default=1, ge=0)
    perfect_message: str = "PERFECT!"
    status_ticks: int = Field(default=25, ge=0)

    # Keep the mover below this fraction of the viewport height
    scroll_band: float = Field(default=0.25, ge=0.0, le=1.0)


class DisplaySettings(BaseSettings):
    """Window-related settings."""

    model_config = SettingsConfigDict(env_prefix="STACKER_DISPLAY_", extra="ignore")

    width: int = Field(default=420, gt=0)
    height: int = Field(default=720, gt=0)
    fps: int = Field(default=60, gt=0)
    title: str = "Stack"
    block_radius: int = Field(default=8, ge=0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="STACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Seed for the block color source; random when unset
    seed: Optional[int] = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
