"""Configuration for STACKER."""

from .settings import DisplaySettings, GameSettings, Settings, get_settings

__all__ = ["DisplaySettings", "GameSettings", "Settings", "get_settings"]
