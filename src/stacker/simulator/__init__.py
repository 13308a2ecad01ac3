"""Desktop host for STACKER."""

from .window import GameWindow

__all__ = ["GameWindow"]
