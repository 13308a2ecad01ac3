"""STACKER - block stacking arcade game."""

__version__ = "0.1.0"
