"""A terminal arcade game of shooting down flying plates with rockets."""

__version__ = "0.1.0"
__all__ = ["config", "entities", "game", "grid", "scoring", "statistics", "trajectory"]