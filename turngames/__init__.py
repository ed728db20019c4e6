"""Turn-based mini games for chat bots."""

__version__ = "0.1.0"
