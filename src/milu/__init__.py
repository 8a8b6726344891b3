"""milu: convenience utilities for frontend projects (.env documentation generator)."""

__version__ = "0.1.0"
