"""Formatted usage output for registered build tasks."""

__version__ = "0.1.0"
