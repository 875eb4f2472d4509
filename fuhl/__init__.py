"""Fuzzy finder for browser history."""

__version__ = "0.1.0"
