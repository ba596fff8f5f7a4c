"""Helpers for searching, transforming and summarising lists and matrices."""

__version__ = "0.1.0"
__all__ = ["matrix", "search", "transform", "stats", "words"]