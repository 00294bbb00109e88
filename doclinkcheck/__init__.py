"""Analyze Markdown documents for broken links, orphans and link statistics."""

__version__ = "0.1.0"
__all__ = ["analyzer", "cli"]