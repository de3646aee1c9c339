"""Fetch Granola meeting documents and render them as Markdown."""

__version__ = "0.1.0"
