"""Markdown rendering, heading anchors, tables of contents, navigation and file helpers for books."""

__version__ = "0.1.0"