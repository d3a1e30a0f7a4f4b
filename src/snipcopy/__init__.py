"""Snippet copy buttons and search store tooling for a static blog."""

__version__ = "0.1.0"
