"""Fetch web pages and save them as Markdown files."""

__version__ = "0.1.0"
