"""Snippets, themes, slide mapping, YAML front matter and HTML page templates for a markdown editor."""

__version__ = "0.1.0"