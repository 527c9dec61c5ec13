"""Publish local Markdown notes to a Wiki.js instance over GraphQL."""

__version__ = "0.1.0"
