"""Command-line interface for publishing to Wiki.js.

This package provides the `wikijs-publish` CLI tool: publishing a Markdown
file, testing the connection, and editing the stored settings.
"""

from .models import ExitCode

__all__ = [
    'ExitCode',
]
