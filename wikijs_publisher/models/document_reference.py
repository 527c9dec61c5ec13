"""Local document data model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DocumentReference:
    """The document being published, derived fresh for every publish.

    Attributes:
        title: Document title (file name without the .md extension)
        path: Remote path, "/" followed by the vault-relative path without .md
        content: Markdown body (frontmatter removed; the Obsidian plugin this
            tool replaces sent the full text including frontmatter)
        tags: Raw frontmatter tags value: a list, a single scalar, or None
    """
    title: str
    path: str
    content: str
    tags: Any = None
