"""Typed exception hierarchy for reading local documents.

All exceptions inherit from DocumentError so callers can catch any failure
to turn a Markdown file into a DocumentReference.
"""

from typing import Optional

from wikijs_publisher.wikijs_client.errors import PublisherError


class DocumentError(PublisherError):
    """Raised when the document to publish cannot be read."""

    def __init__(self, file_path: str, reason: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            message = f"Cannot read document {file_path}"
            if reason:
                message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class FrontmatterError(DocumentError):
    """Raised when YAML frontmatter parsing or validation fails."""

    def __init__(self, file_path: str, message: str):
        super().__init__(
            file_path,
            reason=message,
            message=f"Frontmatter error in {file_path}: {message}",
        )
        self.message = message
