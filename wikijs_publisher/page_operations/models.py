"""Data models for publish operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wikijs_publisher.models.remote_page import RemotePage


class PublishAction(str, Enum):
    """Which mutation a publish issued."""
    CREATE = "create"
    UPDATE = "update"


@dataclass
class PublishResult:
    """Outcome of a publish or connection test.

    Attributes:
        succeeded: True if the operation completed successfully
        message: The user-facing notice text that was shown
        action: Mutation issued (None if the flow failed before choosing one,
                or for a connection test)
        page: Created page as returned by Wiki.js (create only)
        error: Exception that caused a failure, if any
        page_count: Number of pages seen by a connection test
    """
    succeeded: bool
    message: str
    action: Optional[PublishAction] = None
    page: Optional[RemotePage] = None
    error: Optional[Exception] = None
    page_count: Optional[int] = None
