"""Wiki.js page data model."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RemotePage:
    """A page as identified by Wiki.js.

    Identity lives entirely on the server; the client never caches it
    across publishes.

    Attributes:
        id: Numeric page ID assigned by Wiki.js
        path: Page path within its locale (e.g., "notes/Intro")
        title: Page title
    """
    id: int
    path: str
    title: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'RemotePage':
        """Build from a GraphQL page object ({id, path, title})."""
        return cls(
            id=int(data['id']),
            path=str(data.get('path') or ''),
            title=str(data.get('title') or ''),
        )
