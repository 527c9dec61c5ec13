"""Wiki.js client library for publishing pages.

This package provides Python abstractions over the Wiki.js GraphQL API:
an authenticated request helper and page lookups built on top of it.
"""

from .errors import (
    PublisherError,
    WikiJSError,
    ConfigurationError,
    TransportError,
    RemoteError,
)

__all__ = [
    "PublisherError",
    "WikiJSError",
    "ConfigurationError",
    "TransportError",
    "RemoteError",
]
