"""Typed exception hierarchy for Wiki.js-related errors.

This module defines all custom exceptions used by the Wiki.js client library.
All exceptions inherit from WikiJSError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class PublisherError(Exception):
    """Base exception for all wikijs-publisher errors.

    Use this to catch any application-level error from the publish tool.
    """
    pass


class WikiJSError(PublisherError):
    """Base exception for all Wiki.js-related errors."""
    pass


class ConfigurationError(WikiJSError):
    """Raised when the API URL or bearer token is missing.

    Raised before any network call is attempted.
    """

    def __init__(
        self,
        message: str = "Configure the API URL and bearer token before publishing",
    ):
        super().__init__(message)


class TransportError(WikiJSError):
    """Raised when the HTTP exchange itself fails.

    Either the server answered with a non-200 status (status_code is set), or
    the request never completed (status_code is None and reason says why).
    """

    def __init__(self, status_code: Optional[int] = None, reason: Optional[str] = None):
        if status_code is not None:
            message = f"HTTP error: {status_code}"
        else:
            message = "Wiki.js API is unreachable"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class RemoteError(WikiJSError):
    """Raised when Wiki.js reports a failure.

    Covers GraphQL-level errors in the response envelope and mutations whose
    responseResult.succeeded flag is false.
    """

    def __init__(self, message: str, error_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
