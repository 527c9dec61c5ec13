"""GraphQL request helper for the Wiki.js API.

This module sends queries and mutations to a Wiki.js GraphQL endpoint with
bearer-token authentication, and translates transport failures and
GraphQL-level errors into our typed exception hierarchy. Each call is a
single best-effort attempt: no retries, no rate limiting.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional

import requests

from wikijs_publisher.settings.models import Settings

from .errors import ConfigurationError, RemoteError, TransportError

logger = logging.getLogger(__name__)


def sanitize_credentials(text: str) -> str:
    """Mask bearer tokens and token fields in text that may be logged.

    Args:
        text: Error message or log text

    Returns:
        str: Text with credentials replaced by ***REDACTED***

    Example:
        >>> sanitize_credentials("Authorization: Bearer abc123")
        'Authorization: ***REDACTED***'
    """
    if not text:
        return text

    sanitized = re.sub(
        r'Authorization:\s*[^\n\r]+',
        'Authorization: ***REDACTED***',
        text,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'Bearer\s+[^\s\n\r]+',
        'Bearer ***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'(bearer_?token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
        r'\1=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    return sanitized


class GraphQLClient:
    """Sends authenticated GraphQL requests to Wiki.js.

    The client reads the API URL and bearer token from the Settings value it
    was constructed with. Settings are never mutated here.

    Example:
        >>> client = GraphQLClient(Settings(api_url="https://wiki/graphql", bearer_token="t"))
        >>> data = client.send("query { pages { list { id } } }", {})
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            settings: Connection settings (API URL and bearer token)
            session: Optional requests session; module-level requests is used if None
        """
        self._settings = settings
        self._session = session

    @property
    def settings(self) -> Settings:
        return self._settings

    def _headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self._settings.bearer_token}',
        }

    def send(self, query: str, variables: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Send a query or mutation and return the envelope's data field.

        Args:
            query: GraphQL query or mutation text
            variables: Variables for the operation

        Returns:
            Dict holding the response's data field (empty if data was null)

        Raises:
            ConfigurationError: If API URL or bearer token is empty (no request is made)
            TransportError: If the status is not 200 or the request fails
            RemoteError: If the response carries GraphQL errors or is not JSON
        """
        if not self._settings.api_url or not self._settings.bearer_token:
            raise ConfigurationError()

        payload = {'query': query, 'variables': dict(variables or {})}
        poster = self._session if self._session is not None else requests

        try:
            response = poster.post(
                self._settings.api_url,
                json=payload,
                headers=self._headers(),
            )
        except requests.RequestException as e:
            safe_reason = sanitize_credentials(str(e))
            logger.error(f"GraphQL request failed: {safe_reason}")
            raise TransportError(reason=safe_reason) from e

        if response.status_code != 200:
            logger.error(f"GraphQL request failed with HTTP {response.status_code}")
            raise TransportError(status_code=response.status_code)

        try:
            envelope = response.json()
        except ValueError as e:
            logger.error("GraphQL response body is not valid JSON")
            raise RemoteError("Invalid JSON response from Wiki.js") from e

        if not isinstance(envelope, dict):
            logger.error(f"GraphQL response is a {type(envelope).__name__}, expected an object")
            raise RemoteError("Invalid JSON response from Wiki.js")

        errors = envelope.get('errors')
        if errors:
            # First error wins; the rest are only logged
            first = errors[0]
            message = first.get('message') if isinstance(first, dict) else str(first)
            message = message or "Unknown GraphQL error"
            logger.error(f"GraphQL error: {sanitize_credentials(message)}")
            if len(errors) > 1:
                logger.debug(f"Discarding {len(errors) - 1} additional GraphQL error(s)")
            raise RemoteError(message)

        return envelope.get('data') or {}
