"""Data models for CLI operations."""

from enum import IntEnum
from typing import Optional

from wikijs_publisher.settings.errors import SettingsError
from wikijs_publisher.wikijs_client.errors import (
    ConfigurationError,
    RemoteError,
    TransportError,
)


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Document errors and anything unexpected
    - CONFIG_ERROR (2): Missing API URL/token or unusable settings file
    - NETWORK_ERROR (3): Non-200 status or unreachable endpoint
    - REMOTE_ERROR (4): Wiki.js rejected the request

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    NETWORK_ERROR = 3
    REMOTE_ERROR = 4

    @classmethod
    def for_error(cls, error: Optional[Exception]) -> 'ExitCode':
        """Map a failure to its exit code (SUCCESS for None)."""
        if error is None:
            return cls.SUCCESS
        if isinstance(error, (ConfigurationError, SettingsError)):
            return cls.CONFIG_ERROR
        if isinstance(error, TransportError):
            return cls.NETWORK_ERROR
        if isinstance(error, RemoteError):
            return cls.REMOTE_ERROR
        return cls.GENERAL_ERROR
