"""Reporting interface for user-visible notices and diagnostic logs.

The publisher only talks to a Reporter, so publish logic can run and be
tested without a terminal. The console implementation lives with the CLI
output handling.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Capability set used by the publisher."""

    def notify(self, text: str) -> None:
        """Show a transient notice to the user."""
        ...

    def log(self, text: str) -> None:
        """Record a diagnostic line."""
        ...


class LoggingReporter:
    """Reporter that sends everything to the logging module.

    Useful when publishing from scripts with no console attached.
    """

    def notify(self, text: str) -> None:
        logger.info(text)

    def log(self, text: str) -> None:
        logger.debug(text)
