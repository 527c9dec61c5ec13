"""Publish and connection-test commands for the CLI.

This module provides the PublishCommand class that wires the pieces of one
CLI invocation together: load settings, read the document, run the
Publisher, and turn the result into an exit code.
"""

import logging
from typing import Optional

from wikijs_publisher.cli.models import ExitCode
from wikijs_publisher.cli.output import ConsoleReporter, OutputHandler
from wikijs_publisher.document.document_reader import DocumentReader
from wikijs_publisher.page_operations.models import PublishResult
from wikijs_publisher.page_operations.publisher import Publisher
from wikijs_publisher.page_operations.reporter import Reporter
from wikijs_publisher.settings.models import Settings
from wikijs_publisher.settings.settings_store import SettingsStore
from wikijs_publisher.wikijs_client.errors import PublisherError

logger = logging.getLogger(__name__)


class PublishCommand:
    """Runs the publish and test-connection actions.

    Every action shows exactly one notice through the reporter, whatever
    the outcome, and returns an ExitCode instead of raising.

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> cmd = PublishCommand(output_handler=output)
        >>> exit_code = cmd.run("notes/Intro.md", vault_root=".")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        settings_path: Optional[str] = None,
        output_handler: Optional[OutputHandler] = None,
        settings_store: Optional[SettingsStore] = None,
        reporter: Optional[Reporter] = None,
    ):
        """Initialize the command with dependencies.

        Args:
            settings_path: Path to the settings YAML file
            output_handler: OutputHandler for terminal output (optional)
            settings_store: SettingsStore to load settings from (optional)
            reporter: Reporter for notices (defaults to the console)
        """
        self.output_handler = output_handler or OutputHandler()
        self.settings_store = settings_store or SettingsStore(settings_path)
        self.reporter = reporter or ConsoleReporter(self.output_handler)

    def _build_publisher(self, settings: Settings) -> Publisher:
        return Publisher(settings, self.reporter)

    def _load_settings(self) -> Settings:
        return self.settings_store.load()

    def run(self, file_path: str, vault_root: Optional[str] = None) -> ExitCode:
        """Publish one Markdown file.

        Args:
            file_path: Markdown file to publish
            vault_root: Directory remote paths are relative to

        Returns:
            ExitCode for the outcome
        """
        try:
            settings = self._load_settings()
            doc = DocumentReader(vault_root).read(file_path)
        except PublisherError as e:
            logger.error(f"Cannot start publish: {e}")
            self.reporter.notify(f"Publish failed: {e}")
            return ExitCode.for_error(e)

        self.output_handler.info(f"Publishing {file_path} to {settings.api_url}")
        self.output_handler.debug(f"Remote path {doc.path}, tags {doc.tags}")
        publisher = self._build_publisher(settings)
        with self.output_handler.spinner(f"Publishing '{doc.title}'..."):
            result = publisher.publish(doc)

        return self._exit_code(result)

    def test_connection(self) -> ExitCode:
        """List remote pages to verify the URL and token."""
        try:
            settings = self._load_settings()
        except PublisherError as e:
            logger.error(f"Cannot load settings: {e}")
            self.reporter.notify(f"Connection test failed: {e}")
            return ExitCode.for_error(e)

        self.output_handler.info(f"Testing connection to {settings.api_url}")
        publisher = self._build_publisher(settings)
        with self.output_handler.spinner("Testing connection..."):
            result = publisher.test_connection()

        return self._exit_code(result)

    @staticmethod
    def _exit_code(result: PublishResult) -> ExitCode:
        if result.succeeded:
            return ExitCode.SUCCESS
        return ExitCode.for_error(result.error)
