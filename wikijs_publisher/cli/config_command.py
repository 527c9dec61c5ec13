"""Settings editing commands for the CLI.

Values are stored as given; URL format and token shape are not checked.
Environment overrides are ignored when editing so they never end up in
the settings file.
"""

import logging
from typing import Optional

from wikijs_publisher.cli.models import ExitCode
from wikijs_publisher.cli.output import OutputHandler
from wikijs_publisher.settings.errors import SettingsError
from wikijs_publisher.settings.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class ConfigCommand:
    """Reads and updates the stored settings."""

    def __init__(
        self,
        settings_path: Optional[str] = None,
        output_handler: Optional[OutputHandler] = None,
        settings_store: Optional[SettingsStore] = None,
    ):
        self.output_handler = output_handler or OutputHandler()
        self.settings_store = settings_store or SettingsStore(settings_path)

    def _update(self, label: str, **changes) -> ExitCode:
        try:
            settings = self.settings_store.load_file_only()
            self.settings_store.save(settings.with_values(**changes))
        except SettingsError as e:
            logger.error(f"Failed to save {label}: {e}")
            self.output_handler.error(str(e))
            return ExitCode.CONFIG_ERROR

        self.output_handler.success(f"{label} saved to {self.settings_store.settings_path}")
        return ExitCode.SUCCESS

    def set_url(self, api_url: str) -> ExitCode:
        return self._update("API URL", api_url=api_url)

    def set_token(self, bearer_token: str) -> ExitCode:
        return self._update("Bearer token", bearer_token=bearer_token)

    def set_debug(self, debug: bool) -> ExitCode:
        return self._update("Debug flag", debug=debug)

    def show(self) -> ExitCode:
        """Print the effective settings with the token masked."""
        try:
            settings = self.settings_store.load()
        except SettingsError as e:
            self.output_handler.error(str(e))
            return ExitCode.CONFIG_ERROR

        self.output_handler.notice(f"Settings file: {self.settings_store.settings_path}")
        self.output_handler.notice(f"API URL:       {settings.api_url or '(not set)'}")
        self.output_handler.notice(f"Bearer token:  {settings.masked_token()}")
        self.output_handler.notice(f"Debug:         {'on' if settings.debug else 'off'}")
        return ExitCode.SUCCESS
