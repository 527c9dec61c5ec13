"""Typed exceptions for settings persistence."""

from typing import Optional

from wikijs_publisher.wikijs_client.errors import PublisherError


class SettingsError(PublisherError):
    """Raised when the settings file cannot be read, parsed or written."""

    def __init__(self, message: str, settings_field: Optional[str] = None):
        if settings_field:
            full_message = f"Settings error in field '{settings_field}': {message}"
        else:
            full_message = f"Settings error: {message}"
        super().__init__(full_message)
        self.settings_field = settings_field
        self.original_message = message
