"""Settings model and YAML persistence for the publisher."""

from .errors import SettingsError
from .models import DEFAULT_API_URL, Settings
from .settings_store import SettingsStore

__all__ = [
    'DEFAULT_API_URL',
    'Settings',
    'SettingsError',
    'SettingsStore',
]
