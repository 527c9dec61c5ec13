"""Settings file loading and saving.

This module persists publisher settings as a small YAML file. Stored values
are merged over the defaults, so a missing or empty file simply yields the
default settings. Environment variables (optionally from a .env file loaded
with python-dotenv) override stored values for the current invocation only
and are never written back.

Settings file structure:
    api_url: "https://wiki.example.com/graphql"
    bearer_token: "eyJhbGciOi..."
    debug: false
"""

import logging
import os
from dataclasses import fields
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import SettingsError
from .models import Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Loads, validates and saves publisher settings.

    Environment overrides:
        WIKIJS_API_URL: Overrides api_url
        WIKIJS_BEARER_TOKEN: Overrides bearer_token
        WIKIJS_DEBUG: Overrides debug ("1", "true", "yes", "on" enable it)

    Example:
        >>> store = SettingsStore(".wikijs-publisher/settings.yaml")
        >>> settings = store.load()
        >>> store.save(settings.with_values(api_url="https://wiki/graphql"))
    """

    DEFAULT_SETTINGS_DIR = '.wikijs-publisher'
    DEFAULT_SETTINGS_FILE = 'settings.yaml'
    DEFAULT_PATH = os.path.join(DEFAULT_SETTINGS_DIR, DEFAULT_SETTINGS_FILE)

    ENV_OVERRIDES = {
        'api_url': 'WIKIJS_API_URL',
        'bearer_token': 'WIKIJS_BEARER_TOKEN',
        'debug': 'WIKIJS_DEBUG',
    }

    TRUTHY = {'1', 'true', 'yes', 'on'}

    def __init__(self, settings_path: Optional[str] = None, use_env: bool = True):
        """Initialize the store.

        Args:
            settings_path: Path to the YAML settings file
            use_env: Apply environment overrides on load (loads .env first)
        """
        self.settings_path = settings_path or self.DEFAULT_PATH
        self.use_env = use_env
        if use_env:
            load_dotenv()

    def load(self) -> Settings:
        """Load settings, falling back to defaults for anything not stored.

        Returns:
            Settings with stored values merged over defaults and env overrides applied

        Raises:
            SettingsError: If the file cannot be read or contains invalid values
        """
        stored = self.load_stored()
        if self.use_env:
            stored.update(self._env_values())
        return Settings(**stored)

    def load_file_only(self) -> Settings:
        """Load settings from the file without environment overrides.

        Used when updating a single field so env values are not persisted.
        """
        return Settings(**self.load_stored())

    def load_stored(self) -> Dict[str, Any]:
        """Read and validate the raw stored values.

        Returns:
            Dict of known setting names to stored values (may be empty)

        Raises:
            SettingsError: If the file cannot be read or is malformed
        """
        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            # First run: defaults apply
            logger.debug(f"No settings file at {self.settings_path}, using defaults")
            return {}
        except PermissionError:
            raise SettingsError(f"Permission denied reading {self.settings_path}")
        except OSError as e:
            raise SettingsError(f"Cannot read {self.settings_path}: {e}")

        if not content.strip():
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML syntax: {str(e)}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise SettingsError(
                f"Settings must be a YAML dictionary, got {type(data).__name__}"
            )

        return self._parse_settings(data)

    def save(self, settings: Settings) -> None:
        """Write settings to the YAML file, creating its directory if needed.

        Args:
            settings: Settings to persist

        Raises:
            SettingsError: If the file cannot be written
        """
        settings_dict = {
            'api_url': settings.api_url,
            'bearer_token': settings.bearer_token,
            'debug': settings.debug,
        }

        yaml_str = yaml.safe_dump(
            settings_dict,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        settings_dir = os.path.dirname(self.settings_path)
        if settings_dir:
            try:
                os.makedirs(settings_dir, exist_ok=True)
            except OSError as e:
                raise SettingsError(f"Cannot create directory {settings_dir}: {e}")

        try:
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise SettingsError(f"Permission denied writing {self.settings_path}")
        except OSError as e:
            raise SettingsError(f"Cannot write {self.settings_path}: {e}")

        logger.info(f"Saved settings to {self.settings_path}")

    @classmethod
    def _parse_settings(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        known = {f.name for f in fields(Settings)}
        parsed: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown setting '{key}'")
                continue
            if value is None:
                continue
            if key == 'debug':
                if not isinstance(value, bool):
                    raise SettingsError(
                        f"must be a boolean, got {type(value).__name__}", key
                    )
            elif not isinstance(value, str):
                raise SettingsError(
                    f"must be a string, got {type(value).__name__}", key
                )
            parsed[key] = value

        return parsed

    def _env_values(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for key, env_name in self.ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is None:
                continue
            if key == 'debug':
                values[key] = raw.strip().lower() in self.TRUTHY
            else:
                values[key] = raw
        return values
