"""
Manages loading, validation and saving of the INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from deadsbd.exceptions import ConfigurationError
from deadsbd.models.config import ArchiveConfig

log = logging.getLogger(__name__)

_INT_KEYS = {"page_count"}
_FLOAT_KEYS = {"request_timeout", "connect_timeout"}


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        # Interpolation is off: the URL templates contain '%' escapes.
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> ArchiveConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing file is not an error: every setting has a default.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated ArchiveConfig object.

        Raises:
            ConfigurationError: If the config file is unreadable or validation fails.
        """
        config_from_file: dict[str, Any] = {}
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
                config_from_file = self._get_config_as_dict()
            except (configparser.Error, ValueError) as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e
        else:
            log.debug(
                f"No configuration file at '{self.config_file_path}', using defaults."
            )

        if cli_options:
            config_from_file.update(cli_options)

        try:
            return ArchiveConfig(**config_from_file)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self) -> None:
        """
        Creates and saves a configuration file holding every default setting.

        Interpolation is disabled, so the percent-encoded URL templates are
        written and read back verbatim.
        """
        config = configparser.ConfigParser(interpolation=None)
        defaults = ArchiveConfig()

        config["DEFAULT"] = {}
        for key in sorted(ArchiveConfig.get_ini_keys()):
            config["DEFAULT"][key] = str(getattr(defaults, key))

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the known keys of the 'DEFAULT' section into a dictionary."""
        section = self._parser["DEFAULT"]
        values: dict[str, Any] = {}
        for key in ArchiveConfig.get_ini_keys():
            if key not in section:
                continue
            if key in _INT_KEYS:
                values[key] = section.getint(key)
            elif key in _FLOAT_KEYS:
                values[key] = section.getfloat(key)
            else:
                values[key] = section.get(key)

        unknown = set(section) - ArchiveConfig.get_ini_keys()
        if unknown:
            log.warning(
                f"[yellow]Ignoring unknown configuration keys: "
                f"{', '.join(sorted(unknown))}[/yellow]"
            )
        return values
