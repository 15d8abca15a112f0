"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from deadsbd.exceptions import ConfigurationError
from deadsbd.models.config import DEFAULT_PAGE_COUNT, LISTING_URL_TEMPLATE, ArchiveConfig
from deadsbd.storage.config_manager import ConfigManager


class TestArchiveConfig:
    """Test ArchiveConfig validation."""

    def test_defaults(self) -> None:
        config = ArchiveConfig()

        assert config.base_url == "https://archive.org"
        assert config.page_count == DEFAULT_PAGE_COUNT
        assert config.media_extension == "ogg"
        assert "{page}" in config.listing_url_template
        assert "{query}" in config.search_url_template

    def test_extension_is_normalized(self) -> None:
        assert ArchiveConfig(media_extension=".OGG").media_extension == "ogg"

    def test_base_url_trailing_slash_removed(self) -> None:
        assert ArchiveConfig(base_url="https://archive.org/").base_url == (
            "https://archive.org"
        )

    @pytest.mark.parametrize(
        "field, value",
        [
            ("page_count", 0),
            ("media_extension", "."),
            ("request_timeout", 0),
            ("listing_url_template", "https://archive.org/details/GratefulDead"),
            ("search_url_template", "https://archive.org/search"),
            ("base_url", "archive.org"),
        ],
    )
    def test_invalid_values_rejected(self, field: str, value) -> None:
        with pytest.raises(ValueError):
            ArchiveConfig(**{field: value})


class TestConfigManager:
    """Test ConfigManager."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = ConfigManager(tmp_path / "config.ini").load_config()

        assert config == ArchiveConfig()

    def test_reads_values_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text(
            "[DEFAULT]\n"
            "page_count = 5\n"
            "request_timeout = 12.5\n"
            "output_dir = /music/dead\n"
            f"listing_url_template = {LISTING_URL_TEMPLATE}\n",
            encoding="utf-8",
        )

        config = ConfigManager(path).load_config()

        assert config.page_count == 5
        assert config.request_timeout == 12.5
        assert config.output_dir == "/music/dead"
        assert config.listing_url_template == LISTING_URL_TEMPLATE

    def test_cli_options_override_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[DEFAULT]\npage_count = 5\n", encoding="utf-8")

        config = ConfigManager(path).load_config({"page_count": 2})

        assert config.page_count == 2

    def test_invalid_value_raises_configuration_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[DEFAULT]\npage_count = 0\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="validation failed"):
            ConfigManager(path).load_config()

    def test_non_numeric_value_raises_configuration_error(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[DEFAULT]\npage_count = many\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="parsing"):
            ConfigManager(path).load_config()

    def test_malformed_file_raises_configuration_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("page_count = 5\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigManager(path).load_config()

    def test_saved_config_loads_back_as_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.ini"

        ConfigManager(path).save_new_config()

        assert path.is_file()
        text = path.read_text(encoding="utf-8")
        assert "subject%3A%22Soundboard%22" in text
        assert "%%" not in text
        assert ConfigManager(path).load_config() == ArchiveConfig()
