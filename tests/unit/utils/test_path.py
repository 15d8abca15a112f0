"""Tests for track name sanitizing and show directory creation."""

from pathlib import Path

import pytest

from deadsbd.exceptions import DirectoryError
from deadsbd.utils.path import create_show_dir, format_track_filename, sanitize_track_name


class TestSanitizeTrackName:
    """Test sanitize_track_name."""

    def test_dark_star(self) -> None:
        assert sanitize_track_name("(Dark/\\ //Star-/-->") == "Dark Star"

    def test_trims_surrounding_whitespace(self) -> None:
        raw = "  The .,:;Music ->Never <-Stopped-->  "
        assert sanitize_track_name(raw) == "The Music Never Stopped"

    def test_empty_string(self) -> None:
        assert sanitize_track_name("") == ""

    def test_only_removable_characters(self) -> None:
        assert sanitize_track_name(" -->.. ") == ""

    def test_keeps_other_characters(self) -> None:
        assert sanitize_track_name("Help on the Way > Slipknot!") == (
            "Help on the Way  Slipknot!"
        )

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "(Dark/\\ //Star-/-->",
            "  The .,:;Music ->Never <-Stopped-->  ",
            " - Drums - ",
            "Truckin' > Other One",
            "China Cat Sunflower -> I Know You Rider",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        once = sanitize_track_name(raw)
        assert sanitize_track_name(once) == once


class TestFormatTrackFilename:
    """Test format_track_filename."""

    def test_single_digit_is_zero_padded(self) -> None:
        assert format_track_filename(3, "Sugaree", "ogg").startswith("03 - ")

    def test_two_digits_unchanged(self) -> None:
        assert format_track_filename(11, "Morning Dew", "ogg").startswith("11 - ")

    def test_three_digits_use_natural_width(self) -> None:
        assert format_track_filename(104, "Drums", "ogg") == "104 - Drums.ogg"

    def test_full_name(self) -> None:
        assert format_track_filename(1, "Promised Land", "ogg") == (
            "01 - Promised Land.ogg"
        )


class TestCreateShowDir:
    """Test create_show_dir."""

    def test_creates_directory_named_after_show(self, tmp_path: Path) -> None:
        directory = create_show_dir(tmp_path, "1977-05-08 Cornell University")

        assert directory == tmp_path / "1977-05-08 Cornell University"
        assert directory.is_dir()

    def test_creates_missing_root(self, tmp_path: Path) -> None:
        root = tmp_path / "nested" / "root"

        directory = create_show_dir(root, "1972-08-27 Veneta")

        assert directory.is_dir()

    def test_name_is_not_sanitized(self, tmp_path: Path) -> None:
        directory = create_show_dir(tmp_path, "1969-02-27 Fillmore West, S.F. (CA)")

        assert directory.name == "1969-02-27 Fillmore West, S.F. (CA)"

    def test_existing_directory_raises(self, tmp_path: Path) -> None:
        (tmp_path / "1977-05-08 Cornell University").mkdir()

        with pytest.raises(DirectoryError, match="already exists"):
            create_show_dir(tmp_path, "1977-05-08 Cornell University")

    def test_invalid_name_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryError, match="cannot be used"):
            create_show_dir(tmp_path, "1977/05/08")

        assert list(tmp_path.iterdir()) == []

    def test_empty_name_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryError):
            create_show_dir(tmp_path, "")
