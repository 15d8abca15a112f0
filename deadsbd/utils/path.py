"""
Utilities for naming track files and creating show directories.
"""

import re
from pathlib import Path

from pathvalidate import ValidationError, validate_filename

from deadsbd.exceptions import DirectoryError

# Characters stripped from track names before they are used in file names.
_UNSAFE_CHARS_REGEX = re.compile(r"""[(),".;:'\\/\-><]""")


def sanitize_track_name(raw: str) -> str:
    """
    Removes punctuation and path characters from a track name and trims it.

    >>> sanitize_track_name("(Dark/\\\\ //Star-/-->")
    'Dark Star'
    """
    return _UNSAFE_CHARS_REGEX.sub("", raw).strip()


def format_track_filename(position: int, name: str, extension: str) -> str:
    """Builds the on-disk name of a track, e.g. '03 - Scarlet Begonias.ogg'."""
    return f"{position:02} - {name}.{extension}"


def create_show_dir(root: Path, show_name: str) -> Path:
    """
    Creates the directory for a show, named exactly after the show.

    Raises:
        DirectoryError: If the name is not a valid directory name, the directory
        already exists, or the filesystem refuses to create it.
    """
    try:
        validate_filename(show_name, platform="auto")
    except ValidationError as e:
        raise DirectoryError(
            f"'{show_name}' cannot be used as a directory name: {e}"
        ) from e

    directory = root / show_name
    if directory.exists():
        raise DirectoryError(f"Directory '{directory}' already exists.")

    try:
        root.mkdir(parents=True, exist_ok=True)
        directory.mkdir()
    except FileExistsError as e:
        raise DirectoryError(f"Directory '{directory}' already exists.") from e
    except OSError as e:
        raise DirectoryError(f"Could not create directory '{directory}': {e}") from e
    return directory
