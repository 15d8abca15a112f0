"""
Extracts the ordered track list from an archive.org item detail page.
"""

import logging

from bs4 import BeautifulSoup, Tag
from rich.markup import escape

from deadsbd.models.show import TrackRecord

log = logging.getLogger(__name__)

TRACK_SELECTOR = 'div[itemprop="track"]'
NAME_SELECTOR = 'meta[itemprop="name"]'
MEDIA_SELECTOR = 'link[itemprop="associatedMedia"]'


def _last_attr(container: Tag, selector: str, attr: str) -> str | None:
    """Returns the attribute of the last matching element that carries it."""
    value = None
    for element in container.select(selector):
        if (candidate := element.get(attr)) is not None:
            value = candidate
    return value


def extract_tracks(
    document: BeautifulSoup, extension: str = "ogg"
) -> list[TrackRecord]:
    """
    Builds TrackRecords from the track containers of a detail page.

    A track needs a name and a media link ending in `.{extension}`; anything
    else is skipped. Positions are numbered after filtering, so they always run
    from 1 to the number of returned tracks.
    """
    suffix = f".{extension}"
    candidates: list[tuple[str, str]] = []

    for container in document.select(TRACK_SELECTOR):
        name = _last_attr(container, NAME_SELECTOR, "content")
        url = _last_attr(container, MEDIA_SELECTOR, "href")
        if name is None or url is None or not url.endswith(suffix):
            log.debug(escape(f"Skipping track entry (name={name!r}, url={url!r})"))
            continue
        candidates.append((name, url))

    return [
        TrackRecord(position=position, display_name=name, media_url=url)
        for position, (name, url) in enumerate(candidates, 1)
    ]
