"""
Data structures for shows and the tracks scraped from their detail pages.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrackRecord:
    """A single downloadable track of a show."""

    position: int
    display_name: str
    media_url: str


@dataclass(frozen=True)
class ResolvedShow:
    """A show name bound to one archive item and its ordered tracks."""

    name: str
    item_url: str
    tracks: tuple[TrackRecord, ...] = field(default_factory=tuple)
