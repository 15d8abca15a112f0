"""
Walks the paginated soundboard listing and yields show names in date order.
"""

import logging
from itertools import groupby
from typing import AsyncIterator

from bs4 import BeautifulSoup

from deadsbd.models.config import ArchiveConfig
from deadsbd.web.page_fetcher import PageFetcher

log = logging.getLogger(__name__)

TITLE_SELECTOR = "div.ttl"


class ShowLister:
    """
    Produces every show name in the soundboard collection, oldest first.

    Shows are listed in chronological order starting from the first recorded
    soundboard in 1965 to the last one recorded at Soldier Field in 1995.
    """

    def __init__(self, config: ArchiveConfig, fetcher: PageFetcher):
        self.config = config
        self.fetcher = fetcher

    def page_url(self, page: int) -> str:
        return self.config.listing_url_template.format(page=page)

    @staticmethod
    def parse_page(document: BeautifulSoup) -> list[str]:
        """
        Extracts the show titles of one listing page.

        The archive renders some titles twice in a row; consecutive repeats
        are collapsed. Repeats across pages are left to the caller.
        """
        titles = [el.get_text().strip() for el in document.select(TITLE_SELECTOR)]
        return [title for title, _ in groupby(titles)]

    async def iter_shows(self) -> AsyncIterator[str]:
        """
        Yields show names page by page.

        A page is fully fetched and parsed before any of its names are yielded.
        A failing page raises NetworkError and ends the iteration.
        """
        for page in range(self.config.page_count):
            document = await self.fetcher.fetch_document(self.page_url(page))
            names = self.parse_page(document)
            log.debug(
                f"Listing page {page + 1}/{self.config.page_count}: {len(names)} shows"
            )
            for name in names:
                yield name

    async def list_shows(self) -> list[str]:
        """Collects the complete listing."""
        return [name async for name in self.iter_shows()]
