"""
Resolves a show name to a single archive.org item and its tracks.
"""

import logging
from urllib.parse import quote

from bs4 import BeautifulSoup
from rich.markup import escape

from deadsbd.exceptions import NotFoundError
from deadsbd.models.config import ArchiveConfig
from deadsbd.models.show import ResolvedShow
from deadsbd.web.page_fetcher import PageFetcher

from .track_extractor import extract_tracks

log = logging.getLogger(__name__)

RESULT_LINK_SELECTOR = 'a[data-event-click-tracking="GenericNonCollection|ItemTile"]'


class ShowResolver:
    """
    Searches the soundboard collection for a show and loads its detail page.

    Ambiguous names resolve to the most downloaded matching recording; the
    search is sorted by download count and only the first hit is used.
    """

    def __init__(self, config: ArchiveConfig, fetcher: PageFetcher):
        self.config = config
        self.fetcher = fetcher

    def search_url(self, show_name: str) -> str:
        return self.config.search_url_template.format(query=quote(show_name))

    @staticmethod
    def parse_result_links(document: BeautifulSoup) -> list[str]:
        """Returns the hrefs of all search result tiles, in ranking order."""
        links = []
        for element in document.select(RESULT_LINK_SELECTOR):
            if href := element.get("href"):
                links.append(href)
        return links

    async def resolve(self, show_name: str) -> ResolvedShow:
        """
        Finds the top search hit for a show and extracts its tracks.

        Raises:
            NotFoundError: If the search returns no items.
            NetworkError: If the search or detail page cannot be fetched.
        """
        search_url = self.search_url(show_name)
        search_document = await self.fetcher.fetch_document(search_url)
        links = self.parse_result_links(search_document)
        if not links:
            raise NotFoundError(f"No shows found with name: {show_name}")

        item_url = self.config.base_url + links[0]
        log.info(f"Resolved [cyan]{escape(show_name)}[/cyan] to [dim]{item_url}[/dim]")
        if len(links) > 1:
            log.debug(f"Ignoring {len(links) - 1} lower-ranked search results.")

        detail_document = await self.fetcher.fetch_document(item_url)
        tracks = extract_tracks(detail_document, self.config.media_extension)
        log.debug(f"Found {len(tracks)} tracks for '{escape(show_name)}'.")

        return ResolvedShow(name=show_name, item_url=item_url, tracks=tuple(tracks))
