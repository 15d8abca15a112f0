"""Shared fixtures: an in-memory page fetcher and archive.org-shaped HTML."""

from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup

from deadsbd.exceptions import NetworkError
from deadsbd.models.config import ArchiveConfig


class FakeFetcher:
    """Stands in for PageFetcher, serving canned pages and media bodies."""

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}
        self.media: dict[str, bytes] = {}
        self.requested: list[str] = []

    async def fetch_document(self, url: str) -> BeautifulSoup:
        self.requested.append(url)
        if url not in self.pages:
            raise NetworkError(f"Failed to fetch {url}: 404, message='Not Found'")
        return BeautifulSoup(self.pages[url], "html.parser")

    async def iter_bytes(self, url: str):
        self.requested.append(url)
        if url not in self.media:
            raise NetworkError(f"Failed to fetch {url}: 404, message='Not Found'")
        data = self.media[url]
        for i in range(0, len(data), 4):
            yield data[i : i + 4]


@pytest.fixture
def config(tmp_path: Path) -> ArchiveConfig:
    """Configuration pointing at a fake archive and a temporary output dir."""
    return ArchiveConfig(
        base_url="https://archive.test",
        listing_url_template="https://archive.test/list?page={page}",
        search_url_template="https://archive.test/search?query={query}",
        page_count=3,
        output_dir=str(tmp_path / "shows"),
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def listing_page() -> Callable[..., str]:
    """Builds a listing page with one title tile per show name."""

    def build(*show_names: str) -> str:
        tiles = "\n".join(
            f'<div class="item-ia"><div class="ttl">\n  {name}\n</div></div>'
            for name in show_names
        )
        return f"<html><body>{tiles}</body></html>"

    return build


@pytest.fixture
def search_page() -> Callable[..., str]:
    """Builds a search results page with one item tile per href."""

    def build(*hrefs: str | None) -> str:
        tiles = []
        for href in hrefs:
            href_attr = f' href="{href}"' if href is not None else ""
            tiles.append(
                '<a data-event-click-tracking="GenericNonCollection|ItemTile"'
                f"{href_attr}>tile</a>"
            )
        return f"<html><body>{''.join(tiles)}</body></html>"

    return build


@pytest.fixture
def detail_page() -> Callable[..., str]:
    """Builds a detail page from (name, url) pairs; None omits the element."""

    def build(*tracks: tuple[str | None, str | None]) -> str:
        containers = []
        for name, url in tracks:
            parts = []
            if name is not None:
                parts.append(f'<meta itemprop="name" content="{name}"/>')
            if url is not None:
                parts.append(f'<link itemprop="associatedMedia" href="{url}"/>')
            containers.append(f'<div itemprop="track">{"".join(parts)}</div>')
        return f"<html><body>{''.join(containers)}</body></html>"

    return build
