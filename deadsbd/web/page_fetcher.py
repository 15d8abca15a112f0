"""
Fetches archive.org pages over HTTP and parses them into queryable documents.
"""

import asyncio
import logging
from typing import AsyncIterator

import aiohttp
from bs4 import BeautifulSoup

from deadsbd.exceptions import NetworkError
from deadsbd.models.config import ArchiveConfig

log = logging.getLogger(__name__)


def _describe(error: Exception) -> str:
    # asyncio.TimeoutError carries no message
    return str(error) or type(error).__name__


class PageFetcher:
    """
    Thin async wrapper around a single aiohttp session.

    Every transport failure (connection errors, HTTP error statuses, timeouts)
    is raised as a NetworkError so callers only deal with one exception type.
    """

    CHUNK_SIZE = 131072  # 128 KB

    def __init__(
        self,
        config: ArchiveConfig,
        session: aiohttp.ClientSession | None = None,
    ):
        self.config = config
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept-Encoding": "gzip, deflate",
                },
                timeout=aiohttp.ClientTimeout(
                    total=self.config.request_timeout,
                    connect=self.config.connect_timeout,
                ),
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Gracefully closes the aiohttp session if this fetcher created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def fetch_text(self, url: str) -> str:
        """
        Fetches a page and returns its decoded body. Undecodable bytes are
        replaced rather than failing the page.
        """
        session = await self._get_session()
        log.debug(f"GET {url}")
        try:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Failed to fetch {url}: {_describe(e)}") from e

    async def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetches a page and parses it as HTML."""
        html = await self.fetch_text(url)
        return BeautifulSoup(html, "html.parser")

    async def iter_bytes(self, url: str) -> AsyncIterator[bytes]:
        """
        Streams the body of a media file in chunks.

        Media files can be large, so only the connect and per-read timeouts
        apply here, not the total request timeout.
        """
        session = await self._get_session()
        timeout = aiohttp.ClientTimeout(
            total=None,
            sock_connect=self.config.connect_timeout,
            sock_read=self.config.request_timeout,
        )
        log.debug(f"GET {url} (stream)")
        try:
            async with session.get(
                url, allow_redirects=True, timeout=timeout
            ) as response:
                response.raise_for_status()
                async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                    yield chunk
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Failed to fetch {url}: {_describe(e)}") from e
