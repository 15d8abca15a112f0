"""
Handles the low-level downloading of media files to disk.
"""

import asyncio
import logging
import os
from pathlib import Path

import aiofiles

from deadsbd.exceptions import NetworkError, TrackError
from deadsbd.web.page_fetcher import PageFetcher

log = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"


class Downloader:
    """
    Streams a media URL into a file.

    The body is written to '<destination>.part' and only renamed onto the final
    path once complete, so an interrupted download never looks finished.
    """

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    async def download_file(self, url: str, destination_path: Path) -> int:
        """
        Downloads `url` to `destination_path` and returns the number of bytes written.

        Raises:
            TrackError: If the file cannot be fetched or written.
        """
        partial_path = destination_path.with_name(
            destination_path.name + PARTIAL_SUFFIX
        )
        bytes_written = 0
        try:
            async with aiofiles.open(partial_path, "wb") as f:
                async for chunk in self.fetcher.iter_bytes(url):
                    await f.write(chunk)
                    bytes_written += len(chunk)
            await asyncio.to_thread(os.replace, partial_path, destination_path)
        except NetworkError as e:
            await self._discard(partial_path)
            raise TrackError(f"Download failed: {e}") from e
        except OSError as e:
            await self._discard(partial_path)
            raise TrackError(f"Could not write '{destination_path.name}': {e}") from e

        log.debug(f"Wrote {bytes_written} bytes to '{destination_path}'")
        return bytes_written

    @staticmethod
    async def _discard(partial_path: Path) -> None:
        try:
            await asyncio.to_thread(partial_path.unlink, missing_ok=True)
        except OSError as e:
            log.debug(f"Could not remove partial file '{partial_path}': {e}")
