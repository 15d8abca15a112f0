"""
The main orchestrator for resolving shows and writing their tracks to disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from rich.markup import escape

from deadsbd.exceptions import DeadSbdError, TrackError
from deadsbd.media.downloader import Downloader
from deadsbd.models.config import ArchiveConfig
from deadsbd.models.show import ResolvedShow
from deadsbd.models.stats import BatchReport, DownloadReport, ShowOutcome, TrackFailure
from deadsbd.utils.path import (
    create_show_dir,
    format_track_filename,
    sanitize_track_name,
)
from deadsbd.web.page_fetcher import PageFetcher

from .show_lister import ShowLister
from .show_resolver import ShowResolver

log = logging.getLogger(__name__)


def select_slice(show_names: Iterable[str], start: str, end: str) -> Iterator[str]:
    """
    Yields the inclusive run of shows from the first `start` to the first `end`
    that follows it.

    Nothing is yielded when `start` never appears; when `end` never appears
    after `start`, the run continues to the end of the sequence.
    """
    inside_slice = False
    for name in show_names:
        if not inside_slice and name == start:
            inside_slice = True
        if inside_slice:
            yield name
            if name == end:
                return


class DownloadManager:
    """Orchestrates single show, full catalog and slice downloads."""

    def __init__(
        self,
        config: ArchiveConfig,
        fetcher: PageFetcher,
        lister: ShowLister | None = None,
        resolver: ShowResolver | None = None,
        downloader: Downloader | None = None,
    ):
        self.config = config
        self.output_root = Path(config.output_dir)
        self.lister = lister or ShowLister(config, fetcher)
        self.resolver = resolver or ShowResolver(config, fetcher)
        self.downloader = downloader or Downloader(fetcher)

    async def download_show(self, resolved: ResolvedShow) -> DownloadReport:
        """
        Writes every track of a resolved show into a directory named after it.

        Raises:
            DirectoryError: If the show directory cannot be created. No track
            is attempted in that case.
        """
        directory = create_show_dir(self.output_root, resolved.name)
        report = DownloadReport(show_name=resolved.name, directory=directory)
        log.info(
            f"\n[bold cyan]▶ Show:[/] {escape(resolved.name)} "
            f"[dim]({len(resolved.tracks)} tracks)[/dim]"
        )

        for track in resolved.tracks:
            track_name = sanitize_track_name(track.display_name)
            if not track_name:
                error = TrackError(
                    f"Track name {track.display_name!r} is empty after sanitization."
                )
                report.failures.append(
                    TrackFailure(track.position, track.display_name, str(error))
                )
                log.error(
                    f"[red]  ✗ Track {track.position:02}: {escape(str(error))}[/red]"
                )
                continue

            filename = format_track_filename(
                track.position, track_name, self.config.media_extension
            )
            destination = directory / filename
            try:
                await self.downloader.download_file(track.media_url, destination)
            except TrackError as e:
                report.failures.append(
                    TrackFailure(track.position, track.display_name, str(e))
                )
                log.error(
                    f'[red]  ✗ Failed to download "{escape(filename)}": '
                    f"{escape(str(e))}[/red]"
                )
                continue

            report.written.append(destination)
            log.info(f'[green]  ✓ Downloaded "{escape(filename)}"[/green]')

        return report

    async def fetch_show(self, show_name: str) -> DownloadReport:
        """
        Resolves a show by name and downloads it.

        Raises:
            NotFoundError: If the search returns no items; no directory is created.
            NetworkError: If the search or detail page cannot be fetched.
            DirectoryError: If the show directory cannot be created.
        """
        log.info(f"Attempting to fetch show: [cyan]{escape(show_name)}[/cyan]")
        resolved = await self.resolver.resolve(show_name)
        return await self.download_show(resolved)

    async def fetch_all(self) -> BatchReport:
        """Downloads every show in the collection, oldest first."""
        show_names = await self.lister.list_shows()
        log.info(f"Found {len(show_names)} shows. Downloading all of them...")
        return await self._run_batch(show_names)

    async def fetch_slice(self, start: str, end: str) -> BatchReport:
        """Downloads all shows from `start` to `end`, both inclusive."""
        log.info(
            f'Attempting to download shows from "{escape(start)}" to "{escape(end)}"'
        )
        show_names = await self.lister.list_shows()
        selected = list(select_slice(show_names, start, end))
        if not selected:
            log.warning(
                f'[yellow]Show "{escape(start)}" is not in the listing. '
                "Nothing to download.[/yellow]"
            )
        return await self._run_batch(selected)

    async def _run_batch(self, show_names: Iterable[str]) -> BatchReport:
        """
        Fetches shows one after another. A failing show is reported and the
        batch moves on to the next one.
        """
        batch = BatchReport()
        processed: set[str] = set()

        for show_name in show_names:
            # Listing pages overlap, so a show can be listed twice in a row.
            if show_name in processed:
                batch.outcomes.append(ShowOutcome(show_name=show_name, skipped=True))
                log.info(
                    f'[yellow]↷ Show "{escape(show_name)}" is listed again. '
                    "Skipping the repeat.[/yellow]"
                )
                continue
            processed.add(show_name)

            try:
                report = await self.fetch_show(show_name)
            except DeadSbdError as e:
                batch.outcomes.append(ShowOutcome(show_name=show_name, error=e))
                log.error(
                    f'[red]✗ Failed to download show "{escape(show_name)}": '
                    f"{escape(str(e))}[/red]"
                )
                continue

            batch.outcomes.append(ShowOutcome(show_name=show_name, report=report))
            log.info(
                f'[bold green]✓ Successfully downloaded show "{escape(show_name)}"'
                f"[/bold green] [dim]({report.succeeded} downloaded, "
                f"{report.failed} failed)[/dim]"
            )

        return batch
