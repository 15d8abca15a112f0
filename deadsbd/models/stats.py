"""
Result models for single show downloads and batch runs.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TrackFailure:
    """A track that could not be fetched or written."""

    position: int
    display_name: str
    error: str


@dataclass
class DownloadReport:
    """Outcome of downloading every track of one show."""

    show_name: str
    directory: Path
    written: list[Path] = field(default_factory=list)
    failures: list[TrackFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.written)

    @property
    def failed(self) -> int:
        return len(self.failures)


@dataclass
class ShowOutcome:
    """
    Terminal outcome of one show inside a batch: a report, an error, or a
    skip when the name was already handled earlier in the same batch.
    """

    show_name: str
    report: DownloadReport | None = None
    error: Exception | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """Tracks per-show outcomes for an 'all' or 'slice' run."""

    outcomes: list[ShowOutcome] = field(default_factory=list)

    @property
    def shows_downloaded(self) -> int:
        return sum(1 for o in self.outcomes if o.report is not None)

    @property
    def shows_failed(self) -> int:
        return sum(1 for o in self.outcomes if o.error is not None)

    @property
    def shows_skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.skipped)

    @property
    def tracks_downloaded(self) -> int:
        return sum(o.report.succeeded for o in self.outcomes if o.report)

    @property
    def tracks_failed(self) -> int:
        return sum(o.report.failed for o in self.outcomes if o.report)

    @property
    def show_names(self) -> list[str]:
        return [o.show_name for o in self.outcomes]
