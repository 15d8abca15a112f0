"""
Data Models Layer.

This package contains the Pydantic configuration model and the dataclasses
that describe shows, tracks and download results.
"""

from .config import ArchiveConfig
from .show import ResolvedShow, TrackRecord
from .stats import BatchReport, DownloadReport, ShowOutcome, TrackFailure

__all__ = [
    "ArchiveConfig",
    "BatchReport",
    "DownloadReport",
    "ResolvedShow",
    "ShowOutcome",
    "TrackFailure",
    "TrackRecord",
]
