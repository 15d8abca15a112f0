"""
Web Layer.

This package contains the HTTP client used to fetch and parse archive.org
listing, search and detail pages, and to stream media files.
"""

from .page_fetcher import PageFetcher

__all__ = ["PageFetcher"]
