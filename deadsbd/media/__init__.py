"""
Media Layer.

This package is responsible for writing downloaded audio files to disk.
"""

from .downloader import Downloader

__all__ = ["Downloader"]
