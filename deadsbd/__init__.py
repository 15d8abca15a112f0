"""
deadsbd: downloads Grateful Dead soundboard recordings from archive.org.
"""

__version__ = "0.1.0"
