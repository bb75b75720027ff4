# sitemap_reader/__init__.py
"""
SitemapReader package initializer.
Defines package version and exposes the parsing API.
"""
__version__ = "0.1.0"

from sitemap_reader.errors import (
    FetchError,
    InvalidFrequency,
    ParseError,
    SitemapError,
    UrlsetMissing,
)
from sitemap_reader.models import UrlEntry
from sitemap_reader.parser.frequency import Frequency
from sitemap_reader.parser.sitemap_parser import Document, UrlEntries, parse_sitemap

__all__ = [
    "Document",
    "UrlEntries",
    "UrlEntry",
    "Frequency",
    "parse_sitemap",
    "SitemapError",
    "ParseError",
    "UrlsetMissing",
    "InvalidFrequency",
    "FetchError",
]
