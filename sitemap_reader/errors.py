# File: sitemap_reader/errors.py
"""sitemap_reader.errors: Иерархия исключений SitemapReader."""

from __future__ import annotations

from typing import Optional


class SitemapError(Exception):
    """Base sitemap_reader exception."""


class ParseError(SitemapError):
    """Malformed XML (wraps the lxml diagnostic)."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class UrlsetMissing(SitemapError):
    """The mandatory <urlset> root element is missing.

    ``found`` holds the local name of the root element that was found instead,
    or ``None`` if the document has no root element at all.
    """

    def __init__(self, found: Optional[str] = None):
        if found is None:
            message = "Document has no <urlset> root element"
        else:
            message = f"Expected <urlset> root element, got <{found}>"
        super().__init__(message)
        self.found = found


class InvalidFrequency(SitemapError, ValueError):
    """Text is not one of the seven <changefreq> tokens."""

    def __init__(self, text: str):
        super().__init__(f"Invalid change frequency: {text!r}")
        self.text = text


class FetchError(SitemapError):
    """Sitemap could not be downloaded."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
