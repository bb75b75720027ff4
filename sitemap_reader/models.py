# sitemap_reader/models.py
"""
Data models for SitemapReader.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from sitemap_reader.parser.frequency import Frequency


@dataclass(frozen=True, slots=True)
class UrlEntry:
    """One ``<url>`` entry of a ``<urlset>``.

    See https://www.sitemaps.org/protocol.html for the meaning of the fields.
    """

    #: ``<loc>``, always present.
    location: str
    #: ``<lastmod>`` verbatim; expected (not enforced) to be a W3C datetime.
    last_modified: Optional[str] = None
    #: ``<changefreq>``
    change_frequency: Optional[Frequency] = None
    #: ``<priority>``, within ``[0.0, 1.0]``.
    priority: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "location": self.location,
            "last_modified": self.last_modified,
            "change_frequency": self.change_frequency.value if self.change_frequency else None,
            "priority": self.priority,
        }
