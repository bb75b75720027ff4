# File: sitemap_reader/parser/frequency.py
"""sitemap_reader.parser.frequency: Значения тега <changefreq>."""

from __future__ import annotations

from enum import Enum

from sitemap_reader.errors import InvalidFrequency


class Frequency(str, Enum):
    """How frequently the page is likely to change."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"

    @classmethod
    def parse(cls, text: str) -> Frequency:
        """Разбирает текст <changefreq> без учёта регистра.

        Пробелы вокруг значения не обрезаются: ``" daily"`` не является
        допустимым значением.

        Raises:
            InvalidFrequency: текст не совпадает ни с одним из семи значений.
        """
        lowered = text.lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise InvalidFrequency(text)

    def __str__(self) -> str:
        return self.value
