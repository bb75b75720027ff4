# File: sitemap_reader/aggregator.py
"""sitemap_reader.aggregator: Сводный отчёт по записям sitemap."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, TypedDict

from sitemap_reader.models import UrlEntry


class EntryInfo(TypedDict):
    """Запись sitemap в виде, пригодном для JSON/HTML."""

    location: str
    last_modified: Optional[str]
    change_frequency: Optional[str]
    priority: Optional[float]


@dataclass(slots=True)
class SitemapReport:
    """Результат разбора sitemap: записи и простая статистика по ним."""

    entries: List[EntryInfo] = field(default_factory=list)
    frequencies: Dict[str, int] = field(default_factory=dict)
    with_last_modified: int = 0
    with_priority: int = 0

    @property
    def total(self) -> int:
        return len(self.entries)

    def summary(self) -> Dict[str, object]:
        """Статистика без самих записей."""
        return {
            "total": self.total,
            "with_last_modified": self.with_last_modified,
            "with_priority": self.with_priority,
            "frequencies": dict(self.frequencies),
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление SitemapReport."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_entries(entries: Iterable[UrlEntry]) -> SitemapReport:
    """Обходит последовательность один раз и собирает SitemapReport."""
    report = SitemapReport()
    frequencies: Counter[str] = Counter()

    for entry in entries:
        info: EntryInfo = entry.to_dict()  # type: ignore[assignment]
        report.entries.append(info)
        if entry.last_modified is not None:
            report.with_last_modified += 1
        if entry.priority is not None:
            report.with_priority += 1
        if entry.change_frequency is not None:
            frequencies[entry.change_frequency.value] += 1

    report.frequencies = dict(frequencies)
    return report
