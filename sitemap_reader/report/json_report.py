# sitemap_reader/report/json_report.py

"""
Генерация JSON-отчёта для проекта SitemapReader.

Сериализация объекта SitemapReport в файл.
"""
from __future__ import annotations

import json
from pathlib import Path

from sitemap_reader.aggregator import SitemapReport


def render_json(report: SitemapReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект SitemapReport с записями sitemap
    :param output_path: путь к JSON-файлу
    :param pretty: форматировать с отступом 2
    :return: Path сохранённого файла

    Пример:
    ```python
    from sitemap_reader.report.json_report import render_json
    report_path = render_json(report, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'summary': report.summary(),
        'entries': report.entries,
    }

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
