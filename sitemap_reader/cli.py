# === FILE: sitemap_reader/cli.py ===
#!/usr/bin/env python3
"""
Точка входа SitemapReader для командной строки.

Команды:
  entries SOURCE  Разобрать sitemap и вывести/сохранить записи
  summary SOURCE  Показать статистику по записям
  config          Показать текущую конфигурацию

SOURCE - путь к файлу sitemap.xml или URL (http/https).

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда entries опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --reverse           Вывести записи в обратном порядке

Пример:
  sitemap-reader entries https://example.com/sitemap.xml --json sitemap.json
"""
import json
import sys
from pathlib import Path

import click

from sitemap_reader import __version__
from sitemap_reader.aggregator import aggregate_entries
from sitemap_reader.config import load_config
from sitemap_reader.errors import SitemapError
from sitemap_reader.fetcher import read_source
from sitemap_reader.logger import DEFAULT_FORMAT, init_logging
from sitemap_reader.parser.sitemap_parser import Document
from sitemap_reader.report.html_report import render_html
from sitemap_reader.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _load_entries(cfg, source: str):
    """Загружает SOURCE и возвращает ленивую последовательность записей."""
    try:
        raw = read_source(source, cfg)
        return Document.parse(raw).iterate()
    except FileNotFoundError as e:
        print_error(f'Файл не найден: {e}')
    except SitemapError as e:
        print_error(f'Ошибка разбора sitemap: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SitemapReader, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SitemapReader CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('entries', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию - шаблон пакета)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--reverse', is_flag=True,
    help='Вывести записи в обратном порядке'
)
@click.pass_context
def entries(ctx, source, json_output, html_output, template_dir, pretty, reverse):
    """Разобрать sitemap и вывести записи."""
    cfg = ctx.obj['config']
    url_entries = _load_entries(cfg, source)
    report = aggregate_entries(reversed(url_entries) if reverse else url_entries)

    # Без --json/--html печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if (pretty or cfg.pretty) else None
        click.echo(json.dumps(report.entries, ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty or cfg.pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir or cfg.template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('summary', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.pass_context
def summary(ctx, source):
    """Показать статистику по записям sitemap."""
    cfg = ctx.obj['config']
    report = aggregate_entries(_load_entries(cfg, source))
    click.echo(json.dumps(report.summary(), ensure_ascii=False, indent=2))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
