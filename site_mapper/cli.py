# === FILE: site_mapper/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SiteMapper через командную строку.

Команды:
  crawl URL   Обойти сайт начиная с URL и вывести дерево страниц
  config      Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --timeout SEC       Таймаут одного запроса (override timeout)
  --user-agent UA     Заголовок User-Agent (override user_agent)
  --no-probe          Не отправлять HEAD-запрос перед GET
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --max-depth, -d N   Максимальная глубина (корень = 1, -1 = без ограничения)
  --format FORMAT     text (по умолчанию) или json
  --indent N          Пробелов на уровень в текстовом выводе
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC Таймаут всего обхода (секунд)

Дополнительно:
  --version, -v       Показать версию SiteMapper

Пример:
  site-mapper crawl https://example.com --max-depth 3
"""
import asyncio
import sys
from pathlib import Path

import click

from site_mapper import __version__
from site_mapper.config import UNBOUNDED, CrawlerConfig, load_config
from site_mapper.engine import run_crawl
from site_mapper.exceptions import InvalidURLError
from site_mapper.logger import DEFAULT_FORMAT, init_logging
from site_mapper.report import render_json, render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMapper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут одного запроса, секунд (override timeout)'
)
@click.option(
    '--user-agent', 'user_agent',
    default=None,
    help='Заголовок User-Agent (override user_agent)'
)
@click.option(
    '--probe/--no-probe', 'probe',
    default=None,
    help='Проверять страницу HEAD-запросом перед GET'
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
def cli(ctx, config_path, timeout, user_agent, probe, log_level, log_file, log_format):
    """Группа команд SiteMapper CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    overrides = {
        key: value
        for key, value in (('timeout', timeout), ('user_agent', user_agent), ('probe', probe))
        if value is not None
    }
    try:
        cfg = load_config(config_path)
        if overrides:
            cfg = CrawlerConfig(**{**cfg.model_dump(), **overrides})
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--max-depth', '-d', 'max_depth',
    type=click.IntRange(min=UNBOUNDED),
    default=None,
    help='Максимальная глубина дерева (корень = 1, -1 = без ограничения)'
)
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(['text', 'json']),
    default='text',
    show_default=True,
    help='Формат вывода дерева'
)
@click.option(
    '--indent', 'indent',
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help='Пробелов на уровень вложенности в текстовом выводе'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl_command(ctx, url, max_depth, output_format, indent, pretty, crawl_timeout):
    """Обойти сайт начиная с URL и вывести дерево страниц."""
    cfg = ctx.obj['config']
    depth = cfg.max_depth if max_depth is None else max_depth
    if depth == UNBOUNDED:
        click.secho(
            'Внимание: глубина не ограничена, обход большого сайта может не завершиться',
            fg='yellow', err=True
        )
    try:
        root = run_crawl(url, depth, cfg, crawl_timeout)
    except InvalidURLError as e:
        print_error(f'Некорректный URL: {e}')
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')

    if output_format == 'json':
        click.echo(render_json(root, pretty=pretty))
    else:
        click.echo(render_text(root, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
