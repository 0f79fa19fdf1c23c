# site_mapper/report/text_report.py

"""
Текстовое представление дерева сайта.

Каждая страница печатается на своей строке с отступом по глубине;
дети выводятся раньше следующих соседей (обход в глубину).
"""
from __future__ import annotations

from typing import Iterator

from site_mapper.crawler.models import Page


def iter_lines(root: Page, indent: int = 1) -> Iterator[str]:
    """Строки дерева по одной на страницу, корень без отступа."""
    for page, depth in root.walk():
        yield f"{' ' * (indent * (depth - 1))}{page.location}"


def render_text(root: Page, indent: int = 1) -> str:
    """
    Возвращает дерево как многострочный текст.

    :param root: корень дерева, полученный от crawl()
    :param indent: число пробелов на уровень вложенности
    """
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")
    return "\n".join(iter_lines(root, indent))
