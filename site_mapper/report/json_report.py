# site_mapper/report/json_report.py

"""
JSON-представление дерева сайта: вложенные объекты ``{"url", "children"}``.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

from site_mapper.crawler.models import Page


def tree_to_dict(root: Page) -> Dict[str, Any]:
    """Преобразует дерево в словарь без рекурсии по стеку Python."""
    result: Dict[str, Any] = {"url": root.location, "children": []}
    stack: List[tuple[Page, Dict[str, Any]]] = [(root, result)]
    while stack:
        page, node = stack.pop()
        for child in page.children:
            child_node: Dict[str, Any] = {"url": child.location, "children": []}
            node["children"].append(child_node)
            stack.append((child, child_node))
    return result


def render_json(root: Page, *, pretty: bool = False) -> str:
    """Сериализует дерево в JSON-строку (отступ 2 при ``pretty``)."""
    return json.dumps(tree_to_dict(root), ensure_ascii=False, indent=2 if pretty else None)
