# File: site_mapper/report/__init__.py
"""site_mapper.report: вывод дерева сайта в текстовом и JSON-виде."""

from __future__ import annotations

from site_mapper.report.json_report import render_json, tree_to_dict
from site_mapper.report.text_report import render_text

__all__ = ["render_text", "render_json", "tree_to_dict"]
