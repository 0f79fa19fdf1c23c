# File: tests/test_report.py
import json

import pytest

from site_mapper.crawler.models import Page
from site_mapper.report import render_json, render_text, tree_to_dict


def test_render_text_indents_by_depth(sample_tree: Page):
    assert render_text(sample_tree).splitlines() == [
        "http://ex.test/",
        " http://ex.test/a",
        "  http://ex.test/a/1",
        " http://ex.test/b",
    ]


def test_render_text_custom_indent(sample_tree: Page):
    lines = render_text(sample_tree, indent=4).splitlines()
    assert lines[2] == "        http://ex.test/a/1"
    assert render_text(sample_tree, indent=0).splitlines()[3] == "http://ex.test/b"


def test_render_text_single_node():
    assert render_text(Page(location="http://ex.test/")) == "http://ex.test/"


def test_render_text_rejects_negative_indent(sample_tree: Page):
    with pytest.raises(ValueError):
        render_text(sample_tree, indent=-1)


def test_render_json(sample_tree: Page):
    data = json.loads(render_json(sample_tree, pretty=True))
    assert data == tree_to_dict(sample_tree)
    assert data["url"] == "http://ex.test/"
    assert [c["url"] for c in data["children"]] == ["http://ex.test/a", "http://ex.test/b"]
    assert data["children"][0]["children"] == [{"url": "http://ex.test/a/1", "children": []}]
    assert data["children"][1]["children"] == []
