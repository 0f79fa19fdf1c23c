# File: tests/test_tree.py
from __future__ import annotations

import asyncio
import gc

import pytest

from site_mapper.crawler.models import Page
from site_mapper.crawler.tree import SiteTree


def test_page_walk_is_preorder(sample_tree: Page):
    assert [(p.location, d) for p, d in sample_tree.walk()] == [
        ("http://ex.test/", 1),
        ("http://ex.test/a", 2),
        ("http://ex.test/a/1", 3),
        ("http://ex.test/b", 2),
    ]


def test_page_parent_root_and_depth(sample_tree: Page):
    leaf = sample_tree.find("http://ex.test/a/1")
    assert leaf is not None
    assert leaf.parent is sample_tree.children[0]
    assert leaf.root is sample_tree
    assert leaf.depth == 3
    assert sample_tree.is_root and sample_tree.depth == 1
    assert sample_tree.count() == 4


def test_page_parent_is_weak():
    root = Page(location="http://ex.test/")
    child = Page.child_of(root, "http://ex.test/a")
    root._append(child)
    del root
    gc.collect()
    assert child.parent is None


def test_children_are_read_only(sample_tree: Page):
    assert isinstance(sample_tree.children, tuple)


@pytest.mark.asyncio()
async def test_exists_scans_whole_tree_or_subtree():
    tree = SiteTree("http://ex.test/")
    a = await tree.attach_child(tree.root, "http://ex.test/a")
    b = await tree.attach_child(tree.root, "http://ex.test/b")
    await tree.attach_child(a, "http://ex.test/a/1")

    assert tree.exists("http://ex.test/a/1")
    assert tree.exists("http://ex.test/")
    assert not tree.exists("http://ex.test/missing")
    assert tree.exists("http://ex.test/a/1", subtree_root=a)
    assert not tree.exists("http://ex.test/a/1", subtree_root=b)


@pytest.mark.asyncio()
async def test_attach_child_preserves_order_and_rejects_duplicates():
    tree = SiteTree("http://ex.test/")
    for url in ("http://ex.test/c", "http://ex.test/a", "http://ex.test/b"):
        assert await tree.attach_child(tree.root, url) is not None

    assert await tree.attach_child(tree.root, "http://ex.test/a") is None
    assert await tree.attach_child(tree.root, "http://ex.test/") is None
    assert [c.location for c in tree.root.children] == [
        "http://ex.test/c",
        "http://ex.test/a",
        "http://ex.test/b",
    ]
    assert tree.size == 4


@pytest.mark.asyncio()
async def test_concurrent_attach_from_sibling_branches_is_atomic():
    tree = SiteTree("http://ex.test/")
    parents = [await tree.attach_child(tree.root, f"http://ex.test/p{i}") for i in range(10)]

    results = await asyncio.gather(
        *(tree.attach_child(parent, "http://ex.test/shared") for parent in parents)
    )

    assert sum(r is not None for r in results) == 1
    locations = [p.location for p, _ in tree.root.walk()]
    assert locations.count("http://ex.test/shared") == 1
    assert tree.size == 12
