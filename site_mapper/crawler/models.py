# site_mapper/crawler/models.py
"""
Data models for the SiteMapper crawler.
"""
from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(slots=True, weakref_slot=True, eq=False)
class Page:
    """
    Node of the site tree.

    A page owns its children; the link back to the parent is a weak reference
    used only to find the root.
    """

    location: str
    _parent: Optional[weakref.ReferenceType[Page]] = field(default=None, repr=False)
    _children: List[Page] = field(default_factory=list, repr=False)

    @classmethod
    def child_of(cls, parent: Page, location: str) -> Page:
        return cls(location=location, _parent=weakref.ref(parent))

    @property
    def parent(self) -> Optional[Page]:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> Tuple[Page, ...]:
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def root(self) -> Page:
        page = self
        while (parent := page.parent) is not None:
            page = parent
        return page

    @property
    def depth(self) -> int:
        """Depth counted from the root, which has depth 1."""
        depth = 1
        page = self.parent
        while page is not None:
            depth += 1
            page = page.parent
        return depth

    def walk(self, depth: int = 1) -> Iterator[Tuple[Page, int]]:
        """Pre-order traversal: each page, then its children, then trailing siblings."""
        stack: List[Tuple[Page, int]] = [(self, depth)]
        while stack:
            page, level = stack.pop()
            yield page, level
            stack.extend((child, level + 1) for child in reversed(page._children))

    def find(self, location: str) -> Optional[Page]:
        """Return the page of this subtree stored under *location*, if any."""
        for page, _ in self.walk():
            if page.location == location:
                return page
        return None

    def count(self) -> int:
        """Number of pages in this subtree, this page included."""
        return sum(1 for _ in self.walk())

    def _append(self, child: Page) -> None:
        self._children.append(child)


__all__ = ["Page"]
