# site_mapper/crawler/tree.py
"""
Shared, in-progress site tree.

Concurrent page scans discover links independently, so checking whether a URL
is already in the tree and attaching it as a child must happen as one step.
A single tree-wide :class:`asyncio.Lock` guards that step.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from site_mapper.crawler.models import Page
from site_mapper.logger import LOGGER_NAME

__all__ = ("SiteTree",)


class SiteTree:
    """Owner of the root page and of the lock serializing mutations."""

    def __init__(self, root_url: str) -> None:
        self.root = Page(location=root_url)
        self._lock = asyncio.Lock()
        self._size = 1
        self.logger = logging.getLogger(LOGGER_NAME)

    @property
    def size(self) -> int:
        return self._size

    def exists(self, url: str, subtree_root: Optional[Page] = None) -> bool:
        """Scan *subtree_root* (the global root by default) for *url*."""
        start = self.root if subtree_root is None else subtree_root
        return start.find(url) is not None

    async def attach_child(self, parent: Page, url: str) -> Optional[Page]:
        """
        Attach *url* under *parent* unless it is already anywhere in the tree.

        Returns the new page, or ``None`` for a duplicate.
        """
        async with self._lock:
            if self.exists(url):
                return None
            child = Page.child_of(parent, url)
            parent._append(child)
            self._size += 1
        self.logger.debug("Discovered %s (via %s)", url, parent.location)
        return child
