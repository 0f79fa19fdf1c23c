# === FILE: site_mapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from aiohttp import ClientSession, ClientTimeout

from site_mapper.config import UNBOUNDED, CrawlerConfig
from site_mapper.crawler.fetcher import Fetcher
from site_mapper.crawler.link_extractor import extract_links
from site_mapper.crawler.models import Page
from site_mapper.crawler.tree import SiteTree
from site_mapper.crawler.urls import host_of, normalize_url, resolve_link, validate_start_url
from site_mapper.exceptions import DocumentParseError
from site_mapper.logger import LOGGER_NAME

__all__ = ("SiteCrawler", "crawl")


class SiteCrawler:
    """Асинхронный краулер, строящий дерево страниц одного домена."""

    def __init__(self, config: Optional[CrawlerConfig] = None) -> None:
        self.config = config or CrawlerConfig()
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.tree: Optional[SiteTree] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> SiteCrawler:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, start_url: str, max_depth: Optional[int] = None) -> Page:
        """
        Build the site tree rooted at *start_url*.

        *max_depth* defaults to the configured value; ``-1`` means unbounded.
        Raises :class:`~site_mapper.exceptions.InvalidURLError` for a malformed
        start URL, every other failure only turns the affected page into a leaf.
        """
        root_url = validate_start_url(start_url)
        if max_depth is None:
            max_depth = self.config.max_depth
        if max_depth < UNBOUNDED:
            raise ValueError(f"max_depth must be >= {UNBOUNDED}, got {max_depth}")
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        if max_depth == UNBOUNDED:
            self.logger.warning(
                "Crawling %s without a depth limit; only URL deduplication bounds the crawl", root_url
            )

        self.logger.info("Старт обхода: %s (max_depth=%s)", root_url, max_depth)
        start = time.monotonic()
        self.tree = SiteTree(root_url)
        await self.scan(self.tree.root, max_depth, 1)
        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с (%.2f стр/с)",
            self.tree.size,
            duration,
            self.tree.size / duration if duration else 0,
        )
        return self.tree.root

    async def scan(self, page: Page, max_depth: int, depth: int) -> None:
        """Fetch *page*, attach its new links as children, then scan them concurrently."""
        if max_depth != UNBOUNDED and depth >= max_depth:
            return
        assert self.fetcher is not None and self.tree is not None

        result = await self.fetcher.fetch(page.location)
        if result is None:
            return
        scope = host_of(page.location)
        base = normalize_url(result.final_url)
        if host_of(base) != scope:
            self.logger.debug("Redirected off-site: %s -> %s", page.location, base)
            return

        try:
            links = extract_links(result.body)
        except DocumentParseError as e:
            self.logger.warning("Unparsable HTML at %s: %s", page.location, e)
            return

        for link in links:
            url = resolve_link(base, link, host=scope)
            if url is None:
                continue
            await self.tree.attach_child(page, url)

        children = page.children
        if children:
            await asyncio.gather(*(self.scan(child, max_depth, depth + 1) for child in children))


async def crawl(
    start_url: str,
    max_depth: int = UNBOUNDED,
    config: Optional[CrawlerConfig] = None,
) -> Page:
    """Crawl *start_url* and return the root of the completed site tree."""
    validate_start_url(start_url)
    async with SiteCrawler(config) as crawler:
        return await crawler.crawl(start_url, max_depth)
