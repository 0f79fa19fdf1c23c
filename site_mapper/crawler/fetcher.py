# site_mapper/crawler/fetcher.py
"""
Fetcher module: HEAD probe, full GET and classification of responses.

Failures never leave this module as exceptions: a page that cannot be fetched,
or whose response is not an HTML success, simply yields ``None``.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from aiohttp import ClientError, ClientResponse, ClientSession

from site_mapper.config import CrawlerConfig
from site_mapper.logger import LOGGER_NAME

HTML_CONTENT_TYPE = "text/html"
ELIGIBLE_STATUS = range(200, 400)


@dataclass(slots=True, frozen=True)
class FetchResult:
    """Body of an eligible response and the URL it was finally served from."""

    url: str
    final_url: str
    status: int
    content_type: str
    body: bytes


def is_eligible(status: int, content_types: Iterable[str]) -> bool:
    """Success or redirect status and at least one ``text/html`` content type."""
    if status not in ELIGIBLE_STATUS:
        return False
    return any(ct.strip().lower().startswith(HTML_CONTENT_TYPE) for ct in content_types)


def _content_types(resp: ClientResponse) -> list[str]:
    return list(resp.headers.getall("Content-Type", []))


class Fetcher:
    """Fetches pages through a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

    async def probe(self, url: str) -> bool:
        """Send a HEAD request and report whether a GET is worth it."""
        try:
            async with self.session.head(url, allow_redirects=True) as resp:
                eligible = is_eligible(resp.status, _content_types(resp))
                if not eligible:
                    self.logger.debug(
                        "Probe rejected %s: HTTP %s %s", url, resp.status, resp.headers.get("Content-Type", "")
                    )
                return eligible
        except (ClientError, asyncio.TimeoutError) as e:
            self.logger.warning("Probe failed %s: %s", url, str(e) or type(e).__name__)
            return False

    async def fetch(self, url: str) -> Optional[FetchResult]:
        """
        Probe (unless disabled) and GET *url*.

        Returns a :class:`FetchResult` for an eligible response, ``None`` for
        transport errors and ineligible responses.
        """
        if self.config.probe and not await self.probe(url):
            return None
        try:
            async with self.session.get(url, allow_redirects=True) as resp:
                content_types = _content_types(resp)
                if not is_eligible(resp.status, content_types):
                    self.logger.debug("Skipped %s: HTTP %s %s", url, resp.status, content_types)
                    return None
                body = await resp.read()
                return FetchResult(
                    url=url,
                    final_url=str(resp.url),
                    status=resp.status,
                    content_type=content_types[0],
                    body=body,
                )
        except (ClientError, asyncio.TimeoutError) as e:
            self.logger.warning("Failed %s: %s", url, str(e) or type(e).__name__)
            return None


__all__ = ["Fetcher", "FetchResult", "is_eligible", "ELIGIBLE_STATUS", "HTML_CONTENT_TYPE"]
