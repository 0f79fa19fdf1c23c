"""site_mapper.exceptions: errors surfaced to callers of the crawler."""

from __future__ import annotations


class SiteMapperError(Exception):
    """Base class for every error raised by SiteMapper."""


class InvalidURLError(SiteMapperError, ValueError):
    """The start URL is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        message = f"invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentParseError(SiteMapperError):
    """The HTML parser rejected a document; the page is treated as a leaf."""


__all__ = ["SiteMapperError", "InvalidURLError", "DocumentParseError"]
