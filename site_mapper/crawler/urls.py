# site_mapper/crawler/urls.py
"""
URL normalization and scope filtering for SiteMapper.

Every location stored in the site tree goes through :func:`normalize_url`, so
equality of two normalized strings is the equality used for deduplication.
"""
from __future__ import annotations

import re
import string
from typing import Optional
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from pydantic import HttpUrl, TypeAdapter

from site_mapper.exceptions import InvalidURLError

ALLOWED_SCHEMES = ("http", "https")

_HTTP_URL = TypeAdapter(HttpUrl)

_ESCAPE_RE = re.compile(r"%([0-9A-Fa-f]{2})")
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
_PATH_SAFE = "/:@!$&'()*+,;="
_QUERY_SAFE = "/?:@!$&'()*+,;="


def _requote(component: str, safe: str) -> str:
    """
    Canonical percent-encoding of one URL component.

    Non-ASCII and unsafe characters are UTF-8 encoded, escapes of unreserved
    characters are decoded, every other escape is kept with upper-case hex.
    ``%2F`` therefore stays distinct from ``/``.
    """
    out = []
    pos = 0
    for match in _ESCAPE_RE.finditer(component):
        out.append(quote(component[pos:match.start()], safe=safe))
        char = chr(int(match.group(1), 16))
        out.append(char if char in _UNRESERVED else f"%{match.group(1).upper()}")
        pos = match.end()
    out.append(quote(component[pos:], safe=safe))
    return "".join(out)


def normalize_url(url: str) -> str:
    """
    Canonical form of *url* used as the dedupe key.

    Drops the fragment, lower-cases scheme and host, turns an empty path into
    ``/`` and canonicalizes the percent-encoding of path and query, so
    ``/café`` and ``/caf%c3%a9`` are the same URL. Raises ``ValueError`` for
    strings :func:`urllib.parse.urlsplit` cannot parse.
    """
    parts = urlsplit(url)
    path = parts.path
    if parts.netloc and not path:
        path = "/"
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            _requote(path, _PATH_SAFE),
            _requote(parts.query, _QUERY_SAFE),
            "",
        )
    )


def host_of(url: str) -> str:
    """Return the lower-cased netloc (host and port) of *url*."""
    return urlsplit(url).netloc.lower()


def is_in_scope(url: str, host: str) -> bool:
    """True when *url* is an http(s) URL on *host*."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme.lower() in ALLOWED_SCHEMES and parts.netloc.lower() == host.lower()


def resolve_link(base_url: str, link: str, host: Optional[str] = None) -> Optional[str]:
    """
    Turn a raw ``href`` found on *base_url* into an absolute, normalized URL.

    Returns ``None`` when the link points to another host, uses a scheme other
    than http/https or cannot be parsed. *host* overrides the host links must
    stay on (defaults to the host of *base_url*).
    """
    scope = (host if host is not None else host_of(base_url)).lower()
    try:
        parts = urlsplit(link.strip())
        if parts.scheme and parts.scheme.lower() not in ALLOWED_SCHEMES:
            return None
        if parts.netloc and parts.netloc.lower() != scope:
            return None
        absolute = normalize_url(urljoin(base_url, link.strip()))
    except ValueError:
        return None
    if not is_in_scope(absolute, scope):
        return None
    return absolute


def validate_start_url(url: str) -> str:
    """
    Check that *url* is an absolute http(s) URL and return its normalized form.

    Raises :class:`~site_mapper.exceptions.InvalidURLError` otherwise.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(str(url), "empty URL")
    candidate = url.strip()
    try:
        _HTTP_URL.validate_python(candidate)
        return normalize_url(candidate)
    except ValueError as exc:
        raise InvalidURLError(url, "expected an absolute http(s) URL") from exc


__all__ = [
    "ALLOWED_SCHEMES",
    "normalize_url",
    "host_of",
    "is_in_scope",
    "resolve_link",
    "validate_start_url",
]
