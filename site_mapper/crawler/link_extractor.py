# site_mapper/crawler/link_extractor.py
"""
Link extraction for SiteMapper.
"""
from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from site_mapper.exceptions import DocumentParseError


def parse_document(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse *markup* with the stdlib-backed BeautifulSoup builder."""
    try:
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(str(exc)) from exc


def extract_links(document: Union[BeautifulSoup, str, bytes]) -> List[str]:
    """
    Return the distinct ``href`` values of ``<a>`` elements in document order.

    Fragments are cut off before deduplication, so ``/p#a`` and ``/p#b`` count
    once as ``/p``. Raw values are returned unresolved.
    """
    soup = parse_document(document) if isinstance(document, (str, bytes)) else document
    seen: dict[str, None] = {}
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        link = href_val.strip().split("#", 1)[0]
        seen.setdefault(link, None)
    return list(seen)


__all__ = ["parse_document", "extract_links"]
