"""
SiteMapper package initializer.
Defines package version and exposes the crawl entry point.
"""
__version__ = "0.1.0"

from site_mapper.crawler import Page, SiteCrawler, crawl
from site_mapper.exceptions import InvalidURLError, SiteMapperError

__all__ = ["__version__", "crawl", "Page", "SiteCrawler", "InvalidURLError", "SiteMapperError"]
