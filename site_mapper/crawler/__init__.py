"""site_mapper.crawler: fetching, link extraction and site tree construction."""

from site_mapper.crawler.crawler import SiteCrawler, crawl
from site_mapper.crawler.models import Page
from site_mapper.crawler.tree import SiteTree

__all__ = ["SiteCrawler", "crawl", "Page", "SiteTree"]
