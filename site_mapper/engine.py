# File: site_mapper/engine.py
"""site_mapper.engine: синхронный фасад для запуска обхода из CLI и скриптов."""

from __future__ import annotations

import asyncio
from typing import Optional

from site_mapper.config import CrawlerConfig, load_config
from site_mapper.crawler.crawler import crawl
from site_mapper.crawler.models import Page
from site_mapper.logger import logger

__all__ = ["Engine", "run_crawl"]


class Engine:
    """Фасад для CLI и тестов: конфиг, запуск обхода, общий таймаут."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlerConfig:
        """Загружает конфиг из YAML/JSON или использует значения по умолчанию."""
        return load_config(path)

    def __init__(self, config: Optional[CrawlerConfig] = None) -> None:
        self.config = config or CrawlerConfig()

    def start_crawl(
        self,
        start_url: str,
        max_depth: Optional[int] = None,
        crawl_timeout: Optional[float] = None,
    ) -> Page:
        """Запускает обход и возвращает корень дерева.

        ``crawl_timeout`` ограничивает весь обход целиком (секунд).
        """
        depth = self.config.max_depth if max_depth is None else max_depth
        logger.info("Starting crawl of %s…", start_url)
        coro = crawl(start_url, depth, self.config)
        try:
            if crawl_timeout is not None:
                return asyncio.run(asyncio.wait_for(coro, timeout=crawl_timeout))
            return asyncio.run(coro)
        except asyncio.TimeoutError:
            logger.error("Crawl did not finish within %s seconds", crawl_timeout)
            raise


def run_crawl(
    start_url: str,
    max_depth: Optional[int] = None,
    config: Optional[CrawlerConfig] = None,
    crawl_timeout: Optional[float] = None,
) -> Page:
    """Короткий вызов :meth:`Engine.start_crawl`."""
    return Engine(config).start_crawl(start_url, max_depth, crawl_timeout)
