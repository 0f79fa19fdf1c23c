# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from typing import Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_mapper.crawler.models import Page

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


def html_page(body: str) -> Handler:
    """Handler returning *body* as an HTML document."""

    async def handler(_):
        return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")

    return handler


def make_app(routes: Mapping[str, Union[str, Handler]]) -> web.Application:
    """Build an app from ``path -> html body | handler``; HEAD is served by the GET routes."""
    app = web.Application()
    for path, target in routes.items():
        handler = html_page(target) if isinstance(target, str) else target
        app.router.add_get(path, handler)
    return app


@pytest_asyncio.fixture
async def serve() -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start apps on ephemeral ports, return their base URL, clean up afterwards."""
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        site = web.TCPSite(runner, "127.0.0.1", 0)
        await site.start()
        host, port = runner.addresses[0][:2]
        return f"http://{host}:{port}"

    yield _serve
    for runner in runners:
        await runner.cleanup()


def build_tree(spec: Mapping[str, list[str]], root: str) -> Page:
    """Build a Page tree from ``location -> [child locations]``."""
    page = Page(location=root)
    stack = [page]
    while stack:
        current = stack.pop()
        for location in spec.get(current.location, []):
            child = Page.child_of(current, location)
            current._append(child)
            stack.append(child)
    return page


@pytest.fixture()
def sample_tree() -> Page:
    """
    http://ex.test/
      http://ex.test/a
        http://ex.test/a/1
      http://ex.test/b
    """
    return build_tree(
        {
            "http://ex.test/": ["http://ex.test/a", "http://ex.test/b"],
            "http://ex.test/a": ["http://ex.test/a/1"],
        },
        "http://ex.test/",
    )


@pytest.fixture()
def mock_html() -> str:
    """Simple HTML with internal, external and mailto links."""
    return (
        '<html><body><a href="/link1">L1</a><a href="http://external.com">X</a>'
        '<a href="mailto:me@example.com">M</a></body></html>'
    )


@pytest.fixture()
def site_app() -> Callable[[Mapping[str, Union[str, Handler]]], web.Application]:
    """Factory building an aiohttp app from ``path -> html body | handler``."""
    return make_app
