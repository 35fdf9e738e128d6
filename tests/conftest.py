from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from url_details.config import Settings
from url_details.main import create_app
from url_details.routers.url_details import limiter
from url_details.services.fetcher import RemoteFetcher

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counter before every test."""
    limiter._storage.reset()
    yield


@pytest.fixture
def example_html() -> bytes:
    return (FIXTURES / "example-website.html").read_bytes()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


class RecordingFetcher(RemoteFetcher):
    """Fetcher that remembers the options of the last outcome it produced."""

    last_options = None

    async def fetch(self, url, options):
        outcome = await super().fetch(url, options)
        self.last_options = outcome.options
        return outcome


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        options_hook=None,
        permission=None,
        fetcher: Optional[RemoteFetcher] = None,
    ) -> TestClient:
        if fetcher is None:
            fetcher = RecordingFetcher(
                transport=RecordingTransport(handler), block_private_hosts=False
            )
        app = create_app(
            settings=Settings(),
            permission=permission,
            fetcher=fetcher,
            options_hook=options_hook,
        )
        return TestClient(app)

    return _make
