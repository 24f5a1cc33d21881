"""Pytest configuration and fixtures."""

import httpx
import pytest

from core.config import Settings
from core.fetch import ManifestFetcher

BASE_URL = "https://raw.example.test"


@pytest.fixture
def sample_requirements():
    """Sample requirements.txt content for testing."""
    return "fastapi==0.85.0\nuvicorn>=0.18.0"


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "dependencies": {
    "express": "^4.18.0",
    "lodash": "~4.17.21"
  },
  "devDependencies": {
    "jest": "^29.0.0"
  }
}
"""


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None, raw_base_url=BASE_URL)


@pytest.fixture
def fetcher_factory(settings):
    """Build a ManifestFetcher backed by an in-memory route table.

    Routes map full URLs to ``(status, body)``; unknown URLs return 404.
    A ``bytes`` body is served as-is with a UTF-8 content type.
    Every request is appended to the returned ``requests`` list.
    """

    def factory(routes: dict[str, tuple[int, str | bytes]], error: Exception | None = None):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            status, body = routes.get(str(request.url), (404, "404: Not Found"))
            if isinstance(body, bytes):
                return httpx.Response(
                    status, content=body, headers={"content-type": "text/plain; charset=utf-8"}
                )
            return httpx.Response(status, text=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ManifestFetcher(client=client, settings=settings), requests

    return factory
