"""Tests for manifest fetching."""

import httpx
import pytest

from core.exceptions import (
    ManifestAuthError,
    ManifestNotFound,
    ManifestTransportError,
)
from core.fetch import manifest_path
from core.models import EcosystemDescriptor, RepositoryTarget

BASE_URL = "https://raw.example.test"

NODE = EcosystemDescriptor("node", "package.json", lambda content: set(), {})
TARGET = RepositoryTarget(owner="octocat", repository="hello")


def url(branch: str, path: str = "package.json") -> str:
    return f"{BASE_URL}/octocat/hello/{branch}/{path}"


class TestManifestPath:
    """Test sub-path joining."""

    @pytest.mark.parametrize("sub_path", ["backend", "backend/", "/backend", " /backend/ "])
    def test_sub_path_variants(self, sub_path):
        assert manifest_path(sub_path, "package.json") == "backend/package.json"

    @pytest.mark.parametrize("sub_path", [None, "", "/"])
    def test_no_sub_path(self, sub_path):
        assert manifest_path(sub_path, "package.json") == "package.json"


class TestManifestFetcher:
    """Test ManifestFetcher."""

    @pytest.mark.asyncio
    async def test_fetch_default_branch(self, fetcher_factory):
        """Should return the body from the default branch."""
        fetcher, requests = fetcher_factory({url("main"): (200, '{"dependencies": {}}')})

        content = await fetcher.fetch(TARGET, NODE)

        assert content == '{"dependencies": {}}'
        assert [str(r.url) for r in requests] == [url("main")]
        assert "Authorization" not in requests[0].headers

    @pytest.mark.asyncio
    async def test_byte_order_mark_stripped(self, fetcher_factory):
        """A leading UTF-8 byte order mark is not part of the returned text."""
        body = b"\xef\xbb\xbf" + b'{"dependencies": {}}'
        fetcher, _ = fetcher_factory({url("main"): (200, body)})

        assert await fetcher.fetch(TARGET, NODE) == '{"dependencies": {}}'

    @pytest.mark.asyncio
    async def test_fallback_to_master_once(self, fetcher_factory):
        """A miss on the default branch is retried exactly once on master."""
        fetcher, requests = fetcher_factory({url("master"): (200, "{}")})

        assert await fetcher.fetch(TARGET, NODE) == "{}"
        assert [str(r.url) for r in requests] == [url("main"), url("master")]

    @pytest.mark.asyncio
    async def test_not_found_on_both_branches(self, fetcher_factory):
        """NotFound after the single fallback attempt."""
        fetcher, requests = fetcher_factory({})

        with pytest.raises(ManifestNotFound) as exc_info:
            await fetcher.fetch(TARGET, NODE)

        assert len(requests) == 2
        assert exc_info.value.url == url("master")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_explicit_branch_has_no_fallback(self, fetcher_factory):
        """A non-default branch is tried once only."""
        fetcher, requests = fetcher_factory({url("master"): (200, "{}")})
        target = RepositoryTarget(owner="octocat", repository="hello", branch="develop")

        with pytest.raises(ManifestNotFound):
            await fetcher.fetch(target, NODE)

        assert [str(r.url) for r in requests] == [url("develop")]

    @pytest.mark.asyncio
    async def test_sub_path_and_token(self, fetcher_factory):
        """The sub-path is part of the URL and the token is sent as a bearer credential."""
        expected = url("main", "services/api/package.json")
        fetcher, requests = fetcher_factory({expected: (200, "{}")})
        target = RepositoryTarget(
            owner="octocat", repository="hello", sub_path="services/api", auth_token="s3cret"
        )

        await fetcher.fetch(target, NODE)

        assert str(requests[0].url) == expected
        assert requests[0].headers["Authorization"] == "Bearer s3cret"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_auth_failure_not_retried(self, fetcher_factory, status):
        """Rejected credentials are classified and not retried on master."""
        fetcher, requests = fetcher_factory({url("main"): (status, "denied")})

        with pytest.raises(ManifestAuthError) as exc_info:
            await fetcher.fetch(TARGET, NODE)

        assert len(requests) == 1
        assert exc_info.value.status_code == status
        assert "token" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_server_error_is_transport_failure(self, fetcher_factory):
        """Other non-2xx statuses are transport failures."""
        fetcher, requests = fetcher_factory({url("main"): (503, "unavailable")})

        with pytest.raises(ManifestTransportError) as exc_info:
            await fetcher.fetch(TARGET, NODE)

        assert len(requests) == 1
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_network_error_is_transport_failure(self, fetcher_factory):
        """Connection errors are transport failures."""
        fetcher, _ = fetcher_factory({}, error=httpx.ConnectError("connection refused"))

        with pytest.raises(ManifestTransportError) as exc_info:
            await fetcher.fetch(TARGET, NODE)

        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_failure(self, fetcher_factory):
        """Timeouts are transport failures."""
        fetcher, _ = fetcher_factory({}, error=httpx.ReadTimeout("timed out"))

        with pytest.raises(ManifestTransportError) as exc_info:
            await fetcher.fetch(TARGET, NODE)

        assert exc_info.value.message == "Timeout fetching manifest"
