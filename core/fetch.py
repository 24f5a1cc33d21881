"""Manifest retrieval from raw repository content URLs."""

import httpx

from .config import Settings, get_settings
from .exceptions import (
    ManifestAuthError,
    ManifestNotFound,
    ManifestTransportError,
)
from .logging import get_logger
from .models import EcosystemDescriptor, RepositoryTarget

logger = get_logger(__name__)


def manifest_path(sub_path: str | None, filename: str) -> str:
    """Join an optional sub-path and a manifest filename.

    ``"/backend"``, ``"backend/"`` and ``"backend"`` all give
    ``"backend/<filename>"``.
    """
    if not sub_path:
        return filename
    cleaned = sub_path.strip().strip("/")
    if not cleaned:
        return filename
    return f"{cleaned}/{filename}"


class ManifestFetcher:
    """Fetches the raw text of one manifest, with default-branch fallback."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        fallback_branch: str | None = None,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the fetcher.

        Args:
            base_url: Host serving raw file content
            timeout: Per-request timeout in seconds
            fallback_branch: Branch tried once when the default branch misses
            client: Shared HTTP client; created (and owned) when omitted
            settings: Settings to read defaults from
        """
        settings = settings or get_settings()
        self.base_url = (base_url or settings.raw_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.fallback_branch = fallback_branch or settings.fallback_branch
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "ManifestFetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_url(self, target: RepositoryTarget, branch: str, filename: str) -> str:
        """Build ``<host>/<owner>/<repo>/<branch>/<sub_path><filename>``."""
        path = manifest_path(target.sub_path, filename)
        return f"{self.base_url}/{target.owner}/{target.repository}/{branch}/{path}"

    async def fetch(self, target: RepositoryTarget, descriptor: EcosystemDescriptor) -> str:
        """Return the manifest text for ``descriptor`` in ``target``.

        When no branch was requested (or the requested branch is the
        ecosystem default) a miss is retried exactly once on the fallback
        branch. An explicit non-default branch is never retried.

        Raises:
            ManifestNotFound: The file is absent on every branch tried
            ManifestAuthError: The credential was rejected
            ManifestTransportError: Any other failure
        """
        branch = target.branch or descriptor.default_branch
        try:
            return await self._fetch_branch(target, branch, descriptor.manifest_filename)
        except ManifestNotFound:
            if branch != descriptor.default_branch or self.fallback_branch == branch:
                raise
            logger.debug(
                f"{descriptor.manifest_filename} not on '{branch}' for {target.slug}, "
                f"retrying on '{self.fallback_branch}'"
            )
        return await self._fetch_branch(target, self.fallback_branch, descriptor.manifest_filename)

    async def _fetch_branch(self, target: RepositoryTarget, branch: str, filename: str) -> str:
        url = self.build_url(target, branch, filename)
        headers = {}
        if target.auth_token:
            headers["Authorization"] = f"Bearer {target.auth_token}"

        if self._client is None:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                return await self._get(client, url, headers)
        return await self._get(self._client, url, headers)

    async def _get(self, client: httpx.AsyncClient, url: str, headers: dict[str, str]) -> str:
        try:
            response = await client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            raise ManifestTransportError("Timeout fetching manifest", url, details=str(e)) from e
        except httpx.HTTPError as e:
            raise ManifestTransportError("Network error fetching manifest", url, details=str(e)) from e

        status = response.status_code
        if response.is_success:
            # httpx keeps a UTF-8 byte order mark in the decoded text
            return response.text.removeprefix("\ufeff")
        if status == 404:
            raise ManifestNotFound("Manifest not found", url, status)
        if status in (401, 403):
            raise ManifestAuthError(f"Access denied (HTTP {status})", url, status)
        raise ManifestTransportError(f"HTTP error {status}", url, status)
