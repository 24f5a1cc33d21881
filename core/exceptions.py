"""
Exception hierarchy for StackScout.

Only ``InvalidRequest`` ever reaches the caller of ``analyze_repository``.
Everything else is raised inside a single ecosystem's pipeline and turned
into an empty contribution by the orchestrator.

Example:
    try:
        content = await fetcher.fetch(target, descriptor)
    except ManifestNotFound as e:
        logger.info(f"No manifest: {e}")
"""

from typing import Optional


class StackScoutError(Exception):
    """
    Base class for all StackScout errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidRequest(StackScoutError):
    """Raised when the owner or repository name is missing."""


class ManifestFetchError(StackScoutError):
    """
    Base class for failures retrieving a manifest.

    Attributes:
        url: The last URL that was requested.
        status_code: HTTP status of the last response, if one was received.
    """

    status = "transport_failure"

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message, details)


class ManifestNotFound(ManifestFetchError):
    """The manifest is absent on every branch that was tried."""

    status = "not_found"


class ManifestAuthError(ManifestFetchError):
    """The credential was rejected or lacks the required scope."""

    status = "auth_failure"

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            url,
            status_code,
            details or "check that the token is valid and has read access to the repository",
        )


class ManifestTransportError(ManifestFetchError):
    """Any other non-success status, timeout or network error."""

    status = "transport_failure"


class MalformedManifest(StackScoutError):
    """The manifest was fetched but does not have the expected structure."""

    status = "malformed"

    def __init__(self, manifest: str, details: Optional[str] = None) -> None:
        self.manifest = manifest
        super().__init__(f"Malformed {manifest}", details)
