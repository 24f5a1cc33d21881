"""Core data models for StackScout."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .exceptions import InvalidRequest

Extractor = Callable[[str], set[str]]


@dataclass(frozen=True)
class EcosystemDescriptor:
    """Static description of one supported ecosystem.

    ``mapping`` is the raw-identifier -> canonical-name table, or ``None``
    when no table is configured for the ecosystem.

    ``extract`` returns an empty set for empty text and never raises on
    malformed text, except the JSON extractors (``package.json``,
    ``composer.json``), which raise ``MalformedManifest`` for invalid JSON
    or a top level that is not an object. ``get_dependencies`` turns that
    into a ``malformed`` report with no technologies.
    """

    ecosystem_id: str
    manifest_filename: str
    extract: Extractor
    mapping: Mapping[str, str] | None
    default_branch: str = "main"


@dataclass(frozen=True)
class RepositoryTarget:
    """The repository being analyzed, created once per request."""

    owner: str
    repository: str
    sub_path: str | None = None
    auth_token: str | None = field(default=None, repr=False)
    branch: str | None = None  # None means the ecosystem default

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository}"

    def validate(self) -> None:
        """Raise ``InvalidRequest`` unless owner and repository are present."""
        missing = [
            name
            for name, value in (("owner", self.owner), ("repository", self.repository))
            if not value or not value.strip()
        ]
        if missing:
            raise InvalidRequest(f"Missing required parameter(s): {', '.join(missing)}")


@dataclass
class EcosystemReport:
    """Outcome of one ecosystem's fetch -> extract -> map pipeline."""

    ecosystem_id: str
    manifest_path: str
    status: str = "ok"  # ok, not_found, auth_failure, transport_failure, malformed, unconfigured
    technologies: set[str] = field(default_factory=set)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass
class TechStackResult:
    """Merged, sorted technologies for one repository."""

    target: RepositoryTarget
    technologies: list[str]
    reports: list[EcosystemReport] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.technologies

    def to_dict(self) -> dict:
        return {"techStack": list(self.technologies)}
