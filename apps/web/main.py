"""FastAPI web application for StackScout."""

from typing import Optional

from fastapi import FastAPI, Header, HTTPException, Query
from pydantic import BaseModel

from core.analyze import analyze_repository
from core.config import get_settings
from core.ecosystems import select_ecosystems
from core.exceptions import InvalidRequest
from core.logging import get_logger
from core.models import RepositoryTarget

logger = get_logger(__name__)

app = FastAPI(
    title="StackScout",
    description="Detect the tech stack of a GitHub repository from its dependency manifests",
    version="0.1.0",
)


class EcosystemReportModel(BaseModel):
    """Per-ecosystem outcome included when details are requested."""
    ecosystem: str
    manifest: str
    status: str
    technologies: list[str]


class AnalyzeResponse(BaseModel):
    """Response model for a tech stack analysis."""
    techStack: list[str]
    ecosystems: Optional[list[EcosystemReportModel]] = None


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/api/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze(
    username: Optional[str] = Query(None, description="Repository owner"),
    repo: Optional[str] = Query(None, description="Repository name"),
    path: Optional[str] = Query(None, description="Sub-directory holding the manifests"),
    branch: Optional[str] = Query(None, description="Branch to read; defaults to main, then master"),
    only: Optional[list[str]] = Query(None, description="Restrict to these ecosystems"),
    details: bool = Query(False, description="Include per-ecosystem reports"),
    authorization: Optional[str] = Header(None),
):
    """Detect the tech stack of ``username/repo``."""
    if not username or not repo:
        raise HTTPException(status_code=400, detail="Missing username or repo parameter")

    logger.info(f"API received request for: username={username}, repo={repo}")

    target = RepositoryTarget(
        owner=username,
        repository=repo,
        sub_path=path,
        auth_token=_bearer_token(authorization) or get_settings().github_token,
        branch=branch,
    )

    try:
        ecosystems = select_ecosystems(only)
        result = await analyze_repository(target, ecosystems=ecosystems)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))

    reports = None
    if details:
        reports = [
            EcosystemReportModel(
                ecosystem=report.ecosystem_id,
                manifest=report.manifest_path,
                status=report.status,
                technologies=sorted(report.technologies),
            )
            for report in result.reports
        ]

    return AnalyzeResponse(techStack=result.technologies, ecosystems=reports)
