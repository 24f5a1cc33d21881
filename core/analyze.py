"""Concurrent tech stack analysis across all ecosystems."""

import asyncio
from collections.abc import Sequence

from .config import Settings, get_settings
from .ecosystems import ECOSYSTEMS
from .exceptions import ManifestNotFound, StackScoutError
from .fetch import ManifestFetcher, manifest_path
from .logging import get_logger
from .mapping import map_identifiers
from .models import EcosystemDescriptor, EcosystemReport, RepositoryTarget, TechStackResult

logger = get_logger(__name__)


async def get_dependencies(
    descriptor: EcosystemDescriptor,
    target: RepositoryTarget,
    fetcher: ManifestFetcher,
) -> EcosystemReport:
    """Fetch, extract and map one ecosystem's manifest.

    Never raises: any failure is logged and reported with an empty
    technology set so sibling ecosystems are unaffected.

    Args:
        descriptor: Ecosystem to analyze
        target: Repository being analyzed
        fetcher: Fetcher used for the manifest request

    Returns:
        Report holding the status and the technologies found
    """
    path = manifest_path(target.sub_path, descriptor.manifest_filename)
    report = EcosystemReport(ecosystem_id=descriptor.ecosystem_id, manifest_path=path)
    context = f"[{descriptor.ecosystem_id}] {path} in {target.slug}"

    if descriptor.mapping is None:
        report.status = "unconfigured"
        map_identifiers((), None, descriptor.ecosystem_id)
        return report

    try:
        content = await fetcher.fetch(target, descriptor)
        identifiers = descriptor.extract(content)
    except ManifestNotFound as e:
        report.status, report.error = e.status, str(e)
        logger.info(f"{context}: not found ({e.url})")
        return report
    except StackScoutError as e:
        # auth failures, transport failures, malformed manifests
        report.status = getattr(e, "status", "transport_failure")
        report.error = str(e)
        logger.error(f"{context}: {e}")
        return report
    except Exception as e:
        report.status, report.error = "malformed", str(e)
        logger.exception(f"{context}: unexpected error")
        return report

    report.technologies = map_identifiers(identifiers, descriptor.mapping, descriptor.ecosystem_id)
    logger.debug(
        f"{context}: {len(identifiers)} identifier(s), "
        f"{len(report.technologies)} technology(ies)"
    )
    return report


async def _run_with_deadline(
    tasks: list[asyncio.Task],
    ecosystems: Sequence[EcosystemDescriptor],
    target: RepositoryTarget,
    deadline: float,
) -> list[EcosystemReport]:
    done, pending = await asyncio.wait(tasks, timeout=deadline)
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)

    reports = []
    for descriptor, task in zip(ecosystems, tasks):
        if task in done:
            reports.append(task.result())
            continue
        path = manifest_path(target.sub_path, descriptor.manifest_filename)
        logger.error(
            f"[{descriptor.ecosystem_id}] {path} in {target.slug}: "
            f"no result within {deadline}s"
        )
        reports.append(
            EcosystemReport(
                ecosystem_id=descriptor.ecosystem_id,
                manifest_path=path,
                status="transport_failure",
                error=f"Analysis deadline of {deadline}s exceeded",
            )
        )
    return reports


def merge_reports(reports: Sequence[EcosystemReport]) -> list[str]:
    """Union every report's technologies into one sorted list."""
    merged: set[str] = set()
    for report in reports:
        merged |= report.technologies
    return sorted(merged)


async def analyze_repository(
    target: RepositoryTarget,
    ecosystems: Sequence[EcosystemDescriptor] = ECOSYSTEMS,
    fetcher: ManifestFetcher | None = None,
    settings: Settings | None = None,
) -> TechStackResult:
    """Detect the tech stack of a repository.

    Every ecosystem runs concurrently and is awaited to completion before
    the results are merged.

    Args:
        target: Repository to analyze
        ecosystems: Ecosystems to check
        fetcher: Fetcher to use; one is created for the call when omitted
        settings: Settings for the fetcher and the optional deadline

    Returns:
        Merged, sorted technologies plus a report per ecosystem

    Raises:
        InvalidRequest: The owner or repository is missing
    """
    target.validate()
    settings = settings or get_settings()

    logger.info(f"Analyzing {target.slug} across {len(ecosystems)} ecosystem(s)")

    if fetcher is None:
        async with ManifestFetcher(settings=settings) as owned_fetcher:
            reports = await _gather_reports(target, ecosystems, owned_fetcher, settings)
    else:
        reports = await _gather_reports(target, ecosystems, fetcher, settings)

    technologies = merge_reports(reports)
    if technologies:
        logger.info(f"Detected {len(technologies)} technology(ies) for {target.slug}")
    else:
        logger.warning(
            f"No tech stack detected for {target.slug}. "
            "Check the ecosystem logs for errors or unsupported manifest files."
        )

    return TechStackResult(target=target, technologies=technologies, reports=reports)


async def _gather_reports(
    target: RepositoryTarget,
    ecosystems: Sequence[EcosystemDescriptor],
    fetcher: ManifestFetcher,
    settings: Settings,
) -> list[EcosystemReport]:
    if not ecosystems:
        return []
    if settings.analysis_timeout is None:
        return list(
            await asyncio.gather(
                *(get_dependencies(descriptor, target, fetcher) for descriptor in ecosystems)
            )
        )

    tasks = [
        asyncio.create_task(get_dependencies(descriptor, target, fetcher))
        for descriptor in ecosystems
    ]
    return await _run_with_deadline(tasks, ecosystems, target, settings.analysis_timeout)
