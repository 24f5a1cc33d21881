"""Raw dependency identifier to canonical technology name mapping."""

from collections.abc import Iterable, Mapping

from .logging import get_logger

logger = get_logger(__name__)


def map_identifiers(
    identifiers: Iterable[str],
    table: Mapping[str, str] | None,
    ecosystem: str = "unknown",
) -> set[str]:
    """Map raw identifiers to canonical technology names.

    Lookup is exact; identifiers missing from the table are dropped.

    Args:
        identifiers: Normalized identifiers extracted from a manifest
        table: Raw identifier -> canonical name table for the ecosystem
        ecosystem: Ecosystem id, used in the warning for a missing table

    Returns:
        Set of canonical technology names
    """
    if table is None:
        logger.warning(f"No mapping table configured for ecosystem '{ecosystem}'")
        return set()

    return {table[identifier] for identifier in identifiers if identifier in table}
