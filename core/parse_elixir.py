"""Elixir mix.exs parsing."""

import re

from .logging import get_logger

logger = get_logger(__name__)

# a string literal or charlist is kept; a comment outside one is dropped
_COMMENT_RE = re.compile(r"""("(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')|#[^\n]*""")
_DEPS_FUNCTION_RE = re.compile(r"defp?\s+deps\s*(?:\(\s*\))?\s+do\s*\[(.*?)\]\s*end", re.DOTALL)
_DEP_TUPLE_RE = re.compile(r"\{\s*:([A-Za-z0-9_]+)\s*,")


def parse_mix_exs(content: str) -> set[str]:
    """Extract dependency atoms from the ``deps`` function of mix.exs.

    Falls back to scanning the whole file when no ``deps`` function is
    found, which may pick up unrelated tuples.
    """
    if not content.strip():
        return set()

    content = _COMMENT_RE.sub(lambda match: match.group(1) or "", content)
    deps_function = _DEPS_FUNCTION_RE.search(content)
    if deps_function:
        body = deps_function.group(1)
    else:
        logger.warning("No deps function found in mix.exs, scanning the whole file")
        body = content

    return {match.group(1) for match in _DEP_TUPLE_RE.finditer(body)}
