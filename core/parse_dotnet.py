""".NET packages.config parsing."""

import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_PACKAGE_ID_RE = re.compile(r"<package\b[^>]*?\bid\s*=\s*([\"'])(.*?)\1", re.DOTALL)


def parse_packages_config(content: str) -> set[str]:
    """Extract the ``id`` attribute of every ``<package>`` element."""
    content = _COMMENT_RE.sub("", content)
    return {match.group(2) for match in _PACKAGE_ID_RE.finditer(content) if match.group(2)}
