"""Python requirements.txt parsing."""

import re

from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name


class RequirementsParser:
    """Parser for Python requirements.txt files."""

    def __init__(self):
        # Patterns for lines to skip
        self.skip_patterns = [
            r"^#",  # Comment lines
            r"^-",  # pip options: -e, -r, -c, -f, --index-url, ...
            r"^(?:git|hg|svn|bzr)\+",  # VCS URLs
            r"^https?://",  # Direct URLs
            r"^file:",  # File URLs
            r"^\.{0,2}/",  # Local paths
        ]
        # Name is everything before a version operator, extras bracket,
        # environment marker, whitespace or "@" URL marker
        self.name_pattern = re.compile(r"^([A-Za-z0-9][A-Za-z0-9._-]*)")

    def _should_skip_line(self, line: str) -> bool:
        """Check if a line should be skipped during parsing."""
        if not line:
            return True

        return any(re.match(pattern, line) for pattern in self.skip_patterns)

    def _parse_requirement_name(self, line: str) -> str | None:
        """Return the normalized project name declared on one line."""
        line_for_parsing = line.split(" #")[0].split("\t#")[0].strip()
        if not line_for_parsing:
            return None

        try:
            name = Requirement(line_for_parsing).name
        except InvalidRequirement:
            # Loosely written lines still start with the project name
            match = self.name_pattern.match(line_for_parsing)
            if not match:
                return None
            name = match.group(1)

        return canonicalize_name(name)

    def parse(self, content: str) -> set[str]:
        """Parse requirements.txt content into normalized project names."""
        names: set[str] = set()

        for line in content.splitlines():
            stripped = line.strip()
            if self._should_skip_line(stripped):
                continue

            name = self._parse_requirement_name(stripped)
            if name:
                names.add(name)

        return names


def parse_requirements(content: str) -> set[str]:
    """Parse requirements.txt content into project names.

    Names are lowercased with ``.`` and ``_`` folded to ``-``, so
    ``Django==4.2.1`` yields ``django`` and ``ruamel.yaml`` yields
    ``ruamel-yaml``.

    Args:
        content: The requirements.txt file content

    Returns:
        Set of normalized project names
    """
    parser = RequirementsParser()
    return parser.parse(content)
