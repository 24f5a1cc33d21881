"""Go go.mod parsing."""

import re

_REQUIRE_RE = re.compile(r"^require\b\s*(\(?)\s*(.*)$")
_REQUIREMENT_RE = re.compile(r"^([^\s()]+)\s+(v\d[^\s)]*)")


def parse_go_mod(content: str) -> set[str]:
    """Extract required module paths from go.mod content.

    Handles single ``require path vX`` lines and ``require ( ... )``
    blocks. The ``module`` declaration and ``replace``/``exclude``
    directives do not contribute.

    Args:
        content: The go.mod file content

    Returns:
        Set of module paths
    """
    modules: set[str] = set()
    in_require_block = False

    for raw_line in content.splitlines():
        line = raw_line.split("//", 1)[0].strip()
        if not line:
            continue

        if in_require_block:
            candidate = line
        else:
            # module, go, toolchain, replace, exclude, retract
            directive = _REQUIRE_RE.match(line)
            if not directive:
                continue
            in_require_block = bool(directive.group(1))
            candidate = directive.group(2)

        if in_require_block and candidate.endswith(")"):
            in_require_block = False
            candidate = candidate[:-1].strip()

        match = _REQUIREMENT_RE.match(candidate)
        if match:
            modules.add(match.group(1))

    return modules
