"""Rust Cargo.toml parsing."""

import re

_HEADER_RE = re.compile(r"^\[\s*([^\[\]]+?)\s*\]\s*(?:#.*)?$")
_ARRAY_HEADER_RE = re.compile(r"^\[\[")
# [dependencies], [dev-dependencies.serde], [target.'cfg(unix)'.dependencies]
_DEPENDENCY_HEADER_RE = re.compile(
    r"""^(?:target\.(?:'[^']*'|"[^"]*"|[^.]+)\.)?"""
    r"(dependencies|dev-dependencies|build-dependencies)"
    r"(?:\.(.+))?$"
)
# tokio = "1", "serde" = {...}, serde.workspace = true
_KEY_RE = re.compile(r"""^(["']?)([A-Za-z0-9_-]+)\1\s*[=.]""")
_STRING_RE = re.compile(r'"""' r"|'''" r'|"(?:[^"\\]|\\.)*"' r"|'[^']*'")
_MULTILINE_DELIMITERS = ('"""', "'''")


def _strip_strings(line: str) -> tuple[str, str | None]:
    """Remove string literals from a line.

    Returns the remaining text and the delimiter of a multi-line string
    left open at the end of the line, if any.
    """
    parts = []
    pos = 0
    while True:
        match = _STRING_RE.search(line, pos)
        if not match:
            parts.append(line[pos:])
            return "".join(parts), None
        parts.append(line[pos:match.start()])
        token = match.group()
        if token in _MULTILINE_DELIMITERS:
            end = line.find(token, match.end())
            if end == -1:
                return "".join(parts), token
            pos = end + len(token)
        else:
            pos = match.end()


def _bracket_delta(code: str) -> int:
    """Net count of opened brackets and braces in string-free text."""
    bare = code.split("#", 1)[0]
    return bare.count("{") + bare.count("[") - bare.count("}") - bare.count("]")


def parse_cargo_toml(content: str) -> set[str]:
    """Extract crate names from the dependency tables of Cargo.toml.

    A line scanner tracks the current table. Inside ``[dependencies]``,
    ``[dev-dependencies]`` and ``[build-dependencies]`` (plain or
    target-specific) each key is a crate. A ``[dependencies.<crate>]``
    table header names the crate itself. Continuation lines of multi-line
    inline tables, arrays and strings are skipped.

    Args:
        content: The Cargo.toml file content

    Returns:
        Set of crate names
    """
    crates: set[str] = set()
    in_dependency_table = False
    depth = 0
    open_string = None

    for raw_line in content.splitlines():
        line = raw_line.strip()

        if open_string:
            close = line.find(open_string)
            if close == -1:
                continue
            # only brackets after the closing delimiter count
            code, open_string = _strip_strings(line[close + len(open_string):])
            depth = max(depth + _bracket_delta(code), 0)
            continue

        if not line or line.startswith("#"):
            continue

        code, open_string = _strip_strings(line)

        if depth > 0:
            depth = max(depth + _bracket_delta(code), 0)
            continue

        if _ARRAY_HEADER_RE.match(line):
            in_dependency_table = False
            continue

        header = _HEADER_RE.match(line)
        if header:
            section = _DEPENDENCY_HEADER_RE.match(header.group(1))
            if section and section.group(2):
                crates.add(section.group(2).strip().strip("\"'"))
                in_dependency_table = False
            else:
                in_dependency_table = section is not None
            continue

        if in_dependency_table:
            key = _KEY_RE.match(line)
            if key:
                crates.add(key.group(2))

        depth = max(_bracket_delta(code), 0)

    return crates
