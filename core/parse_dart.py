"""Dart pubspec.yaml parsing."""

import re

_SECTION_RE = re.compile(r"^(dependencies|dev_dependencies)\s*:\s*(?:#.*)?$")
_KEY_RE = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*:")
_FLUTTER_SDK_RE = re.compile(r"\bsdk\s*:\s*['\"]?flutter\b")


def _indentation(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def parse_pubspec_yaml(content: str) -> set[str]:
    """Extract package names from the dependency sections of pubspec.yaml.

    A top-level ``dependencies:`` or ``dev_dependencies:`` key opens a
    section. Its children are the keys at the first indentation level
    below it; deeper keys (``sdk:``, ``git:``, ``version:``) belong to a
    child and are ignored. The section closes at the next line indented at
    or above the section key. Any ``sdk: flutter`` in the file adds
    ``flutter``.

    Args:
        content: The pubspec.yaml file content

    Returns:
        Set of package names
    """
    packages: set[str] = set()
    section_indent: int | None = None
    child_indent: int | None = None

    for raw_line in content.splitlines():
        stripped = raw_line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indentation(raw_line.rstrip())

        if section_indent is not None:
            if indent > section_indent:
                if child_indent is None:
                    child_indent = indent
                if indent == child_indent:
                    key = _KEY_RE.match(stripped)
                    if key:
                        packages.add(key.group(1))
                continue
            section_indent = None
            child_indent = None

        if indent == 0 and _SECTION_RE.match(stripped):
            section_indent = indent
            child_indent = None

    if _FLUTTER_SDK_RE.search(content):
        packages.add("flutter")

    return packages
