"""Dockerfile parsing."""

import re

# FROM [--platform=<platform>] <image> [AS <name>]
_FROM_RE = re.compile(
    r"^\s*FROM\s+(?:--platform=\S+\s+)?(\S+)(?:\s+AS\s+\S+)?",
    re.IGNORECASE | re.MULTILINE,
)


def image_name(reference: str) -> str:
    """Strip the ``@digest`` and ``:tag`` from an image reference.

    A colon before the last ``/`` is a registry port and is kept:
    ``localhost:5000/app:1.0`` gives ``localhost:5000/app``.
    """
    name = reference.split("@", 1)[0]
    slash = name.rfind("/")
    colon = name.rfind(":")
    if colon > slash:
        name = name[:colon]
    return name.lower()


def parse_dockerfile(content: str) -> set[str]:
    """Extract base image names from every ``FROM`` instruction."""
    images: set[str] = set()
    for match in _FROM_RE.finditer(content):
        name = image_name(match.group(1))
        if name:
            images.add(name)
    return images
