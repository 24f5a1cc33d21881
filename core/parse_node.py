"""Node.js package.json parsing."""

import json

from .exceptions import MalformedManifest


def load_json_manifest(content: str, manifest: str) -> dict | None:
    """Decode a JSON manifest into a dict.

    Args:
        content: The manifest file content
        manifest: Manifest filename, used in error reports

    Returns:
        The decoded object, or None for empty content

    Raises:
        MalformedManifest: Invalid JSON, or a top level that is not an object
    """
    if not content.strip():
        return None
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedManifest(manifest, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedManifest(manifest, f"expected a JSON object, got {type(data).__name__}")
    return data


def section_keys(data: dict, *sections: str) -> set[str]:
    """Union of the keys of the named object-valued sections."""
    names: set[str] = set()
    for section in sections:
        value = data.get(section)
        if isinstance(value, dict):
            names.update(value.keys())
    return names


def parse_package_json(content: str) -> set[str]:
    """Extract package names from package.json content.

    Args:
        content: The package.json file content

    Returns:
        Keys of ``dependencies`` and ``devDependencies``
    """
    data = load_json_manifest(content, "package.json")
    if data is None:
        return set()
    return section_keys(data, "dependencies", "devDependencies")
