"""PHP composer.json parsing."""

from .parse_node import load_json_manifest, section_keys


def parse_composer_json(content: str) -> set[str]:
    """Extract package names from the ``require`` and ``require-dev`` sections."""
    data = load_json_manifest(content, "composer.json")
    if data is None:
        return set()
    return section_keys(data, "require", "require-dev")
