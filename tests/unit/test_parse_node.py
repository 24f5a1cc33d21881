"""Tests for the JSON manifests: package.json and composer.json."""

import pytest

from core.exceptions import MalformedManifest
from core.parse_node import parse_package_json
from core.parse_php import parse_composer_json


class TestNodeParser:
    """Test package.json parsing."""

    def test_parse_dependencies_and_dev_dependencies(self, sample_package_json):
        """Should union dependencies and devDependencies keys."""
        assert parse_package_json(sample_package_json) == {"express", "lodash", "jest"}

    def test_ignores_other_sections(self):
        """peerDependencies, scripts and the like are not dependencies."""
        content = '{"scripts": {"vue": "x"}, "peerDependencies": {"react": "*"}}'
        assert parse_package_json(content) == set()

    def test_scoped_packages_kept_exactly(self):
        """Keys are used as-is, without normalization."""
        content = '{"dependencies": {"@angular/core": "^17.0.0", "React": "18"}}'
        assert parse_package_json(content) == {"@angular/core", "React"}

    def test_non_object_section_ignored(self):
        """A malformed section contributes nothing."""
        content = '{"dependencies": ["react"], "devDependencies": {"jest": "29"}}'
        assert parse_package_json(content) == {"jest"}

    def test_invalid_json_raises_malformed(self):
        """Invalid JSON is reported as a malformed manifest."""
        with pytest.raises(MalformedManifest) as exc_info:
            parse_package_json('{"dependencies": {')
        assert exc_info.value.manifest == "package.json"

    def test_top_level_array_raises_malformed(self):
        """A JSON document that is not an object is malformed."""
        with pytest.raises(MalformedManifest):
            parse_package_json('["react"]')

    def test_empty_content(self):
        """Empty content yields nothing without error."""
        assert parse_package_json("  \n") == set()


class TestPHPParser:
    """Test composer.json parsing."""

    def test_parse_require_and_require_dev(self):
        """Should union require and require-dev keys."""
        content = """
{
  "require": {"php": "^8.1", "laravel/framework": "^10.0"},
  "require-dev": {"phpunit/phpunit": "^10.0"}
}
"""
        assert parse_composer_json(content) == {"php", "laravel/framework", "phpunit/phpunit"}

    def test_invalid_json_raises_malformed(self):
        """Invalid JSON is reported as a malformed manifest."""
        with pytest.raises(MalformedManifest) as exc_info:
            parse_composer_json("not json")
        assert exc_info.value.manifest == "composer.json"
