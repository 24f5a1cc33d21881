"""Tests for go.mod parsing."""

from core.parse_go import parse_go_mod


class TestGoParser:
    """Test go.mod parsing."""

    def test_single_require_excludes_module(self):
        """The module declaration is not a dependency."""
        content = "module example.com/x\n\nrequire github.com/gin-gonic/gin v1.9.0"
        assert parse_go_mod(content) == {"github.com/gin-gonic/gin"}

    def test_require_block(self):
        """Should read every line of a require block."""
        content = """module github.com/acme/service

go 1.21

require (
    github.com/gin-gonic/gin v1.9.1
    gorm.io/gorm v1.25.5 // indirect
    // github.com/commented/out v1.0.0
)

require github.com/stretchr/testify v1.8.4

replace github.com/old/module v1.0.0 => github.com/new/module v1.1.0
"""
        assert parse_go_mod(content) == {
            "github.com/gin-gonic/gin",
            "gorm.io/gorm",
            "github.com/stretchr/testify",
        }

    def test_single_line_block(self):
        """A require block closed on the same line is handled."""
        content = "require (github.com/spf13/cobra v1.8.0)\nexclude github.com/x/y v0.1.0"
        assert parse_go_mod(content) == {"github.com/spf13/cobra"}

    def test_line_without_version_ignored(self):
        """A module path needs a following version token."""
        assert parse_go_mod("require github.com/no/version") == set()

    def test_duplicates_collapse(self):
        """Repeated modules appear once."""
        content = "require a.example/m v1.0.0\nrequire a.example/m v1.0.0"
        assert parse_go_mod(content) == {"a.example/m"}
