"""Tests for Cargo.toml parsing."""

from core.parse_rust import parse_cargo_toml

CARGO_TOML = """[package]
name = "demo"
version = "0.1.0"
edition = "2021"

[dependencies]
tokio = { version = "1", features = ["full"] }
serde = "1.0"  # serialization
reqwest = {
    version = "0.11",
    features = ["json"],
}
anyhow.workspace = true

[dependencies.axum]
version = "0.7"
features = ["macros"]

[dev-dependencies]
"mockito" = "1"

[build-dependencies]
cc = "1.0"

[target.'cfg(unix)'.dependencies]
nix = "0.27"

[[bin]]
name = "demo-cli"

[profile.release]
lto = true
"""


class TestRustParser:
    """Test Cargo.toml parsing."""

    def test_dependency_sections(self):
        """Should collect keys and table-header crates from dependency sections only."""
        assert parse_cargo_toml(CARGO_TOML) == {
            "tokio",
            "serde",
            "reqwest",
            "anyhow",
            "axum",
            "mockito",
            "cc",
            "nix",
        }

    def test_keys_outside_dependency_sections_ignored(self):
        """A same-named key elsewhere in the file is not a dependency."""
        content = '[package]\ntokio = "not a dependency"\n[features]\nserde = []'
        assert parse_cargo_toml(content) == set()

    def test_empty_content(self):
        """Empty content yields nothing."""
        assert parse_cargo_toml("") == set()

    def test_multiline_strings_do_not_hide_sections(self):
        """Brackets inside multi-line strings are not table syntax."""
        content = '''[package]
name = "demo"
description = """
Uses [brackets and {braces
"""
readme = \'\'\'
notes ] for [later
\'\'\'
license = """MIT [or Apache]"""

[dependencies]
serde = "1"
tokio = { version = "1", features = ["full"] }
'''
        assert parse_cargo_toml(content) == {"serde", "tokio"}

    def test_multiline_string_in_dependency_table(self):
        """Lines of a multi-line string value are not keys."""
        content = '[dependencies]\nnote = """\nfake = "1"\n"""\nserde = "1"'
        assert parse_cargo_toml(content) == {"note", "serde"}
