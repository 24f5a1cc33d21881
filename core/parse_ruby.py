"""Ruby Gemfile parsing."""

import re

# gem 'rails', '~> 7.0' / gem("rails") at the start of a line
_GEM_RE = re.compile(r"""^\s*gem\s*\(?\s*(['"])([^'"]+)\1""", re.MULTILINE)


def parse_gemfile(content: str) -> set[str]:
    """Extract the quoted first argument of each line-leading ``gem`` call."""
    return {match.group(2) for match in _GEM_RE.finditer(content)}
