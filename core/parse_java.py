"""Maven pom.xml parsing."""

import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_DEPENDENCY_RE = re.compile(r"<dependency(?:\s[^>]*)?>(.*?)</dependency>", re.DOTALL)
_ARTIFACT_ID_RE = re.compile(r"<artifactId>(.*?)</artifactId>", re.DOTALL)


def parse_pom_xml(content: str) -> set[str]:
    """Extract artifactIds declared inside ``<dependency>`` blocks.

    The project's own artifactId and plugin artifactIds are not
    dependencies and are ignored.
    """
    content = _COMMENT_RE.sub("", content)
    artifacts: set[str] = set()
    for block in _DEPENDENCY_RE.finditer(content):
        match = _ARTIFACT_ID_RE.search(block.group(1))
        if match:
            artifact = match.group(1).strip()
            if artifact:
                artifacts.add(artifact)
    return artifacts
