"""Markdown link parser."""

from collections.abc import Iterator

from .LinkRef import LinkRef
from .MARKDOWN_LINK_PATTERN import MARKDOWN_LINK_PATTERN


def parse_links(text: str) -> Iterator[LinkRef]:
    """Yield every `[text](target)` link in document order."""
    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        yield LinkRef(
            text=match.group(1),
            raw_target=match.group(2),
            start=match.start(),
            end=match.end(),
        )
