"""Rewrite internal markdown links to the converted document tree."""

import os
from pathlib import Path

from ..config.ConvertConfig import ConvertConfig
from ._rewrite_link import _rewrite_link
from .parse_links import parse_links


def transform_links(
    content: str,
    current_file_path: Path | str,
    base_dir: Path | str,
    link_prefix: str,
    config: ConvertConfig | None = None,
) -> str:
    """Rewrite links that point at in-scope source documents.

    A link is rewritten when its target is not an http(s) URL, mentions the
    source extension, and resolves (relative to the current document) inside
    ``base_dir``. The rewritten link reads
    ``[<path>.mdc](<scheme>:<link_prefix>/<path-relative-to-base>.mdc)``.
    Display text and ``#fragment`` of rewritten links are not kept.
    Everything else in ``content`` is returned unchanged.

    Args:
        content: Document text
        current_file_path: Path of the document the text came from
        base_dir: Root of the tree links may point into
        link_prefix: Path segment placed after the scheme in rewritten targets
        config: Scheme and extensions; defaults to ConvertConfig()

    Returns:
        The rewritten document text
    """
    config = config or ConvertConfig()
    current_dir = Path(os.path.dirname(os.path.abspath(current_file_path)))
    base = Path(base_dir)

    pieces: list[str] = []
    last = 0
    for link in parse_links(content):
        original = content[link.start : link.end]
        pieces.append(content[last : link.start])
        pieces.append(_rewrite_link(link, original, current_dir, base, link_prefix, config))
        last = link.end
    pieces.append(content[last:])
    return "".join(pieces)
