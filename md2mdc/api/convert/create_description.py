"""Human-readable description derived from a document's path."""

import os
from pathlib import Path

from ._capitalize import _capitalize


def create_description(base_dir: Path | str, input_path: Path | str, source_extension: str = ".md") -> str:
    """Build ``<Base> <Dir Words>: <File Words>`` for a document.

    Hyphen-separated words of every directory between ``base_dir`` and the
    file, and of the file's stem, are capitalized. ``..`` segments are
    skipped; the directory part is omitted when there is none.

    Example:
        ``create_description("/x/docs", "/x/docs/guide/setup-notes.md")``
        returns ``"Docs Guide: Setup Notes"``.
    """
    base = os.path.abspath(base_dir)
    relative_path = os.path.relpath(os.path.abspath(input_path), base)
    root_dir_name = os.path.basename(base)
    true_file_name = os.path.basename(input_path)

    stem = true_file_name
    if stem.endswith(source_extension) and stem != source_extension:
        stem = stem[: -len(source_extension)]
    formatted_file_name = " ".join(_capitalize(word) for word in stem.split("-"))

    directories = [segment for segment in relative_path.split(os.sep) if segment not in ("..", true_file_name)]
    formatted_directories = " ".join(
        _capitalize(word) for directory in directories for word in directory.split("-")
    )

    heading = " ".join(part for part in (_capitalize(root_dir_name), formatted_directories) if part)
    return f"{heading}: {formatted_file_name}"
