"""Rewrite a single parsed link."""

import os
from pathlib import Path, PurePath

from ..config.ConvertConfig import ConvertConfig
from .EXTERNAL_URL_PATTERN import EXTERNAL_URL_PATTERN
from .is_path_within_base import is_path_within_base
from .LinkRef import LinkRef


def _rewrite_link(
    link: LinkRef,
    original: str,
    current_dir: Path,
    base_dir: Path,
    link_prefix: str,
    config: ConvertConfig,
) -> str:
    """Return the replacement text for one link, or `original` if it stays as is."""
    if EXTERNAL_URL_PATTERN.match(link.raw_target):
        return original

    source_ext = config.source_extension
    target_ext = config.target_extension

    if source_ext not in link.raw_target:
        return original

    # Fragment is dropped from the rewritten target
    file_path = link.file_path
    if file_path.startswith("./"):
        file_path = file_path[2:]

    absolute_target = os.path.abspath(os.path.join(current_dir, file_path))
    if not is_path_within_base(base_dir, absolute_target):
        return original

    relative_to_base = PurePath(os.path.relpath(absolute_target, os.path.abspath(base_dir))).as_posix()
    if relative_to_base == ".":
        # Target is the base directory itself
        relative_to_base = ""
    target_name = relative_to_base.replace(source_ext, target_ext, 1)
    label = file_path.replace(source_ext, target_ext, 1)

    return f"[{label}]({config.link_scheme}:{link_prefix}/{target_name})"
