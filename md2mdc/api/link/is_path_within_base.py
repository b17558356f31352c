"""Scope check for resolved link targets."""

import os
from pathlib import Path


def is_path_within_base(base_path: Path | str, target_path: Path | str) -> bool:
    """Return True if target_path lies inside base_path's subtree.

    Purely lexical: neither path has to exist. Paths on different drives are outside.
    """
    try:
        relative_path = os.path.relpath(os.path.abspath(target_path), os.path.abspath(base_path))
    except ValueError:
        return False
    return not relative_path.startswith("..")
