"""Recursive directory walk for walk_tree."""

from collections.abc import Iterator
from pathlib import Path

from md2mdc.utils import get_logger

from ..config.ConvertConfig import ConvertConfig
from .convert_file import convert_file
from .FileResult import FileResult
from .swap_extension import swap_extension

logger = get_logger("convert")


def _directory_failure(source: Path, destination: Path, e: OSError) -> FileResult:
    error = f"{type(e).__name__}: {e}"
    logger.error(f"Error processing {source}: {error}")
    return FileResult(source=source, destination=destination, success=False, error=error)


def _walk_directory(
    current: Path,
    input_root: Path,
    output_root: Path,
    base_dir: Path,
    link_prefix: str,
    config: ConvertConfig,
) -> Iterator[FileResult]:
    """Convert every document below current, mirroring directories under output_root.

    Paths are computed relative to input_root, not to current. A directory
    that cannot be listed or mirrored is reported as one failed result and
    its subtree is skipped.
    """
    try:
        items = sorted(current.iterdir(), key=lambda p: p.name)
    except OSError as e:
        yield _directory_failure(current, output_root / current.relative_to(input_root), e)
        return

    for item in items:
        if item.is_dir():
            mirrored = output_root / item.relative_to(input_root)
            # Output directory must exist before anything inside it is written
            try:
                mirrored.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                yield _directory_failure(item, mirrored, e)
                continue
            yield from _walk_directory(item, input_root, output_root, base_dir, link_prefix, config)
        elif item.name.endswith(config.source_extension):
            relative = item.relative_to(input_root)
            destination = output_root / relative.parent / swap_extension(
                relative.name, config.source_extension, config.target_extension
            )
            yield convert_file(item, destination, base_dir, link_prefix, config)
