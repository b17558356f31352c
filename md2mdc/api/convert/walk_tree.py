"""Walk an input tree and convert every document in it."""

import os
from collections.abc import Iterator
from pathlib import Path

from ._walk_directory import _directory_failure, _walk_directory
from .ConvertJob import ConvertJob
from .convert_file import convert_file
from .FileResult import FileResult
from .swap_extension import swap_extension


def walk_tree(job: ConvertJob) -> Iterator[FileResult]:
    """Yield one FileResult per converted document.

    Directory input: every document below it is converted, the directory
    layout is mirrored under the output root and links resolve against the
    input root. Single document input: it is written into the output root and
    links resolve against its containing directory. Anything else yields
    nothing.

    A failed file or directory does not stop the walk; an output root that
    cannot be created is reported as a single failed result.
    """
    config = job.config
    input_path = Path(job.input_path)
    output_path = Path(job.output_path)
    link_prefix = job.resolved_link_prefix

    if not (input_path.is_dir() or input_path.name.endswith(config.source_extension)):
        return

    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        yield _directory_failure(input_path, output_path, e)
        return

    if input_path.is_dir():
        base_dir = Path(os.path.abspath(input_path))
        yield from _walk_directory(input_path, input_path, output_path, base_dir, link_prefix, config)
    else:
        destination = output_path / swap_extension(
            input_path.name, config.source_extension, config.target_extension
        )
        base_dir = Path(os.path.abspath(input_path)).parent
        yield convert_file(input_path, destination, base_dir, link_prefix, config)
