"""Convert API command."""

from collections.abc import Iterator
from pathlib import Path

from md2mdc.utils import get_logger

from ..config.ConvertConfig import ConvertConfig
from ..StageResult import StageResult
from . import ConvertOutput
from .ConvertJob import ConvertJob
from .count_documents import count_documents
from .walk_tree import walk_tree

logger = get_logger("convert")


def cmd_convert(input_path: str, output_path: str, link_prefix: str | None = None) -> StageResult:
    """Convert a markdown file or directory tree into .mdc documents."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        converted: list[dict[str, str]] = []
        errors: list[dict[str, str]] = []

        def _finish(mode: str, prefix: str, message: str, success: bool) -> None:
            result_obj.output = ConvertOutput(
                input_path=input_path,
                output_path=output_path,
                mode=mode,
                link_prefix=prefix,
                converted=converted,
                errors=errors,
                converted_count=len(converted),
                error_count=len(errors),
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = success

        yield (0.1, "Loading configuration...")
        try:
            config = ConvertConfig.load()
        except ValueError as e:
            errors.append({"source": str(ConvertConfig.get_config_path()), "error": str(e)})
            _finish("error", link_prefix or "", str(e), False)
            return

        job = ConvertJob(
            input_path=Path(input_path),
            output_path=Path(output_path),
            link_prefix=link_prefix,
            config=config,
        )
        prefix = job.resolved_link_prefix

        yield (0.2, "Resolving input path...")
        source = job.input_path
        if not source.exists():
            errors.append({"source": input_path, "error": "Path does not exist"})
            _finish("missing", prefix, f"Path not found: {input_path}", False)
            return

        if source.is_dir():
            mode = "directory"
        elif source.name.endswith(config.source_extension):
            mode = "file"
        else:
            logger.info(f"Skipping {input_path} - not a markdown file or directory")
            _finish("skipped", prefix, f"Skipping {input_path} - not a markdown file or directory", True)
            return

        total = count_documents(source, config.source_extension)
        yield (0.3, f"Converting {total} {'document' if total == 1 else 'documents'}...")

        for done, file_result in enumerate(walk_tree(job), start=1):
            progress = 0.3 + (0.7 * min(done, max(total, 1)) / max(total, 1))
            if file_result.success:
                converted.append({"source": str(file_result.source), "destination": str(file_result.destination)})
                yield (progress, f"Successfully converted {file_result.source} to {file_result.destination}")
            else:
                errors.append({"source": str(file_result.source), "error": file_result.error})
                yield (progress, f"Error processing {file_result.source}: {file_result.error}")

        kind = "directory" if mode == "directory" else "file"
        summary = f"Processed {kind} {input_path} to {output_path}"
        logger.info(summary)
        # Per-file failures are reported but do not fail the run
        _finish(mode, prefix, summary, True)

    return StageResult(announce=f"Converting {input_path} to {output_path}...", progress_callback=do_work)
