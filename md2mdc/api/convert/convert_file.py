"""Convert one markdown document into an .mdc document."""

from pathlib import Path

from md2mdc.utils import get_logger

from ..config.ConvertConfig import ConvertConfig
from ..link.transform_links import transform_links
from .build_frontmatter import build_frontmatter
from .create_description import create_description
from .FileResult import FileResult
from .strip_frontmatter import strip_frontmatter

logger = get_logger("convert")


def convert_file(
    input_path: Path,
    output_path: Path,
    base_dir: Path,
    link_prefix: str,
    config: ConvertConfig | None = None,
) -> FileResult:
    """Read, transform and write a single document.

    Never raises: read, transform and write failures come back as a failed
    FileResult so the caller can move on to the next file.
    """
    config = config or ConvertConfig()
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        # newline="" keeps line endings byte for byte
        with input_path.open(encoding="utf-8", newline="") as fh:
            content = fh.read()
        content = strip_frontmatter(content)

        transformed = transform_links(content, input_path, base_dir, link_prefix, config)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        description = create_description(base_dir, input_path, config.source_extension)
        with output_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(build_frontmatter(description) + transformed)
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        logger.error(f"Error processing {input_path}: {error}")
        return FileResult(source=input_path, destination=output_path, success=False, error=error)

    logger.info(f"Successfully converted {input_path} to {output_path}")
    return FileResult(source=input_path, destination=output_path, success=True)
