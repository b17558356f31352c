from pathlib import Path


def count_documents(path: Path, source_extension: str) -> int:
    """Count documents a walk over path would convert."""
    if path.is_dir():
        return sum(1 for child in path.rglob("*") if child.name.endswith(source_extension) and not child.is_dir())
    return 1 if path.name.endswith(source_extension) else 0
