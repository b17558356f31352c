"""Outcome of converting a single document."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileResult:
    source: Path
    destination: Path
    success: bool
    error: str = ""
