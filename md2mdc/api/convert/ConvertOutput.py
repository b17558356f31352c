"""Output model for the convert command."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ConvertOutput(BaseModel):
    """Structured output of cmd_convert. All fields are always present."""

    model_config = ConfigDict(extra="forbid")

    input_path: str
    output_path: str
    mode: Literal["directory", "file", "skipped", "missing", "error"]
    link_prefix: str
    converted: list[dict[str, str]]
    errors: list[dict[str, str]]
    converted_count: int
    error_count: int
