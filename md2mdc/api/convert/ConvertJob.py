"""Explicit configuration for one conversion run."""

import os
from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field

from ..config.ConvertConfig import ConvertConfig


class ConvertJob(BaseModel):
    """Input root, output root, link prefix and scheme for one run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_path: Path
    link_prefix: str | None = None
    config: ConvertConfig = Field(default_factory=ConvertConfig)

    @property
    def resolved_link_prefix(self) -> str:
        """Prefix used in rewritten link targets.

        Defaults to the normalized output root, or to the input's file name
        when a single document is converted.
        """
        if self.link_prefix is not None:
            return self.link_prefix
        if self.input_path.is_file() and self.input_path.name.endswith(self.config.source_extension):
            return self.input_path.name
        return PurePath(os.path.normpath(self.output_path)).as_posix()
