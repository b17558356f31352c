"""Top-level md2mdc configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class ConvertConfig(BaseModel):
    """Link scheme and file extensions used by a conversion run."""

    model_config = ConfigDict(extra="forbid")

    link_scheme: str = "mdc"
    source_extension: str = ".md"
    target_extension: str = ".mdc"

    @field_validator("source_extension", "target_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if len(value) < 2 or not value.startswith("."):
            raise ValueError(f"extension must start with '.' (found: {value!r})")
        return value

    @field_validator("link_scheme")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not value or ":" in value:
            raise ValueError(f"link_scheme must be non-empty and must not contain ':' (found: {value!r})")
        return value

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get md2mdc home directory based on MD2MDC_HOME or default to ~/.md2mdc."""
        home_env = os.environ.get("MD2MDC_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".md2mdc"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "ConvertConfig":
        """Load and validate config from file.

        A missing config file is not an error; defaults are used.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
