"""Config API module."""

from .ConvertConfig import ConvertConfig

__all__ = ["ConvertConfig"]
