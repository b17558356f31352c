"""Convert API domain."""

from ..schema_registry import schema_registry
from .ConvertOutput import ConvertOutput

schema_registry.register_output_schema("convert", "convert", ConvertOutput)

__all__ = ["ConvertOutput"]
