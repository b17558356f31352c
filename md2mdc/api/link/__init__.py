"""Link API domain: markdown link parsing and rewriting."""

from .LinkRef import LinkRef
from .is_path_within_base import is_path_within_base
from .parse_links import parse_links
from .transform_links import transform_links

__all__ = ["LinkRef", "is_path_within_base", "parse_links", "transform_links"]
