from .FRONTMATTER_PATTERN import FRONTMATTER_PATTERN


def strip_frontmatter(content: str) -> str:
    """Remove a metadata block at the very start of content, if one is closed."""
    return FRONTMATTER_PATTERN.sub("", content, count=1)
