def build_frontmatter(description: str) -> str:
    """Metadata block written at the top of every converted document."""
    return f"---\ndescription: {description}\nglobs:\nalwaysApply: false\n---\n\n"
