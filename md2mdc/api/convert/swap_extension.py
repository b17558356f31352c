def swap_extension(name: str, source_extension: str, target_extension: str) -> str:
    """Replace a trailing source extension with the target extension."""
    if name.endswith(source_extension):
        return name[: -len(source_extension)] + target_extension
    return name
