def _capitalize(word: str) -> str:
    # Only the first character changes; str.capitalize() would lowercase the rest
    return word[:1].upper() + word[1:]
