"""Link reference dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A `[text](target)` occurrence found in a document."""

    text: str
    raw_target: str
    start: int
    end: int

    @property
    def file_path(self) -> str:
        """Target with any `#fragment` removed."""
        return self.raw_target.split("#", 1)[0]

    @property
    def fragment(self) -> str:
        """Fragment after the first `#`, or empty string."""
        _, sep, fragment = self.raw_target.partition("#")
        return fragment if sep else ""
