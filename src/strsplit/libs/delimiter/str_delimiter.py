"""Literal substring delimiter."""

from __future__ import annotations

from strsplit.libs.delimiter.base_delimiter import BaseDelimiter


class StrDelimiter(BaseDelimiter):
    """Delimiter matching an exact substring.

    An empty pattern never matches, so splitting by it yields the whole
    source as a single token.

    Attributes:
        pattern: The substring to match.
    """

    def __init__(self, pattern: str) -> None:
        if not isinstance(pattern, str):
            raise TypeError(f"StrDelimiter pattern must be a string, got: {type(pattern).__name__}")
        self.pattern = pattern

    def find_next(self, haystack: str, start: int = 0) -> tuple[int, int] | None:
        if not self.pattern:
            return None
        index = haystack.find(self.pattern, start)
        if index < 0:
            return None
        return index, index + len(self.pattern)

    def __repr__(self) -> str:
        return f"StrDelimiter({self.pattern!r})"
