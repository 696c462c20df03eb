"""Single-character delimiter."""

from __future__ import annotations

from strsplit.libs.delimiter.base_delimiter import BaseDelimiter


class CharDelimiter(BaseDelimiter):
    """Delimiter matching one exact character.

    Attributes:
        char: The character to match.

    Raises:
        ValueError: If ``char`` is not exactly one character long.
    """

    def __init__(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"CharDelimiter requires a single character, got: {char!r}")
        self.char = char

    def find_next(self, haystack: str, start: int = 0) -> tuple[int, int] | None:
        index = haystack.find(self.char, start)
        if index < 0:
            return None
        return index, index + 1

    def __repr__(self) -> str:
        return f"CharDelimiter({self.char!r})"
