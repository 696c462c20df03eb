"""Delimiter matching any one character out of a set."""

from __future__ import annotations

from collections.abc import Iterable

from strsplit.libs.delimiter.base_delimiter import BaseDelimiter


class CharSetDelimiter(BaseDelimiter):
    """Delimiter matching any single character contained in ``chars``.

    Each match is one character wide; runs of delimiter characters
    therefore produce empty tokens between them, same as ``CharDelimiter``.
    An empty set never matches.

    Attributes:
        chars: Frozen set of delimiter characters.
    """

    def __init__(self, chars: Iterable[str]) -> None:
        members = frozenset(chars)
        for member in members:
            if not isinstance(member, str) or len(member) != 1:
                raise ValueError(f"CharSetDelimiter members must be single characters, got: {member!r}")
        self.chars = members

    def find_next(self, haystack: str, start: int = 0) -> tuple[int, int] | None:
        if not self.chars:
            return None
        if start < 0:
            start = max(len(haystack) + start, 0)
        for index in range(start, len(haystack)):
            if haystack[index] in self.chars:
                return index, index + 1
        return None

    def __repr__(self) -> str:
        return f"CharSetDelimiter({''.join(sorted(self.chars))!r})"
