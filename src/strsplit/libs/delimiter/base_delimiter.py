"""Base abstraction for delimiter patterns."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseDelimiter(ABC):
    """Abstract interface for delimiter implementations.

    A delimiter only knows how to locate its next occurrence in a text.
    Splitters depend on this single capability, so new pattern kinds can
    be added without touching the splitting loop.
    """

    @abstractmethod
    def find_next(self, haystack: str, start: int = 0) -> tuple[int, int] | None:
        """Locate the first occurrence at or after ``start``.

        Args:
            haystack: Text to search. Offsets refer to this string.
            start: Offset to begin searching from.

        Returns:
            Half-open ``(match_start, match_end)`` range with
            ``match_end > match_start``, or ``None`` when there is no
            further occurrence.
        """
