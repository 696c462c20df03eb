"""Token span type shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextSpan:
    """A produced token as a view into the caller-owned source text.

    The span keeps a reference to ``source`` and the half-open range
    ``[start, end)``; the token text is only built when requested.

    Attributes:
        source: The full source text the token belongs to.
        start: Offset of the first character of the token.
        end: Offset one past the last character of the token.
    """

    source: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.source[self.start : self.end]

    def __repr__(self) -> str:
        return f"TextSpan({self.start}, {self.end}, {str(self)!r})"

    @property
    def text(self) -> str:
        """Token text."""
        return str(self)
