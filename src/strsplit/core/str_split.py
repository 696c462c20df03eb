"""Lazy delimiter splitting over a borrowed source string.

``StrSplit`` walks the source once, front to back, and hands out one token
per call. It never copies the source: the remainder is tracked as an offset
into the caller's string, and tokens are produced as slices (or
:class:`~strsplit.core.types.TextSpan` views) of that string.

The splitter has two states:

- Active: ``_offset`` is an int. The remainder ``source[_offset:]`` may be
  empty and still owe one final (empty) token.
- Exhausted: ``_offset`` is ``None``. Nothing more is produced.

Example:
    >>> list(StrSplit("a b c d ", " "))
    ['a', 'b', 'c', 'd', '']
    >>> until("abcde", "c")
    'ab'
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

from strsplit.core.types import TextSpan
from strsplit.libs.delimiter.base_delimiter import BaseDelimiter
from strsplit.libs.delimiter.delimiter_factory import as_delimiter

logger = logging.getLogger(__name__)


class StrSplit:
    """Iterator over the tokens of ``source`` separated by ``delimiter``.

    A delimiter that never occurs yields the whole source as one token, and
    a trailing delimiter yields exactly one trailing empty token. Once the
    final token has been produced the splitter is exhausted and keeps
    returning nothing.

    Instances hold single-writer cursor state; advance them from one caller
    at a time.

    Attributes:
        source: The caller-owned text being split.
        delimiter: Delimiter used for every search.
    """

    def __init__(self, source: str, delimiter: str | BaseDelimiter) -> None:
        self.source = source
        self.delimiter = as_delimiter(delimiter)
        self._offset: Optional[int] = 0

    @property
    def exhausted(self) -> bool:
        """Whether the final token has already been produced."""
        return self._offset is None

    @property
    def remainder(self) -> Optional[str]:
        """Unconsumed suffix of the source, or ``None`` once exhausted."""
        if self._offset is None:
            return None
        return self.source[self._offset :]

    def next_span(self) -> Optional[TextSpan]:
        """Produce the next token as a span, or ``None`` when exhausted."""
        if self._offset is None:
            return None

        start = self._offset
        found = self.delimiter.find_next(self.source, start)
        if found is not None:
            match_start, match_end = found
            if match_start < start or match_end <= match_start or match_end > len(self.source):
                raise ValueError(
                    f"{self.delimiter!r} returned invalid range ({match_start}, {match_end}) "
                    f"for search from offset {start}"
                )
            self._offset = match_end
            return TextSpan(self.source, start, match_start)

        self._offset = None
        logger.debug("StrSplit exhausted after offset %d of %d", start, len(self.source))
        return TextSpan(self.source, start, len(self.source))

    def spans(self) -> Iterator[TextSpan]:
        """Yield the remaining tokens as spans."""
        while True:
            span = self.next_span()
            if span is None:
                return
            yield span

    def __iter__(self) -> StrSplit:
        return self

    def __next__(self) -> str:
        span = self.next_span()
        if span is None:
            raise StopIteration
        return str(span)

    def __repr__(self) -> str:
        state = "exhausted" if self._offset is None else f"offset={self._offset}"
        return f"StrSplit({self.delimiter!r}, {state})"


def until(source: str, delimiter: str | BaseDelimiter) -> str:
    """Return the text of ``source`` before the first ``delimiter``.

    If the delimiter does not occur, the whole source is returned.

    Args:
        source: Text to scan.
        delimiter: Delimiter object or string pattern.

    Returns:
        The first token of ``source``.
    """

    token = next(StrSplit(source, delimiter), None)
    if token is None:
        raise AssertionError("StrSplit produced no first token")
    return token


def split(source: str, delimiter: str | BaseDelimiter) -> list[str]:
    """Collect every token of ``source`` into a list."""
    return list(StrSplit(source, delimiter))
