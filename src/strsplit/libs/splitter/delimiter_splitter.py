"""Splitter strategy that cuts text at every delimiter occurrence."""

from __future__ import annotations

from strsplit.core.settings import Settings
from strsplit.core.str_split import StrSplit
from strsplit.libs.delimiter.base_delimiter import BaseDelimiter
from strsplit.libs.delimiter.delimiter_factory import DelimiterFactory, as_delimiter
from strsplit.libs.splitter.base_splitter import BaseSplitter


class DelimiterSplitter(BaseSplitter):
    """Collect all :class:`StrSplit` tokens of a text.

    Attributes:
        delimiter: Delimiter applied to every text.
    """

    def __init__(self, delimiter: str | BaseDelimiter) -> None:
        self.delimiter = as_delimiter(delimiter)

    @classmethod
    def from_settings(cls, settings: Settings) -> DelimiterSplitter:
        """Build a splitter using ``splitter.delimiter`` from settings."""
        return cls(DelimiterFactory.create(settings))

    def split_text(self, text: str) -> list[str]:
        return list(StrSplit(text, self.delimiter))
