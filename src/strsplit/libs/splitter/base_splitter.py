"""Base abstraction for text splitter strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSplitter(ABC):
    """Abstract interface for splitter implementations."""

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Split text into tokens.

        Args:
            text: Source text to split.

        Returns:
            List of tokens in source order.
        """
