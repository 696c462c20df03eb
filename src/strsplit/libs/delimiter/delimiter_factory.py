"""Factory for creating delimiter instances from settings."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from strsplit.core.settings import Settings
from strsplit.libs.delimiter.base_delimiter import BaseDelimiter
from strsplit.libs.delimiter.char_delimiter import CharDelimiter
from strsplit.libs.delimiter.charset_delimiter import CharSetDelimiter
from strsplit.libs.delimiter.str_delimiter import StrDelimiter

logger = logging.getLogger(__name__)


DelimiterCreator = Callable[[Any], BaseDelimiter]


def _is_text_value(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def as_delimiter(value: str | BaseDelimiter) -> BaseDelimiter:
    """Coerce a plain string or delimiter object into a delimiter.

    A one-character string becomes a :class:`CharDelimiter`; any other
    string (including the empty string) becomes a :class:`StrDelimiter`.

    Args:
        value: Delimiter object or string pattern.

    Returns:
        A delimiter implementation.

    Raises:
        TypeError: If ``value`` is neither a string nor a delimiter.
    """

    if isinstance(value, BaseDelimiter):
        return value
    if isinstance(value, str):
        if len(value) == 1:
            return CharDelimiter(value)
        return StrDelimiter(value)
    raise TypeError(
        "Delimiter must be a str or BaseDelimiter, "
        f"got: {type(value).__name__}"
    )


class DelimiterFactory:
    """Factory that resolves delimiter implementations by configured type."""

    _registry: dict[str, DelimiterCreator] = {
        "char": CharDelimiter,
        "str": StrDelimiter,
        "charset": CharSetDelimiter,
    }

    @classmethod
    def register(cls, delimiter_type: str, creator: DelimiterCreator) -> None:
        """Register a delimiter constructor.

        Args:
            delimiter_type: Delimiter type key (e.g. "char", "str").
            creator: Callable that builds a delimiter from the configured value.
        """

        normalized = delimiter_type.strip().lower()
        if not normalized:
            raise ValueError("Delimiter type cannot be empty")
        cls._registry[normalized] = creator

    @classmethod
    def create(cls, settings: Settings) -> BaseDelimiter:
        """Create a delimiter instance based on settings.

        Args:
            settings: Global application settings.

        Returns:
            A configured delimiter implementation.

        Raises:
            ValueError: If delimiter type or value is missing, has the wrong
                shape, or the type is not registered.
        """

        delimiter_config = settings.splitter.get("delimiter")
        if not isinstance(delimiter_config, dict):
            raise ValueError("Missing required delimiter config: splitter.delimiter")

        delimiter_type_raw = delimiter_config.get("type")
        if not isinstance(delimiter_type_raw, str) or not delimiter_type_raw.strip():
            raise ValueError("Missing required delimiter type: splitter.delimiter.type")

        if "value" not in delimiter_config or delimiter_config["value"] is None:
            raise ValueError("Missing required delimiter value: splitter.delimiter.value")

        value = delimiter_config["value"]
        if not _is_text_value(value):
            raise ValueError(
                "Expected string or list of strings for splitter.delimiter.value, "
                f"got: {type(value).__name__}"
            )

        delimiter_type = delimiter_type_raw.strip().lower()
        creator = cls._registry.get(delimiter_type)
        if creator is None:
            available = ", ".join(sorted(cls._registry)) or "<none>"
            raise ValueError(
                "Unsupported splitter.delimiter.type: "
                f"{delimiter_type}. Registered delimiters: {available}"
            )

        try:
            delimiter = creator(value)
        except TypeError as exc:
            raise ValueError(f"Invalid splitter.delimiter.value for {delimiter_type}: {exc}") from exc
        logger.debug("Created delimiter %r from settings", delimiter)
        return delimiter

    @classmethod
    def list_types(cls) -> list[str]:
        """List all registered delimiter types."""
        return sorted(cls._registry)
