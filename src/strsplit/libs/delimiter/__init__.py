"""
Delimiter Module.

This package contains delimiter abstractions and implementations:
- Base delimiter class
- Delimiter factory and string coercion
- Implementations (Char, Str, CharSet)
"""

from strsplit.libs.delimiter.base_delimiter import BaseDelimiter
from strsplit.libs.delimiter.char_delimiter import CharDelimiter
from strsplit.libs.delimiter.charset_delimiter import CharSetDelimiter
from strsplit.libs.delimiter.delimiter_factory import DelimiterFactory, as_delimiter
from strsplit.libs.delimiter.str_delimiter import StrDelimiter

__all__ = [
    "BaseDelimiter",
    "CharDelimiter",
    "CharSetDelimiter",
    "DelimiterFactory",
    "StrDelimiter",
    "as_delimiter",
]
