"""
strsplit - Lazy delimiter splitting over borrowed text.

Public entry points:
- StrSplit: lazy token iterator over a source string
- until: first token before a delimiter
- split: all tokens as a list
"""

from strsplit.core.str_split import StrSplit, split, until
from strsplit.core.types import TextSpan

__all__ = ["StrSplit", "TextSpan", "split", "until"]
