"""
Splitter Module.

This package contains text splitter abstractions and implementations:
- Base splitter class
- Splitter factory
- Implementations (Delimiter)
"""

from strsplit.libs.splitter.base_splitter import BaseSplitter
from strsplit.libs.splitter.delimiter_splitter import DelimiterSplitter
from strsplit.libs.splitter.splitter_factory import SplitterFactory

__all__ = [
    "BaseSplitter",
    "DelimiterSplitter",
    "SplitterFactory",
]
