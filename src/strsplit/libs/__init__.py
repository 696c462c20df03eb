"""
Libs Layer - Pluggable abstraction layer.

This package contains the factory pattern implementations for
pluggable components:
- Delimiters
- Splitter strategies
"""

__all__ = []
