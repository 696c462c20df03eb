"""
Core Layer - Core splitting logic.

This package contains:
- Configuration management (settings.py)
- Token span type (types.py)
- Lazy splitter (str_split.py)
"""

__all__ = []
