"""
Observability Layer - Logging.

This package contains observability components:
- Human-readable logger
- JSON Lines formatter
"""

__all__ = []
