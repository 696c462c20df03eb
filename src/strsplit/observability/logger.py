"""Observability logger utilities.

Provides:
- ``get_logger``: standard human-readable logger.
- ``JSONFormatter``: custom :class:`logging.Formatter` that emits JSON.
- ``configure_logging``: applies the ``observability`` settings section.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from strsplit.core.settings import Settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


# ── Human-readable logger ───────────────────────────────────────────


def _resolve_level(log_level: Optional[str]) -> int:
    if log_level:
        return getattr(logging, log_level.upper(), logging.INFO)
    return logging.INFO


def get_logger(
    name: str = "strsplit",
    log_level: Optional[str] = None,
    *,
    structured: bool = False,
) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name.
        log_level: Optional log level string (e.g., "INFO").
        structured: Emit JSON lines instead of plain text.

    Returns:
        Configured logger instance.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if structured else logging.Formatter(_LOG_FORMAT))

    logging.basicConfig(level=_resolve_level(log_level), handlers=[handler])

    return logging.getLogger(name)


def configure_logging(settings: Settings, log_level: Optional[str] = None) -> logging.Logger:
    """Configure logging from the ``observability`` settings section.

    Args:
        settings: Global application settings.
        log_level: Optional override for ``observability.log_level``.

    Returns:
        The package logger.
    """

    observability = settings.observability
    return get_logger(
        log_level=log_level or observability.get("log_level"),
        structured=bool(observability.get("structured_logging", False)),
    )


# ── JSON formatter ──────────────────────────────────────────────────

# Attributes every LogRecord carries; anything else came in through extra=.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """Format each record as one JSON object on a single line.

    Fields: ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``,
    ``message`` and ``source`` (``module:lineno``). Attributes passed via
    ``extra=`` are added at the top level; values JSON cannot encode are
    written with ``str()``. A traceback, when present, goes to ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}:{record.lineno}",
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)
