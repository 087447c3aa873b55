from __future__ import annotations

"""Small logging helpers to standardize decomment logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'decomment' logger.
    - get_logger: Namespaced logger factory ('decomment.*').
    - resolve_level: Base level, DEBUG when DECOMMENT_DEBUG=1.
"""

import logging
import os
from typing import Optional, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'decomment.io.walker').
        - msg: Formatted message string.
        - version: decomment.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import, the package __init__ imports this module indirectly.
            from decomment import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("DECOMMENT_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def resolve_level(default: int = logging.INFO) -> int:
    """Return DEBUG when DECOMMENT_DEBUG=1, else *default*."""
    return logging.DEBUG if os.getenv("DECOMMENT_DEBUG") == "1" else default


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'decomment' logger and return it.

    A second call replaces the handler, so switching between plain and JSON
    output (or redirecting the stream) takes effect.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger("decomment")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'decomment'."""
    if not name or name == "decomment":
        return logging.getLogger("decomment")
    if name.startswith("decomment"):
        return logging.getLogger(name)
    return logging.getLogger(f"decomment.{name}")
