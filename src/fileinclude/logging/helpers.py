from __future__ import annotations

"""Small logging helpers to standardize fileinclude logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'fileinclude' logger
      (diagnostics on stderr, the run summary on stdout).
    - get_logger: Namespaced logger factory ('fileinclude.*').
    - verbosity_to_level: Maps the CLI verbosity switches onto logging levels.
    - trace: TRACE-level helper used for the file listings.

Levels:
    - SILENT is above CRITICAL, nothing is emitted.
    - INFO (default) shows errors and the final summary.
    - DEBUG (--verbose) adds one line per written file.
    - TRACE (--extra-verbose) adds the discovery and classification listings.
"""

import logging
import os
from typing import Optional, TextIO

TRACE = 5
SILENT = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'fileinclude.resolver').
        - msg: Formatted message string.
        - version: fileinclude.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from fileinclude import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("FILEINCLUDE_VERSION", "unknown")

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


SUMMARY_LOGGER = "fileinclude.summary"


class _NotSummaryFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.name != SUMMARY_LOGGER


def _make_formatter(json_logs: bool, *, summary: bool) -> logging.Formatter:
    if json_logs:
        return JsonLogFormatter()
    return logging.Formatter("%(message)s" if summary else "%(levelname)s: %(message)s")


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    summary_stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the base 'fileinclude' logger and return it.

    Two handlers are installed: diagnostics go to *stream* (stderr) as
    `LEVEL: message`, while records of the 'fileinclude.summary' logger go
    to *summary_stream* (stdout) as the bare message. With `json_logs`
    both emit JSON lines.

    A later call without streams keeps the handlers, updating the level
    and the formatters. Handlers installed by someone else (e.g. a test
    capture) are left alone.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional diagnostics stream (stderr by default).
        summary_stream: Optional summary stream (stdout by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("fileinclude")
    base.setLevel(level)

    if stream is None and summary_stream is None and base.handlers:
        for handler in base.handlers:
            role = getattr(handler, "_fileinclude_role", None)
            if role is not None:
                handler.setFormatter(_make_formatter(json_logs, summary=role == "summary"))
        return base

    import sys as _sys

    base.handlers.clear()
    base.propagate = False

    diag = logging.StreamHandler(stream or _sys.stderr)
    diag.addFilter(_NotSummaryFilter())
    diag.setFormatter(_make_formatter(json_logs, summary=False))
    diag._fileinclude_role = "diagnostics"  # type: ignore[attr-defined]

    final = logging.StreamHandler(summary_stream or _sys.stdout)
    final.addFilter(logging.Filter(SUMMARY_LOGGER))
    final.setFormatter(_make_formatter(json_logs, summary=True))
    final._fileinclude_role = "summary"  # type: ignore[attr-defined]

    base.addHandler(diag)
    base.addHandler(final)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'fileinclude'."""
    if not name or name == "fileinclude":
        return logging.getLogger("fileinclude")
    if name.startswith("fileinclude"):
        return logging.getLogger(name)
    return logging.getLogger(f"fileinclude.{name}")


def verbosity_to_level(*, silent: bool = False, verbose: bool = False, extra_verbose: bool = False) -> int:
    """Translate the CLI switches into a logging level (silent wins)."""
    if silent:
        return SILENT
    if extra_verbose:
        return TRACE
    if verbose:
        return logging.DEBUG
    return logging.INFO


def trace(logger: logging.Logger, message: str, *args) -> None:
    """Emit a TRACE message, skipping the formatting work when disabled."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, message, *args)
