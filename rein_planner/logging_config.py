# rein_planner/logging_config.py
"""
Stderr-only logging configuration.

MCP uses stdio transport, so the server logs JSON lines to stderr only.
The CLI uses a short human-readable format, also on stderr, so stdout stays
pipeable.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

VERBOSITY_LEVELS: dict[str, int] = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _install_handler(handler: logging.Handler, level: int) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(verbosity: str = "normal") -> None:
    """
    Configure logging to output JSON to stderr only.

    MUST be called before the MCP server starts.
    Clears existing handlers to prevent stdout pollution.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    level = VERBOSITY_LEVELS.get(verbosity, logging.INFO)
    _install_handler(handler, level)

    # Route third-party loggers through the same handler
    for logger_name in ["uvicorn", "fastmcp"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False


def configure_cli_logging(verbosity: str = "normal") -> None:
    """Human-readable logging to stderr for CLI mode."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s  %(levelname)-7s  %(message)s", datefmt="%H:%M:%S")
    )
    _install_handler(handler, VERBOSITY_LEVELS.get(verbosity, logging.INFO))
