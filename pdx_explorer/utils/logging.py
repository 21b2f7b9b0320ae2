"""Centralized logging configuration using Loguru.

Every module logs through the same loguru ``logger``; this module owns the
handler setup so that importing it once is enough.

Usage:
    from pdx_explorer.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if PDX_EXPLORER_LOG_LEVEL=DEBUG

Environment Variables:
    PDX_EXPLORER_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    PDX_EXPLORER_LOG_JSON: 0|1 (default: 0, human-readable)
    PDX_EXPLORER_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys
from pathlib import Path

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("PDX_EXPLORER_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("PDX_EXPLORER_LOG_JSON", "0") == "1"
_log_file = os.environ.get("PDX_EXPLORER_LOG_FILE")


def _to_json_line(message) -> str:
    """Serialize a loguru message into a single NDJSON line."""
    record = message.record

    payload = {
        "level": record["level"].name,
        "time": record["time"].isoformat(),
        "msg": record["message"],
        "module": record["name"],
        "pid": record["process"].id,
    }

    for key, value in record["extra"].items():
        payload[key] = value

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(payload, default=str)


def json_sink(message):
    """Write log records as NDJSON to stdout.

    Never call logger.* inside a sink - it recurses.
    """
    sys.stdout.write(_to_json_line(message) + "\n")
    sys.stdout.flush()


# Human-readable format (no emojis - Windows CP1252 compatibility)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(json_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    def _file_json_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_json_line(message) + "\n")

    logger.add(_file_json_sink, level="DEBUG")


def configure_file_logging(log_dir: Path, level: str = "DEBUG") -> None:
    """Add rotating file handler for persistent logs.

    Args:
        log_dir: Directory for log files (e.g., Path(".pdx"))
        level: Minimum log level for file output
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "pdx_explorer.log"

    logger.add(
        log_file,
        rotation="10 MB",
        retention="7 days",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )


__all__ = [
    "logger",
    "configure_file_logging",
    "json_sink",
]
