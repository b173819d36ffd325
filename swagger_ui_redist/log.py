"""Structured JSON logging for swagger_ui_redist.

The library only emits records through module loggers; hosts that want
them formatted as JSON lines can call :func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .config import get_settings

LOGGER_NAME = "swagger_ui_redist"


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Merge extra structured data
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    level: int | str | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure structured logging for the package logger.

    Args:
        level: Logging level. Defaults to ``Settings.log_level``.
        log_dir: Directory for a JSON lines log file. If None, logs to stderr only.

    Returns:
        The 'swagger_ui_redist' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = JSONFormatter()

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "swagger-ui.jsonl", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    sh.setLevel(level)
    logger.addHandler(sh)

    return logger


def log_page_render(title: str, html_len: int, config_len: int) -> None:
    """Log a rendered Swagger UI page."""
    logger = logging.getLogger(f"{LOGGER_NAME}.renderer")
    logger.debug(
        "page_render",
        extra={"data": {
            "title": title,
            "html_len": html_len,
            "config_len": config_len,
        }},
    )


__all__ = ["JSONFormatter", "setup_logging", "log_page_render", "LOGGER_NAME"]
