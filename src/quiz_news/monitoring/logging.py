"""Logging setup for quiz-news, with optional single-line JSON output."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from quiz_news.config import MonitoringConfig

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Context attached through ``extra=`` by the fetcher and presenter.
_CONTEXT_FIELDS = ("url", "status_code", "view_state")

# Transport loggers that are chatty at INFO/DEBUG on every request.
_NOISY_LOGGERS = ("urllib3", "httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Any of ``url``, ``status_code`` and ``view_state`` passed via ``extra=``
    are copied to the top level of the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _json_handler(log_file: Path | None) -> logging.Handler:
    if log_file is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file))
    handler.setFormatter(JSONFormatter())
    return handler


def setup_structured_logging(*, log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Replace the root handlers with JSON output to stderr, plus ``log_file`` if given."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_json_handler(None))
    if log_file is not None:
        root.addHandler(_json_handler(log_file))


def setup_logging(cfg: MonitoringConfig, *, level: int = logging.INFO) -> None:
    """Configure logging from the monitoring section of the app config.

    Transport libraries are held at WARNING or above so a feed download logs
    only through ``quiz_news`` loggers.
    """
    if cfg.structured_logging:
        setup_structured_logging(log_file=Path(cfg.log_file) if cfg.log_file else None, level=level)
    else:
        logging.basicConfig(level=level, format=_PLAIN_FORMAT)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
