import json
import logging
from datetime import datetime, timezone

from receipt_processor.config import LOG_LEVEL

LOGGER_NAME = "receipt_processor"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; fields passed as ``extra_data`` are merged in."""

    def format(self, record):
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.WARNING:
            log_entry["source"] = f"{record.module}:{record.lineno}"
        log_entry.update(getattr(record, "extra_data", None) or {})
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging(level: str = LOG_LEVEL):
    root_logger = logging.getLogger(LOGGER_NAME)
    # Safe to call more than once (reloads, tests)
    if not any(isinstance(h.formatter, JSONFormatter) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Quiet noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
