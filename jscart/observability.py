"""Structured logging: JSON formatter and one-time setup for the service."""

import json
import logging
from datetime import datetime, timezone

# Extra fields copied from the log record when present
EXTRA_FIELDS = ("product_id", "quantity", "total_quantity", "total_price", "error_code", "path")

# Set on handlers installed by setup_logging
HANDLER_MARK = "_jscart_handler"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the jscart handler on the root logger.

    Calling it again swaps the handler instead of stacking a second one, so
    re-imports of ``main`` do not duplicate every line.
    """
    for existing in list(logging.root.handlers):
        if getattr(existing, HANDLER_MARK, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, HANDLER_MARK, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
