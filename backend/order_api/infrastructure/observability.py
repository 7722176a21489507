"""Structured Logging — one JSON object per log line for the order API.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Order context (order_id, product_id, item_count) and error context
      (error_code, path) are copied from `extra=` when a caller supplies them

Design Decisions:
    - LOG_FORMAT=text switches to a plain formatter for local runs
"""

import logging
import json
from datetime import datetime, timezone

ORDER_LOG_FIELDS = (
    "order_id", "product_id", "item_count", "error_code", "path",
)
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in ORDER_LOG_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Attach one stream handler to the root logger; called once from the lifespan."""
    handler = logging.StreamHandler()
    formatter = JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
