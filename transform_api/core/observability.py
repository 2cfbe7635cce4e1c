"""
Observability - structured JSON logging and Prometheus request metrics.
Challenge: Every failure must be diagnosable from the server log alone.
"""

import json
import logging
from datetime import datetime, timezone

from prometheus_client import Counter, Histogram

REQUESTS_TOTAL = Counter(
    "transform_requests_total",
    "Transform requests by endpoint and outcome (ok or error kind).",
    ["endpoint", "outcome"],
)
REQUEST_DURATION = Histogram(
    "transform_request_duration_seconds",
    "Time spent running a transform pipeline.",
    ["endpoint"],
)

# Extra fields copied from LogRecord into the JSON line when present
EXTRA_FIELDS = (
    "endpoint", "method", "error_kind", "field", "status_code",
    "record_count", "width", "height",
)


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

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


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging. Calling it again replaces the previous handler."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
