"""Request Logging — one JSON object per line, keyed by the tenant identifiers.

Invariants:
    - Every line carries timestamp, level, logger and message
    - principal_id / profile_id / note_id appear whenever the caller passed
      them in `extra=`, so one tenant's trail can be grepped out of the stream
    - Store error detail only ever reaches the log, never a response body

Design Decisions:
    - Plain `logging` with a custom Formatter; log shippers read stdout
    - `text` format for local runs, same fields appended as key=value
"""

import json
import logging
from datetime import datetime, timezone

TENANT_FIELDS = ("principal_id", "profile_id", "note_id")
DIAGNOSTIC_FIELDS = ("error_code", "operation", "path")


def _extras(record: logging.LogRecord) -> dict:
    """Known extra fields present on the record, in a stable order."""
    found = {}
    for key in TENANT_FIELDS + DIAGNOSTIC_FIELDS:
        value = getattr(record, key, None)
        if value is not None:
            found[key] = value
    return found


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with the tenant ids appended."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        return f"{base} [{pairs}]" if pairs else base


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install a single stdout handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
