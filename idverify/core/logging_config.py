"""Structured logging configuration.

JSON-formatted records with a fixed whitelist of extra fields so that
extraction outcomes (profile, field, method, confidence) can be queried in a
log aggregator. Personal data (names, ID numbers, raw OCR text) is never
passed as extra context.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "trace_id",
    "request_id",
    "profile",
    "field",
    "method",
    "confidence",
    "duration_ms",
    "error_code",
    "mismatches",
)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Example:
        >>> logger.info("Field extracted", extra={"field": "id_number", "confidence": 0.98})
        # Output: {"timestamp": "2025-12-05T17:52:00Z", "level": "INFO",
        #          "message": "Field extracted", "field": "id_number", "confidence": 0.98}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .replace(tzinfo=None)
            .isoformat()
            + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_structured_logging(
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatter (True) or plain text (False)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()

    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))


def configure_logging_from_settings() -> None:
    """Configure logging from ``app_settings`` (LOG_LEVEL, LOG_JSON)."""
    from idverify.core.settings import app_settings

    configure_structured_logging(
        level=app_settings.LOG_LEVEL,
        json_format=app_settings.LOG_JSON,
    )
