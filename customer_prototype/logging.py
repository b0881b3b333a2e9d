"""Logging configuration for customer-prototype.

Log calls about a single record pass ``extra=customer_context(record)`` so
the JSON formatter can emit which customer and which variant they concern.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Record attributes set through ``extra`` that JsonFormatter emits
CONTEXT_FIELDS = ("customer_id", "variant", "prototype")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Route customer-prototype logs to stdout.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-separated text, "json" for one object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(log_level)

    logging.getLogger("customer_prototype").setLevel(log_level)
    # Faker logs locale/provider lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def customer_context(customer: Any, **fields: Any) -> dict[str, Any]:
    """Build ``extra`` for a log call about one customer record.

    Parameters
    ----------
    customer : Customer
        The record the message concerns.
    **fields
        Further context, e.g. ``prototype="vip"``.

    Returns
    -------
    dict
        ``customer_id`` and ``variant`` (the record's class name) plus
        ``fields``.
    """
    return {
        "customer_id": customer.customer_id,
        "variant": type(customer).__name__,
        **fields,
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including customer context when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
