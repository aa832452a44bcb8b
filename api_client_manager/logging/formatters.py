"""
Custom logging formatters for api_client_manager.

The manager attaches client context (namespace, cache key, endpoint) to its
records through ``extra``. Both formatters here render that context.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Tuple

# Context attached by the client manager, in rendering order
CONTEXT_FIELDS: Tuple[str, ...] = (
    "namespace",
    "cache_key",
    "api_url",
    "client_count",
)


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Client context carried by a record, skipping fields it lacks."""
    return {
        field: getattr(record, field)
        for field in CONTEXT_FIELDS
        if getattr(record, field, None) is not None
    }


class StructuredFormatter(logging.Formatter):
    """
    Render records as one JSON object per line.

    Client context fields become top-level keys so log pipelines can filter
    by namespace or cache key.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(record_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class ContextFormatter(logging.Formatter):
    """Plain-text formatter that appends client context as ``key=value`` pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = record_context(record)
        if not context:
            return line

        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"
