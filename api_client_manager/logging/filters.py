"""
Custom logging filters for api_client_manager.

Masks tokens and credentials before they reach a log handler.
"""

import logging
import re
from typing import List, Pattern


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in log messages."""

    def __init__(self) -> None:
        """Initialize sensitive data filter."""
        super().__init__()

        # Patterns for sensitive data
        self.patterns: List[Pattern[str]] = [
            # API keys and tokens
            re.compile(
                r'(api[_-]?key|token|secret)["\s]*[:=]["\s]*([a-zA-Z0-9+/=._-]{20,})',
                re.IGNORECASE,
            ),
            re.compile(r"(bearer\s+)([a-zA-Z0-9+/=._-]{20,})", re.IGNORECASE),
            re.compile(
                r'(authorization["\s]*[:=]["\s]*["\']?)([a-zA-Z0-9+/=._-]{20,})',
                re.IGNORECASE,
            ),
            # JWTs anywhere in the message
            re.compile(r"()\beyJ[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]*"),
            # URLs with credentials
            re.compile(r"(https?://[^:/\s]+):([^@\s]+)@", re.IGNORECASE),
        ]

        # Replacement patterns
        self.replacements = [
            r"\1: ***MASKED***",  # API keys and tokens
            r"\1***MASKED***",  # Bearer tokens
            r"\1***MASKED***",  # Authorization headers
            r"\1***MASKED***",  # JWTs
            r"\1:***MASKED***@",  # URL credentials
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record to mask sensitive data."""
        try:
            message = record.getMessage()

            for pattern, replacement in zip(self.patterns, self.replacements):
                message = pattern.sub(replacement, message)

            record.msg = message
            record.args = ()

            return True

        except Exception:
            # If filtering fails, allow the record through
            return True
