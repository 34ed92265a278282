"""
Custom logging filters for graphql_fetch.

This module provides filters for masking credentials and for restricting a
handler to one component.
"""

import logging
import re
from typing import List, Pattern, Set, Tuple


class SensitiveDataFilter(logging.Filter):
    """Filter to mask credentials in log messages."""

    def __init__(self) -> None:
        """Initialize sensitive data filter."""
        super().__init__()

        # (pattern, replacement) pairs
        self.rules: List[Tuple[Pattern[str], str]] = [
            # Bearer / Basic credentials
            (
                re.compile(r"\b(bearer|basic)(\s+)([A-Za-z0-9\-._~+/]+=*)", re.IGNORECASE),
                r"\1\2***MASKED***",
            ),
            # Credential headers rendered as 'Name': 'value' or Name: value
            (
                re.compile(
                    r"""(["']?(?:authorization|proxy-authorization|cookie|x-api-key|x-auth-token|api[_-]?key|token|secret)["']?\s*[:=]\s*["']?)(?!\*\*\*MASKED|(?:bearer|basic)\s)([^"',\s}]+)""",
                    re.IGNORECASE,
                ),
                r"\1***MASKED***",
            ),
            # URLs with credentials
            (re.compile(r"(https?://[^:/\s]+):([^@\s]+)@", re.IGNORECASE), r"\1:***MASKED***@"),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record to mask sensitive data."""
        message = record.getMessage()

        for pattern, replacement in self.rules:
            message = pattern.sub(replacement, message)

        record.msg = message
        record.args = ()
        return True


class ComponentFilter(logging.Filter):
    """Filter for component-specific logging."""

    def __init__(self, component: str, allowed_levels: Set[str] | None = None) -> None:
        """
        Initialize component filter.

        Args:
            component: Logger namespace to let through
            allowed_levels: Set of allowed log levels
        """
        super().__init__()
        self.component = component
        self.allowed_levels = allowed_levels or {
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        }

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter based on component and level."""
        if not record.name.startswith(self.component):
            return False
        return record.levelname in self.allowed_levels
