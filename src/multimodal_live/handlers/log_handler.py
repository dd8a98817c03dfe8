"""Forward streaming log entries to the standard logging module.

Long strings and byte payloads are truncated so realtime audio does not flood the logs.
"""

import logging
from typing import Any

from ..events.registry import EventProvider, EventRegistry
from ..types.events import LogEvent


def truncate_value(value: Any, max_length: int = 100) -> Any:
    """Recursively truncate string values in nested structures."""
    if isinstance(value, str):
        if len(value) > max_length:
            return value[:max_length] + f"... (truncated, total: {len(value)} chars)"
        return value
    elif isinstance(value, bytes):
        if len(value) > max_length:
            return f"<bytes: {len(value)} bytes, showing first {max_length}>: {value[:max_length]!r}..."
        return f"<bytes: {len(value)} bytes>: {value!r}"
    elif isinstance(value, dict):
        return {k: truncate_value(v, max_length) for k, v in value.items()}
    elif isinstance(value, list):
        return [truncate_value(item, max_length) for item in value]
    return value


class LogEventHandler(EventProvider):
    """Event provider writing every `LogEvent` to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG, max_length: int = 100):
        """Initialize handler.

        Args:
            logger: Destination logger. Defaults to this module's logger.
            level: Level the entries are logged at.
            max_length: Maximum length of string values before truncation.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.max_length = max_length
        self.count = 0

    def register_hooks(self, registry: EventRegistry, **kwargs: Any) -> None:
        """Subscribe to log events."""
        registry.add_callback(LogEvent, self.on_log)

    def on_log(self, event: LogEvent) -> None:
        """Write one entry."""
        self.count += 1
        entry = event.log
        self.logger.log(
            self.level,
            "type=<%s>, date=<%s>, message=<%s> | streaming log",
            entry.type,
            entry.date.isoformat(),
            truncate_value(entry.message, self.max_length),
        )
