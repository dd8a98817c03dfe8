"""Event handlers for the live client."""

from .log_handler import LogEventHandler, truncate_value

__all__ = ["LogEventHandler", "truncate_value"]
