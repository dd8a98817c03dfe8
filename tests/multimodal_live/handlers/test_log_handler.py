import logging
import unittest.mock
from datetime import datetime

import pytest

from multimodal_live.events import EventRegistry
from multimodal_live.handlers import LogEventHandler, truncate_value
from multimodal_live.types.events import LogEvent, StreamingLog


@pytest.fixture
def logger():
    return unittest.mock.Mock(spec=logging.Logger)


@pytest.fixture
def registry(logger):
    registry = EventRegistry()
    registry.add_hook(LogEventHandler(logger=logger, level=logging.INFO, max_length=5))
    return registry


def test_truncate_value():
    assert truncate_value("short", 10) == "short"
    assert truncate_value("abcdefghij", 4) == "abcd... (truncated, total: 10 chars)"
    assert truncate_value(b"ab", 4) == "<bytes: 2 bytes>: b'ab'"
    assert truncate_value(b"abcdef", 2).startswith("<bytes: 6 bytes, showing first 2>")
    assert truncate_value({"a": ["abcdef", 1]}, 3) == {"a": ["abc... (truncated, total: 6 chars)", 1]}
    assert truncate_value(42) == 42


def test_log_handler_forwards_entries(registry, logger):
    date = datetime(2024, 1, 2, 3, 4, 5)

    registry.invoke_callbacks(LogEvent(log=StreamingLog(type="client.send", message={"data": "abcdefgh"}, date=date)))

    logger.log.assert_called_once_with(
        logging.INFO,
        "type=<%s>, date=<%s>, message=<%s> | streaming log",
        "client.send",
        "2024-01-02T03:04:05",
        {"data": "abcde... (truncated, total: 8 chars)"},
    )


def test_log_handler_counts_entries():
    handler = LogEventHandler()
    registry = EventRegistry()
    registry.add_hook(handler)

    registry.invoke_callbacks(LogEvent(log=StreamingLog(type="server.content", message="turnComplete")))
    registry.invoke_callbacks(LogEvent(log=StreamingLog(type="server.content", message="interrupted")))

    assert handler.count == 2
    assert handler.logger.name == "multimodal_live.handlers.log_handler"
