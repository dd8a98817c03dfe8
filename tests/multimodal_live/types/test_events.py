from datetime import datetime

import pytest

from multimodal_live.types.events import (
    AudioEvent,
    CloseEvent,
    ContentEvent,
    LogEvent,
    StreamingLog,
    ToolCallEvent,
)


def test_events_are_read_only():
    event = AudioEvent(data=b"x")

    with pytest.raises(AttributeError, match="Property data is not writable"):
        event.data = b"y"

    with pytest.raises(AttributeError):
        event.other = 1


def test_close_event_defaults():
    assert CloseEvent() == CloseEvent(code=None, reason="")


def test_content_event_text():
    event = ContentEvent(
        content={
            "modelTurn": {
                "parts": [
                    {"text": "Hello, "},
                    {"inlineData": {"mimeType": "audio/pcm", "data": "AAAA"}},
                    {"text": "world"},
                ]
            }
        }
    )

    assert event.text == "Hello, world"


def test_streaming_log_defaults_date():
    before = datetime.now()
    log = StreamingLog(type="client.send", message="setup")

    assert before <= log.date <= datetime.now()
    assert LogEvent(log=log).log is log


def test_tool_call_event_equality():
    tool_call = {"functionCalls": [{"id": "1", "name": "f", "args": {}}]}

    assert ToolCallEvent(tool_call=tool_call) == ToolCallEvent(tool_call=dict(tool_call))
