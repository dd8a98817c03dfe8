"""A client for realtime bidirectional streaming with the Gemini Live API."""

from .client import DEFAULT_LIVE_URL, MultimodalLiveClient
from .errors import LiveConfigError, LiveConnectionError, NotConnectedError
from .events import EventCallback, EventProvider, EventRegistry
from .handlers import LogEventHandler
from .messages import DEFAULT_SYSTEM_PROMPT
from .types.config import LiveConfig
from .types.events import (
    AudioEvent,
    CloseEvent,
    ContentEvent,
    InterruptedEvent,
    LiveEvent,
    LogEvent,
    OpenEvent,
    SetupCompleteEvent,
    StreamingLog,
    ToolCallCancellationEvent,
    ToolCallEvent,
    TurnCompleteEvent,
)

__all__ = [
    # Client
    "MultimodalLiveClient",
    "LiveConfig",
    "DEFAULT_LIVE_URL",
    "DEFAULT_SYSTEM_PROMPT",
    # Errors
    "LiveConnectionError",
    "LiveConfigError",
    "NotConnectedError",
    # Event bus
    "EventCallback",
    "EventProvider",
    "EventRegistry",
    "LogEventHandler",
    # Events
    "LiveEvent",
    "StreamingLog",
    "OpenEvent",
    "CloseEvent",
    "LogEvent",
    "AudioEvent",
    "ContentEvent",
    "InterruptedEvent",
    "SetupCompleteEvent",
    "TurnCompleteEvent",
    "ToolCallEvent",
    "ToolCallCancellationEvent",
]
