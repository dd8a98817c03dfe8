"""Type definitions for the live client."""

from .config import GenerationConfig, LiveConfig, SpeechConfig
from .content import AUDIO_PCM_MIME_PREFIX, Blob, Content, FunctionCall, FunctionResponse, Part
from .events import (
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
from .messages import (
    ClientContentMessage,
    ContentEnvelope,
    IncomingMessage,
    ModelTurn,
    RealtimeInputMessage,
    ServerContent,
    ServerContentMessage,
    SetupCompleteMessage,
    SetupMessage,
    ToolCall,
    ToolCallCancellation,
    ToolCallCancellationMessage,
    ToolCallMessage,
    ToolResponse,
    ToolResponseMessage,
    UnrecognizedMessage,
)

__all__ = [
    # Config
    "LiveConfig",
    "GenerationConfig",
    "SpeechConfig",
    # Content
    "AUDIO_PCM_MIME_PREFIX",
    "Blob",
    "Content",
    "FunctionCall",
    "FunctionResponse",
    "Part",
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
    # Outbound messages
    "SetupMessage",
    "ClientContentMessage",
    "RealtimeInputMessage",
    "ToolResponse",
    "ToolResponseMessage",
    # Inbound messages
    "ContentEnvelope",
    "ModelTurn",
    "ServerContent",
    "ToolCall",
    "ToolCallCancellation",
    "IncomingMessage",
    "ToolCallMessage",
    "ToolCallCancellationMessage",
    "SetupCompleteMessage",
    "ServerContentMessage",
    "UnrecognizedMessage",
]
