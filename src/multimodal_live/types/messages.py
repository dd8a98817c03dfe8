"""Wire message type definitions for the live protocol.

Outbound messages are plain JSON-serializable dictionaries. Inbound messages are decoded once at the transport boundary
into one of the `IncomingMessage` variants so that dispatch is a single match over a closed set of shapes.
"""

from dataclasses import dataclass
from typing import Any

from typing_extensions import TypedDict

from .config import LiveConfig
from .content import Blob, Content, FunctionCall, FunctionResponse, Part

# ============================================================================
# Outbound (client -> server)
# ============================================================================


class SetupMessage(TypedDict):
    """Handshake sent once, immediately after the transport opens."""

    setup: LiveConfig
    systemPrompt: str


class ClientContent(TypedDict):
    """Turns appended to the conversation."""

    turns: list[Content]
    turnComplete: bool


class ClientContentMessage(TypedDict):
    """Wrapper for client content."""

    clientContent: ClientContent


class RealtimeInput(TypedDict):
    """Streamed media chunks (microphone audio, camera frames)."""

    mediaChunks: list[Blob]


class RealtimeInputMessage(TypedDict):
    """Wrapper for realtime input."""

    realtimeInput: RealtimeInput


class ToolResponse(TypedDict, total=False):
    """Results of tool calls requested by the server."""

    functionResponses: list[FunctionResponse]


class ToolResponseMessage(TypedDict):
    """Wrapper for a tool response."""

    toolResponse: ToolResponse


# ============================================================================
# Inbound (server -> client) payloads
# ============================================================================


class ModelTurn(TypedDict):
    """Model output for the current turn."""

    parts: list[Part]


class ServerContent(TypedDict, total=False):
    """Incremental server update generated in response to client input.

    Attributes:
        interrupted: Client input interrupted the current model generation.
        turnComplete: The model finished generating for the current turn.
        modelTurn: Content generated by the model.
    """

    interrupted: bool
    turnComplete: bool
    modelTurn: ModelTurn


class ToolCall(TypedDict, total=False):
    """Request for the client to execute function calls."""

    functionCalls: list[FunctionCall]


class ToolCallCancellation(TypedDict, total=False):
    """Previously issued tool calls that should not have been executed."""

    ids: list[str]


class ContentEnvelope(TypedDict):
    """Envelope carried by content events."""

    modelTurn: ModelTurn


# ============================================================================
# Decoded inbound messages
# ============================================================================


@dataclass(frozen=True)
class ToolCallMessage:
    """Server asks the client to run tools."""

    tool_call: ToolCall


@dataclass(frozen=True)
class ToolCallCancellationMessage:
    """Server cancels previously requested tool calls."""

    tool_call_cancellation: ToolCallCancellation


@dataclass(frozen=True)
class SetupCompleteMessage:
    """Server acknowledged the setup handshake."""

    pass


@dataclass(frozen=True)
class ServerContentMessage:
    """Server content: interruption, turn completion and/or model output."""

    server_content: ServerContent

    @property
    def interrupted(self) -> bool:
        """Whether the server reported an interruption."""
        return bool(self.server_content.get("interrupted"))

    @property
    def turn_complete(self) -> bool:
        """Whether the server reported the end of the model turn."""
        return bool(self.server_content.get("turnComplete"))

    @property
    def model_turn(self) -> ModelTurn | None:
        """Model output carried by this message, if any."""
        model_turn = self.server_content.get("modelTurn")
        return model_turn if isinstance(model_turn, dict) else None


@dataclass(frozen=True)
class UnrecognizedMessage:
    """Payload matching none of the known shapes."""

    payload: Any


IncomingMessage = (
    ToolCallMessage | ToolCallCancellationMessage | SetupCompleteMessage | ServerContentMessage | UnrecognizedMessage
)
"""Closed union of every decoded inbound message."""
