"""Encoding and decoding of live protocol messages.

Outbound builders produce JSON-serializable dictionaries in the service's camelCase wire format. Parts and blobs may be
given either as wire dictionaries or as `google.genai.types` models; models are dumped by alias so both forms serialize
identically.

Inbound frames are decoded once into an `IncomingMessage` variant. When a payload loosely matches more than one shape,
the first match in this order wins: tool call, tool call cancellation, setup complete, server content.
"""

import copy
import json
import logging
from typing import Any, Sequence, cast

from google.genai import types as genai_types
from pydantic import BaseModel

from .types.config import LiveConfig
from .types.content import Blob, Content, Part
from .types.messages import (
    ClientContentMessage,
    IncomingMessage,
    RealtimeInputMessage,
    ServerContentMessage,
    SetupCompleteMessage,
    SetupMessage,
    ToolCallCancellationMessage,
    ToolCallMessage,
    ToolResponse,
    ToolResponseMessage,
    UnrecognizedMessage,
)

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful realtime assistant. Answer factually, completely and accurately without extraneous "
    "commentary. Keep every response to a single paragraph and phrase it naturally so it sounds realistic when "
    "converted to speech."
)
"""System prompt sent with the setup handshake when the config does not provide one."""

PartInput = Part | genai_types.Part
BlobInput = Blob | genai_types.Blob


def to_wire(value: Any) -> Any:
    """Convert SDK models to their wire dictionaries, leaving plain values untouched.

    Args:
        value: A wire dictionary or a pydantic model such as `google.genai.types.Part`.

    Returns:
        JSON-serializable wire representation.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def build_setup_message(config: LiveConfig) -> SetupMessage:
    """Build the setup handshake.

    Args:
        config: Session configuration captured at connect time.

    Returns:
        Setup message carrying the config and the effective system prompt.
    """
    system_prompt = config.get("systemPrompt") or DEFAULT_SYSTEM_PROMPT
    return {"setup": copy.deepcopy(config), "systemPrompt": system_prompt}


def build_client_content(parts: PartInput | Sequence[PartInput], turn_complete: bool = True) -> ClientContentMessage:
    """Build a client content message holding a single user turn.

    Args:
        parts: One part or a sequence of parts. A single part is wrapped in a one-element list.
        turn_complete: Whether the model should start generating after this turn.

    Returns:
        Client content message.
    """
    if isinstance(parts, (dict, BaseModel)):
        parts = [parts]

    content: Content = {"role": "user", "parts": [cast(Part, to_wire(part)) for part in parts]}
    return {"clientContent": {"turns": [content], "turnComplete": turn_complete}}


def build_realtime_input(chunks: Sequence[BlobInput]) -> RealtimeInputMessage:
    """Build a realtime input message.

    Args:
        chunks: Media chunks (base64 payload with MIME type).

    Returns:
        Realtime input message.
    """
    return {"realtimeInput": {"mediaChunks": [cast(Blob, to_wire(chunk)) for chunk in chunks]}}


def build_tool_response(tool_response: ToolResponse | genai_types.LiveClientToolResponse) -> ToolResponseMessage:
    """Build a tool response message.

    Args:
        tool_response: Caller-supplied response payload, passed through unchanged.

    Returns:
        Tool response message.
    """
    return {"toolResponse": cast(ToolResponse, to_wire(tool_response))}


def describe_media_chunks(chunks: Sequence[Blob]) -> str:
    """Summarize which media kinds a realtime input carries.

    Args:
        chunks: Wire media chunks.

    Returns:
        "audio", "video", "audio + video" or "unknown".
    """
    has_audio = any("audio" in chunk.get("mimeType", "") for chunk in chunks)
    has_video = any("image" in chunk.get("mimeType", "") for chunk in chunks)

    if has_audio and has_video:
        return "audio + video"
    if has_audio:
        return "audio"
    if has_video:
        return "video"
    return "unknown"


def decode_frame(frame: bytes) -> Any:
    """Parse a binary frame as JSON.

    Raises:
        ValueError: If the frame is not valid UTF-8 JSON.
    """
    return json.loads(frame)


def decode_message(payload: Any) -> IncomingMessage:
    """Classify a decoded inbound payload.

    Args:
        payload: Parsed JSON payload.

    Returns:
        Exactly one message variant; `UnrecognizedMessage` when no known shape matches.
    """
    if not isinstance(payload, dict):
        return UnrecognizedMessage(payload=payload)

    if "toolCall" in payload:
        return ToolCallMessage(tool_call=payload["toolCall"])

    if "toolCallCancellation" in payload:
        return ToolCallCancellationMessage(tool_call_cancellation=payload["toolCallCancellation"])

    if "setupComplete" in payload:
        return SetupCompleteMessage()

    if isinstance(payload.get("serverContent"), dict):
        return ServerContentMessage(server_content=payload["serverContent"])

    return UnrecognizedMessage(payload=payload)
