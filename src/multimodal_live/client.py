"""Live API client for bidirectional streaming.

Manages a single WebSocket connection to the Gemini Live API (BidiGenerateContent), sends the setup handshake and
client messages, and turns inbound frames into typed events on an `EventRegistry`.

- Docs: https://ai.google.dev/api/multimodal-live

Example:
    ```python
    client = MultimodalLiveClient(api_key="...")
    client.events.add_callback(AudioEvent, lambda event: player.feed(event.data))
    await client.connect({"model": "models/gemini-2.0-flash-exp"})
    await client.send({"text": "Hello"})
    ```
"""

import asyncio
import copy
import json
import logging
import os
from typing import Any, Sequence

import websockets
from websockets import ClientConnection
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, WebSocketException

from .assembler import assemble_model_turn
from .errors import LiveConfigError, LiveConnectionError, NotConnectedError
from .events.registry import EventProvider, EventRegistry
from .messages import (
    BlobInput,
    PartInput,
    build_client_content,
    build_realtime_input,
    build_setup_message,
    build_tool_response,
    decode_frame,
    decode_message,
    describe_media_chunks,
)
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
from .types.messages import (
    IncomingMessage,
    ServerContentMessage,
    SetupCompleteMessage,
    ToolCallCancellationMessage,
    ToolCallMessage,
    ToolResponse,
    UnrecognizedMessage,
)

logger = logging.getLogger(__name__)

DEFAULT_LIVE_URL = (
    "wss://generativelanguage.googleapis.com/ws/"
    "google.ai.generativelanguage.v1alpha.GenerativeService.BidiGenerateContent"
)


class MultimodalLiveClient:
    """Event-emitting client for the Live API.

    Holds at most one transport at a time. Inbound frames are read by a single background task and processed strictly
    in delivery order. Subscribe to events through `events`.
    """

    _websocket: ClientConnection | None

    def __init__(
        self,
        api_key: str | None = None,
        url: str | None = None,
        hooks: list[EventProvider] | None = None,
        client_args: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Google AI API key. If not provided, will use the GOOGLE_API_KEY env var.
            url: Override for the service endpoint.
            hooks: Event providers to register on the client's event registry.
            client_args: Additional keyword arguments for `websockets.connect`.

        Raises:
            ValueError: If no API key is available.
        """
        api_key = api_key or os.environ.get("GOOGLE_API_KEY")
        if not api_key:
            raise ValueError("Google API key is required. Set GOOGLE_API_KEY environment variable or pass api_key.")

        self.endpoint = url or DEFAULT_LIVE_URL
        self.url = f"{self.endpoint}?key={api_key}"
        self.client_args = client_args or {}

        self.events = EventRegistry()
        for hook in hooks or []:
            self.events.add_hook(hook)

        self._websocket = None
        self._config: LiveConfig | None = None
        self._receive_task: asyncio.Task | None = None
        self._connecting = False

        logger.debug("endpoint=<%s> | live client initialized", self.endpoint)

    @property
    def is_connected(self) -> bool:
        """Whether a transport is currently active."""
        return self._websocket is not None

    def get_config(self) -> dict[str, Any]:
        """Get a copy of the session configuration of the active connection.

        Returns:
            The captured configuration, or an empty dict when disconnected.
        """
        return copy.deepcopy(dict(self._config)) if self._config else {}

    async def log(self, type: str, message: Any) -> None:
        """Emit a streaming log entry.

        Args:
            type: Dotted tag naming the transition.
            message: Description or payload.
        """
        await self._emit(LogEvent(log=StreamingLog(type=type, message=message)))

    async def connect(self, config: LiveConfig) -> bool:
        """Open the transport and send the setup handshake.

        Args:
            config: Session configuration. Captured here and never mutated afterwards.

        Returns:
            True once the handshake was sent and the receive task started.

        Raises:
            RuntimeError: If the client is already connected or a connect is in progress.
            LiveConnectionError: If the transport cannot be opened or the handshake cannot be sent.
            LiveConfigError: If no configuration was supplied.
        """
        if self._websocket is not None or self._connecting:
            raise RuntimeError("client already connected or connecting | call disconnect before connecting again")

        captured = copy.deepcopy(config) if config else None

        self._connecting = True
        try:
            websocket = await self._open()

            if not captured:
                await websocket.close()
                raise LiveConfigError("invalid config sent to connect(config)")

            self._websocket = websocket
            self._config = captured
            try:
                await self.log("client.open", "connected to socket")
                await self._send_direct(build_setup_message(captured))
                await self.log("client.send", "setup")
                await self._emit(OpenEvent())
            except ConnectionClosed as e:
                await self.disconnect(websocket)
                raise LiveConnectionError(f'Could not connect to "{self.endpoint}"', url=self.endpoint) from e
            except BaseException:
                # includes cancellation mid-handshake
                await self.disconnect(websocket)
                raise
        finally:
            self._connecting = False

        self._receive_task = asyncio.create_task(self._receive(websocket))
        logger.info("endpoint=<%s> | live connection established", self.endpoint)
        return True

    async def _open(self) -> ClientConnection:
        logger.debug("endpoint=<%s> | live connection starting", self.endpoint)
        try:
            return await websockets.connect(self.url, **self.client_args)
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            logger.error("endpoint=<%s>, error=<%s> | could not open live connection", self.endpoint, e)
            raise LiveConnectionError(f'Could not connect to "{self.endpoint}"', url=self.endpoint) from e

    async def disconnect(self, websocket: ClientConnection | None = None) -> bool:
        """Close the active transport.

        State is cleared before the transport is closed, so sends fail immediately once this is called. No close event
        is emitted for a close requested here.

        Args:
            websocket: Only close if this is the active transport. Closes whatever is active when omitted.

        Returns:
            True if a transport was closed, False if there was nothing (matching) to close.
        """
        active = self._websocket
        if active is None or (websocket is not None and websocket is not active):
            return False

        self._websocket = None
        self._config = None

        receive_task, self._receive_task = self._receive_task, None
        if receive_task is not None and receive_task is not asyncio.current_task():
            receive_task.cancel()

        await active.close()
        logger.debug("live connection closed")
        return True

    async def send(self, parts: PartInput | Sequence[PartInput], turn_complete: bool = True) -> None:
        """Send a user turn.

        Args:
            parts: One part or a sequence of parts.
            turn_complete: Whether the model should respond once this turn is received.

        Raises:
            NotConnectedError: If no transport is active.
        """
        message = build_client_content(parts, turn_complete)
        await self._send_direct(message)
        await self.log("client.send", message)

    async def send_realtime_input(self, chunks: Sequence[BlobInput]) -> None:
        """Stream media chunks.

        Args:
            chunks: Base64 media payloads with MIME types, e.g. {"mimeType": "audio/pcm;rate=16000", "data": "..."}.

        Raises:
            NotConnectedError: If no transport is active.
        """
        message = build_realtime_input(chunks)
        await self._send_direct(message)
        await self.log("client.realtimeInput", describe_media_chunks(message["realtimeInput"]["mediaChunks"]))

    async def send_tool_response(self, tool_response: ToolResponse | Any) -> None:
        """Answer a tool call.

        Args:
            tool_response: Response payload, e.g. {"functionResponses": [{"id": "...", "response": {...}}]}.

        Raises:
            NotConnectedError: If no transport is active.
        """
        message = build_tool_response(tool_response)
        await self._send_direct(message)
        await self.log("client.toolResponse", message)

    async def _send_direct(self, request: Any) -> None:
        """Serialize and write a message to the active transport."""
        websocket = self._websocket
        if websocket is None:
            raise NotConnectedError()

        await websocket.send(json.dumps(request))

    async def _emit(self, event: LiveEvent) -> None:
        await self.events.invoke_callbacks_async(event)

    async def _receive(self, websocket: ClientConnection) -> None:
        """Read frames until the transport ends, then report an unsolicited close."""
        try:
            async for frame in websocket:
                try:
                    await self._handle_frame(frame)
                except Exception:
                    logger.exception("error handling inbound live frame")
        except ConnectionClosedError as e:
            logger.debug("error=<%s> | live connection closed with error", e)

        if self._websocket is not websocket:
            return

        self._websocket = None
        self._config = None
        self._receive_task = None

        reason = websocket.close_reason or ""
        logger.info("code=<%s>, reason=<%s> | live connection closed by server", websocket.close_code, reason)
        try:
            await self.log("server.close", f"disconnected {reason}".rstrip())
            await self._emit(CloseEvent(code=websocket.close_code, reason=reason))
        except Exception:
            logger.exception("error emitting live close event")

    async def _handle_frame(self, frame: str | bytes) -> None:
        if not isinstance(frame, bytes):
            logger.warning("frame_type=<%s> | dropping non-binary live frame", type(frame).__name__)
            return

        try:
            payload = decode_frame(frame)
        except ValueError as e:
            logger.warning("error=<%s> | dropping undecodable live frame", e)
            return

        await self._dispatch(decode_message(payload))

    async def _dispatch(self, message: IncomingMessage) -> None:
        match message:
            case ToolCallMessage(tool_call=tool_call):
                await self.log("server.toolCall", tool_call)
                await self._emit(ToolCallEvent(tool_call=tool_call))

            case ToolCallCancellationMessage(tool_call_cancellation=cancellation):
                await self.log("server.cancellation", cancellation)
                await self._emit(ToolCallCancellationEvent(tool_call_cancellation=cancellation))

            case SetupCompleteMessage():
                await self.log("server.send", "setupComplete")
                await self._emit(SetupCompleteEvent())

            case ServerContentMessage():
                await self._handle_server_content(message)

            case UnrecognizedMessage(payload=payload):
                logger.debug("payload_type=<%s> | ignoring unrecognized live message", type(payload).__name__)

    async def _handle_server_content(self, message: ServerContentMessage) -> None:
        # Interruption wins over anything else carried by the same message.
        if message.interrupted:
            await self.log("server.content", "interrupted")
            await self._emit(InterruptedEvent())
            return

        if message.turn_complete:
            await self.log("server.content", "turnComplete")
            await self._emit(TurnCompleteEvent())

        model_turn = message.model_turn
        if model_turn is None:
            return

        turn = assemble_model_turn(model_turn.get("parts") or [])
        for data in turn.audio:
            await self._emit(AudioEvent(data=data))

        content = turn.content
        if content is not None:
            await self.log("server.content", {"modelTurn": {"parts": turn.other_parts}})
            await self._emit(ContentEvent(content=content))
