"""Events emitted by the live client.

Each event class is one channel on the `EventRegistry`. Subscribers register against the class and receive the
instance:

```python
def on_audio(event: AudioEvent) -> None:
    player.feed(event.data)

client.events.add_callback(on_audio)
```
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, cast

from .messages import ContentEnvelope, ToolCall, ToolCallCancellation


@dataclass
class LiveEvent:
    """Base class for all live client events."""

    def __post_init__(self) -> None:
        """Disallow writes once the event is constructed."""
        super().__setattr__("_disallow_writes", True)

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent setting attributes on events.

        Raises:
            AttributeError: Always raised once the event is constructed.
        """
        if not hasattr(self, "_disallow_writes"):
            return super().__setattr__(name, value)

        raise AttributeError(f"Property {name} is not writable")


@dataclass
class StreamingLog:
    """Diagnostic record of a significant client transition.

    Attributes:
        type: Dotted tag naming the transition, e.g. "client.send" or "server.content".
        message: Human readable string or the payload involved.
        date: When the transition happened.
    """

    type: str
    message: Any
    date: datetime = field(default_factory=datetime.now)


@dataclass
class OpenEvent(LiveEvent):
    """Transport opened and the setup handshake was sent."""

    pass


@dataclass
class CloseEvent(LiveEvent):
    """Transport closed without the client asking for it.

    Attributes:
        code: WebSocket close code, if one was received.
        reason: WebSocket close reason.
    """

    code: int | None = None
    reason: str = ""


@dataclass
class LogEvent(LiveEvent):
    """A diagnostic log entry.

    Attributes:
        log: The streaming log entry.
    """

    log: StreamingLog


@dataclass
class AudioEvent(LiveEvent):
    """One decoded PCM audio buffer from the model.

    Attributes:
        data: Raw PCM bytes.
    """

    data: bytes


@dataclass
class ContentEvent(LiveEvent):
    """Model turn content, including any audio parts.

    Attributes:
        content: Envelope holding every part of the model turn in original order.
    """

    content: ContentEnvelope

    @property
    def text(self) -> str:
        """Concatenated text of the text parts in this turn."""
        parts = self.content["modelTurn"]["parts"]
        return "".join(cast(str, part["text"]) for part in parts if "text" in part)


@dataclass
class InterruptedEvent(LiveEvent):
    """Model generation was interrupted by client input."""

    pass


@dataclass
class SetupCompleteEvent(LiveEvent):
    """Server acknowledged the setup handshake."""

    pass


@dataclass
class TurnCompleteEvent(LiveEvent):
    """Model finished its turn."""

    pass


@dataclass
class ToolCallEvent(LiveEvent):
    """Server requested tool execution.

    Attributes:
        tool_call: Function calls to execute.
    """

    tool_call: ToolCall


@dataclass
class ToolCallCancellationEvent(LiveEvent):
    """Server cancelled previously requested tool calls.

    Attributes:
        tool_call_cancellation: Ids of the cancelled calls.
    """

    tool_call_cancellation: ToolCallCancellation
