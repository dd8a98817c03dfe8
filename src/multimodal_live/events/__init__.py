"""Typed event bus for the live client.

Example Usage:
    ```python
    from multimodal_live.events import EventProvider, EventRegistry
    from multimodal_live.types import AudioEvent, TurnCompleteEvent

    class Playback(EventProvider):
        def register_hooks(self, registry: EventRegistry) -> None:
            registry.add_callback(AudioEvent, self.on_audio)
            registry.add_callback(TurnCompleteEvent, self.on_turn_complete)
    ```
"""

from .registry import EventCallback, EventProvider, EventRegistry

__all__ = [
    "EventCallback",
    "EventProvider",
    "EventRegistry",
]
