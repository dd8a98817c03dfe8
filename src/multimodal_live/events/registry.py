"""Event registry for dispatching live client events to subscribers.

The registry keeps one ordered list of callbacks per event class. Emitting an event calls every callback registered for
that exact class, in registration order. Nothing is buffered: an event emitted while a channel has no subscribers is
dropped.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, Protocol, TypeVar, get_type_hints, overload, runtime_checkable

from ..types.events import LiveEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=LiveEvent, contravariant=True)
"""Generic for adding callbacks - contravariant to allow adding callbacks which take in base classes."""

TInvokeEvent = TypeVar("TInvokeEvent", bound=LiveEvent)
"""Generic for invoking events - non-contravariant to enable returning events."""


@runtime_checkable
class EventProvider(Protocol):
    """Protocol for objects that subscribe several callbacks at once.

    Example:
        ```python
        class PlaybackProvider(EventProvider):
            def register_hooks(self, registry: EventRegistry) -> None:
                registry.add_callback(AudioEvent, self.on_audio)
                registry.add_callback(InterruptedEvent, self.on_interrupted)

        client = MultimodalLiveClient(hooks=[PlaybackProvider()])
        ```
    """

    def register_hooks(self, registry: "EventRegistry", **kwargs: Any) -> None:
        """Register callback functions for specific event types.

        Args:
            registry: The event registry to register callbacks with.
            **kwargs: Additional keyword arguments for future extensibility.
        """
        ...


class EventCallback(Protocol, Generic[TEvent]):
    """Protocol for callback functions that handle live events.

    Callbacks receive a single strongly-typed event argument. They may be plain functions or coroutine functions. Any
    exception they raise propagates to the emitter.
    """

    def __call__(self, event: TEvent) -> None | Awaitable[None]:
        """Handle an event.

        Args:
            event: The strongly-typed event to handle.
        """
        ...


class EventRegistry:
    """Registry mapping event classes to their subscribers."""

    def __init__(self) -> None:
        """Initialize an empty event registry."""
        self._registered_callbacks: dict[type, list[EventCallback]] = {}

    @overload
    def add_callback(self, event_type: EventCallback[TEvent]) -> None: ...

    @overload
    def add_callback(self, event_type: type[TEvent], callback: EventCallback[TEvent]) -> None: ...

    def add_callback(
        self,
        event_type: type[TEvent] | EventCallback[TEvent] | None = None,
        callback: EventCallback[TEvent] | None = None,
    ) -> None:
        """Subscribe a callback to an event class.

        Either pass the class and the callback, or only a callback whose first parameter is annotated with the class:

        ```python
        registry.add_callback(AudioEvent, player.feed_event)

        def on_turn_complete(event: TurnCompleteEvent) -> None: ...
        registry.add_callback(on_turn_complete)
        ```

        Args:
            event_type: The event class, or the callback in the single-argument form.
            callback: The callback to subscribe.

        Raises:
            ValueError: If the arguments do not match either form or the class cannot be read from the annotation.
        """
        if callback is None:
            if event_type is None:
                raise ValueError("callback is required")
            if isinstance(event_type, type) or not callable(event_type):
                raise ValueError("callback is required when event_type is a type")
            event_type, callback = self._infer_event_type(event_type), event_type
        elif event_type is None:
            event_type = self._infer_event_type(callback)
        elif not isinstance(event_type, type):
            raise ValueError("event_type must be a type when callback is provided")

        self._registered_callbacks.setdefault(event_type, []).append(callback)

    def remove_callback(self, event_type: type[TEvent], callback: EventCallback[TEvent]) -> bool:
        """Unsubscribe a callback.

        Args:
            event_type: The class the callback was registered for.
            callback: The callback to remove. Only the earliest registration is removed.

        Returns:
            True if the callback was registered and has been removed, False otherwise.
        """
        callbacks = self._registered_callbacks.get(event_type, [])
        if callback not in callbacks:
            return False

        callbacks.remove(callback)
        if not callbacks:
            del self._registered_callbacks[event_type]
        return True

    @staticmethod
    def _infer_event_type(callback: Callable[..., Any]) -> type[LiveEvent]:
        """Read the event class from the annotation on the callback's first parameter."""
        try:
            first = next(iter(inspect.signature(callback).parameters.values()))
            hint = get_type_hints(callback).get(first.name)
        except (StopIteration, TypeError, ValueError, NameError) as e:
            raise ValueError(f"callback=<{callback}> | cannot infer event type, pass event_type explicitly") from e

        if hint is None:
            raise ValueError(f"parameter=<{first.name}> | cannot infer event type without a type hint")

        if not (isinstance(hint, type) and issubclass(hint, LiveEvent)):
            raise ValueError(f"parameter=<{first.name}>, type=<{hint}> | type hint must be a subclass of LiveEvent")

        return hint

    def add_hook(self, hook: EventProvider) -> None:
        """Register all callbacks from an event provider.

        Args:
            hook: The provider containing callbacks to register.
        """
        hook.register_hooks(self)

    async def invoke_callbacks_async(self, event: TInvokeEvent) -> TInvokeEvent:
        """Invoke all registered callbacks for the given event, awaiting coroutine callbacks.

        Args:
            event: The event to dispatch to registered callbacks.

        Returns:
            The event dispatched to registered callbacks.
        """
        for callback in self.get_callbacks_for(event):
            if inspect.iscoroutinefunction(callback):
                await callback(event)
            else:
                result = callback(event)
                if inspect.isawaitable(result):
                    await result

        return event

    def invoke_callbacks(self, event: TInvokeEvent) -> TInvokeEvent:
        """Invoke all registered callbacks for the given event.

        Args:
            event: The event to dispatch to registered callbacks.

        Returns:
            The event dispatched to registered callbacks.

        Raises:
            RuntimeError: If at least one callback is async.
        """
        callbacks = list(self.get_callbacks_for(event))

        if any(inspect.iscoroutinefunction(callback) for callback in callbacks):
            raise RuntimeError(f"event=<{event}> | use invoke_callbacks_async to invoke async callback")

        for callback in callbacks:
            callback(event)

        return event

    def has_callbacks(self) -> bool:
        """Check if the registry has any registered callbacks.

        Returns:
            True if there are any registered callbacks, False otherwise.
        """
        return bool(self._registered_callbacks)

    def get_callbacks_for(self, event: TEvent) -> Generator[EventCallback[TEvent], None, None]:
        """Get callbacks registered for the given event in registration order.

        The list is copied first so that callbacks may subscribe or unsubscribe while the event is being dispatched.

        Args:
            event: The event to get callbacks for.

        Yields:
            Callback functions registered for this event type.
        """
        yield from list(self._registered_callbacks.get(type(event), []))
