"""
Event Source Protocols - Contracts for objects that emit signals.

The registry never dispatches events itself. It only needs to subscribe
handlers to a source, unsubscribe them later, and (optionally) learn
whether the source announces its own destruction.

Source kinds:
- Untyped sources: anything with subscribe/unsubscribe. Assumed to emit
  the destroy event.
- Typed sources: additionally answer supports_event(). The destroy watch
  is only wired when they report the destroy event.
"""

from collections.abc import Callable, Hashable
from typing import Any, Protocol, runtime_checkable

__all__ = ["EventSource", "TypedEventSource", "SignalHandler"]

SignalHandler = Callable[..., Any]


@runtime_checkable
class EventSource(Protocol):
    """Subscribe/unsubscribe contract.

    Example:
        class Button:
            def subscribe(self, event: str, handler: SignalHandler) -> int:
                self._next_id += 1
                self._handlers[self._next_id] = (event, handler)
                return self._next_id

            def unsubscribe(self, subscription_id: int) -> None:
                del self._handlers[subscription_id]
    """

    def subscribe(self, event: str, handler: SignalHandler) -> Hashable:
        """Attach handler to event. Returns an opaque subscription id."""
        ...

    def unsubscribe(self, subscription_id: Hashable) -> None:
        """Detach a subscription. May raise if the id is unknown."""
        ...


@runtime_checkable
class TypedEventSource(EventSource, Protocol):
    """Event source that can report which events it emits."""

    def supports_event(self, event: str) -> bool:
        """True if the source emits the named event."""
        ...
