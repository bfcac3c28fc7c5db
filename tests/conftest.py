"""Shared test fixtures."""

import pytest

from signal_connections import Connections


class FakeSource:
    """Untyped event source: subscribe/unsubscribe, no event introspection.

    Ids are counted per source, so two sources hand out the same ids.
    """

    def __init__(self, fail_unsubscribe: bool = False):
        self._next_id = 0
        self.handlers: dict[int, tuple[str, object]] = {}
        self.unsubscribed: list[int] = []
        self.fail_unsubscribe = fail_unsubscribe

    def subscribe(self, event, handler):
        self._next_id += 1
        self.handlers[self._next_id] = (event, handler)
        return self._next_id

    def unsubscribe(self, subscription_id):
        self.unsubscribed.append(subscription_id)
        if self.fail_unsubscribe:
            raise RuntimeError(f"cannot unsubscribe {subscription_id}")
        if subscription_id not in self.handlers:
            raise KeyError(f"no handler with id {subscription_id}")
        del self.handlers[subscription_id]

    def emit(self, event, *args):
        for name, handler in list(self.handlers.values()):
            if name == event:
                handler(self, *args)

    def destroy(self):
        self.emit("destroy")

    def events(self) -> list[str]:
        return [name for name, _ in self.handlers.values()]


class TypedSource(FakeSource):
    """Event source that reports which events it emits."""

    def __init__(self, events=("destroy",), **kwargs):
        super().__init__(**kwargs)
        self.supported = set(events)

    def supports_event(self, event):
        return event in self.supported


class RecordingLogger:
    """Minimal structlog-style logger that keeps every call."""

    def __init__(self):
        self.calls: list[tuple[str, str, dict]] = []

    def _record(self, level, event, **kw):
        self.calls.append((level, event, kw))

    def debug(self, event, **kw):
        self._record("debug", event, **kw)

    def warning(self, event, **kw):
        self._record("warning", event, **kw)

    def error(self, event, **kw):
        self._record("error", event, **kw)

    def events(self, level: str) -> list[str]:
        return [event for lvl, event, _ in self.calls if lvl == level]


def noop(*args):
    pass


@pytest.fixture
def connections():
    """Fresh registry per test."""
    return Connections()


@pytest.fixture
def source():
    """Untyped source (destroy assumed)."""
    return FakeSource()


@pytest.fixture
def plain_source():
    """Typed source without a destroy event."""
    return TypedSource(events=("click", "change"))


@pytest.fixture
def failing_source():
    """Source whose unsubscribe always raises."""
    return TypedSource(events=("click",), fail_unsubscribe=True)


@pytest.fixture
def recording_logger():
    return RecordingLogger()
