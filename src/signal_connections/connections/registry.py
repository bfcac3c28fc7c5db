"""
Connections Registry - Tracks signal subscriptions and tears them down.

Every subscription made through the registry (or adopted by it) is kept
as a Connection record until exactly one of these happens:
- disconnect(id): explicit removal of one subscription
- disconnect_all_for(source): removal of everything on one source
- disconnect_all(): bulk teardown
- the source emits its destroy event

Unsubscribe failures are logged and never propagate. Bulk operations
always finish processing every record.
"""

from collections.abc import Hashable, Iterator
from typing import Any

import structlog

from ..config import config
from ..contracts import EventSource, SignalHandler, TypedEventSource, UnsubscribeFailure
from .record import Connection

__all__ = ["Connections"]

logger = structlog.get_logger(__name__)


class Connections:
    """Registry of signal connections with automatic cleanup on destroy.

    Example:
        connections = Connections()

        connections.connect(button, "clicked", on_click)
        handler_id = connections.connect(settings, "changed", on_change)

        # Later, drop a single subscription
        connections.disconnect(handler_id)

        # Or everything at once
        connections.disconnect_all()

    The logger is injected so embedding applications decide where
    diagnostics go. It must accept structlog-style keyword context.
    """

    __slots__ = ("_records", "_destroy_event", "_logger")

    def __init__(
        self,
        *,
        logger: Any = None,
        destroy_event: str | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            logger: structlog logger (defaults to module logger)
            destroy_event: Event announcing source teardown (defaults to config)
        """
        self._records: list[Connection] = []
        self._destroy_event = destroy_event or config.destroy_event
        self._logger = logger if logger is not None else _default_logger()

    # ─────────────────────────────────────────────────────────────────
    # Registration
    # ─────────────────────────────────────────────────────────────────

    def connect(self, source: EventSource, event: str, handler: SignalHandler) -> Hashable:
        """Subscribe handler to event on source and track the subscription.

        Args:
            source: Object emitting the event
            event: Event name
            handler: Callable invoked by the source

        Returns:
            Subscription id, usable with disconnect()
        """
        subscription_id = source.subscribe(event, handler)
        self.register(source, subscription_id, event)
        return subscription_id

    def register(
        self,
        source: Any,
        subscription_id: Hashable,
        event: str | None = None,
    ) -> Connection:
        """Track an existing subscription.

        Also watches the source's destroy event when the source can emit it,
        so the record removes itself when the source goes away.

        Args:
            source: Object the subscription was made on
            subscription_id: Id returned by the source's subscribe
            event: Event name, if known (used in diagnostics only)

        Returns:
            The new record
        """
        connection = Connection(source, subscription_id, event)
        self._records.append(connection)

        self._watch_destroy(connection)

        self._logger.debug(
            "connection_registered",
            connection=connection.describe(),
            watched=connection.watched,
        )
        return connection

    def _emits_destroy(self, source: Any) -> bool:
        """Check whether subscribing to the destroy event is safe."""
        if not isinstance(source, EventSource):
            return False
        if isinstance(source, TypedEventSource):
            return bool(source.supports_event(self._destroy_event))
        # Untyped sources are trusted to emit it
        return True

    def _watch_destroy(self, connection: Connection) -> None:
        """Wire the destroy watch. Failures leave the record unwatched."""

        def on_destroy(*_args: Any) -> None:
            self._source_destroyed(connection)

        try:
            if self._emits_destroy(connection.source):
                connection.destroy_id = connection.source.subscribe(
                    self._destroy_event, on_destroy
                )
        except Exception as e:
            self._logger.warning(
                "destroy_watch_failed",
                connection=connection.describe(),
                destroy_event=self._destroy_event,
                error=str(e),
            )

    def _source_destroyed(self, connection: Connection) -> None:
        # Already torn down by another path
        if not self._discard(connection):
            return
        self._release(connection)
        self._logger.debug(
            "connection_removed",
            connection=connection.describe(),
            reason="source_destroyed",
        )

    # ─────────────────────────────────────────────────────────────────
    # Teardown
    # ─────────────────────────────────────────────────────────────────

    def disconnect(
        self,
        subscription_id: Hashable,
        source: Any = None,
    ) -> Connection | None:
        """Disconnect the first connection with the given id.

        Ids are only guaranteed unique per source. Pass the source to match
        on (source, id) instead of the id alone.

        The record is removed even if the source fails to unsubscribe.

        Args:
            subscription_id: Id returned by connect()
            source: Restrict the match to this source

        Returns:
            The removed record, or None if nothing matched
        """
        connection = next(
            (
                c
                for c in self._records
                if c.subscription_id == subscription_id
                and (source is None or c.source is source)
            ),
            None,
        )
        if connection is None:
            return None

        self._discard(connection)
        self._release(connection)
        self._logger.debug(
            "connection_removed",
            connection=connection.describe(),
            reason="disconnect",
        )
        return connection

    def disconnect_all_for(self, source: Any) -> list[UnsubscribeFailure]:
        """Disconnect every connection made on source.

        Other sources' connections are untouched.

        Returns:
            Failed unsubscribe calls (already logged)
        """
        failures: list[UnsubscribeFailure] = []

        for connection in self.connections_for(source):
            # A destroy handler may have removed it while we were iterating
            if not self._discard(connection):
                continue
            failure = self._release(connection)
            if failure is not None:
                failures.append(failure)

        self._logger.debug(
            "connections_removed",
            source=type(source).__name__,
            failed=len(failures),
            reason="disconnect_all_for",
        )
        return failures

    def disconnect_all(self) -> list[UnsubscribeFailure]:
        """Disconnect every tracked connection.

        The registry is emptied before any unsubscribe runs, so it is
        empty afterwards no matter how many sources fail.

        Returns:
            Failed unsubscribe calls (already logged)
        """
        records, self._records = self._records, []
        failures = [f for f in map(self._release, records) if f is not None]

        self._logger.debug(
            "connections_removed",
            total=len(records),
            failed=len(failures),
            reason="disconnect_all",
        )
        return failures

    def _discard(self, connection: Connection) -> bool:
        """Remove a record by identity. Returns False if it was not tracked."""
        try:
            self._records.remove(connection)
        except ValueError:
            return False
        return True

    def _release(self, connection: Connection) -> UnsubscribeFailure | None:
        """Unsubscribe a record's subscription and its destroy watch."""
        failure = None

        try:
            connection.source.unsubscribe(connection.subscription_id)
        except Exception as e:
            failure = UnsubscribeFailure(connection, e)
            self._logger.error(
                "unsubscribe_failed",
                connection=connection.describe(),
                source=type(connection.source).__name__,
                signal=connection.event,
                subscription_id=connection.subscription_id,
                error=str(e),
            )

        destroy_id, connection.destroy_id = connection.destroy_id, None
        if destroy_id is not None:
            try:
                connection.source.unsubscribe(destroy_id)
            except Exception as e:
                self._logger.warning(
                    "destroy_watch_release_failed",
                    connection=connection.describe(),
                    destroy_id=destroy_id,
                    error=str(e),
                )

        return failure

    # ─────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────

    @property
    def destroy_event(self) -> str:
        """Event name watched for source teardown."""
        return self._destroy_event

    def connections_for(self, source: Any) -> list[Connection]:
        """Get all connections made on source."""
        return [c for c in self._records if c.source is source]

    def status(self) -> dict[str, Any]:
        """Summary of tracked connections."""
        return {
            "total": len(self._records),
            "sources": len({id(c.source) for c in self._records}),
            "watched": sum(1 for c in self._records if c.watched),
            "destroy_event": self._destroy_event,
        }

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Connection]:
        return iter(list(self._records))

    def __contains__(self, connection: object) -> bool:
        return any(c is connection for c in self._records)

    def __enter__(self) -> "Connections":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.disconnect_all()

    def __repr__(self) -> str:
        return f"<Connections total={len(self._records)} destroy_event={self._destroy_event!r}>"


def _default_logger() -> Any:
    return logger.bind(component="connections")
