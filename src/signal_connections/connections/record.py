"""Connection record - one tracked subscription on one source."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

__all__ = ["Connection"]


@dataclass(slots=True, eq=False)
class Connection:
    """Binding between a source and one of its subscriptions.

    Records compare by identity: two connections with the same id on the
    same source are still different records.

    Attributes:
        source: Emitting object (not owned, only observed)
        subscription_id: Opaque id returned by source.subscribe()
        event: Event name, or None for adopted subscriptions
        destroy_id: Id of the destroy watch, None if no watch is wired
    """

    source: Any
    subscription_id: Hashable
    event: str | None = None
    destroy_id: Hashable | None = None

    @property
    def watched(self) -> bool:
        """True if the record removes itself when the source is destroyed."""
        return self.destroy_id is not None

    def describe(self) -> str:
        event = self.event or "?"
        return f"{type(self.source).__name__}:{event}#{self.subscription_id}"
