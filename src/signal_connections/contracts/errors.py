"""
Unsubscribe failures.

A source refusing to unsubscribe is never fatal for the registry. The
failure is logged where it happens and handed back to the caller of bulk
teardown operations as a value, not raised.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..connections.record import Connection

__all__ = ["UnsubscribeFailure"]


@dataclass(slots=True, frozen=True)
class UnsubscribeFailure:
    """One failed unsubscribe call.

    Attributes:
        connection: Record whose subscription could not be removed
        error: Exception raised by the source
    """

    connection: "Connection"
    error: Exception

    def __str__(self) -> str:
        return f"error removing connection {self.connection.describe()}: {self.error}"
