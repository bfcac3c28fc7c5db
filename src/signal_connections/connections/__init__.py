"""
Connections - Subscription tracking with automatic cleanup.

Example:
    from signal_connections.connections import Connections

    connections = Connections()
    connections.connect(window, "size-changed", on_resize)
    ...
    connections.disconnect_all()
"""

from .record import Connection
from .registry import Connections

__all__ = [
    "Connection",
    "Connections",
]
