"""
Signal Connections - Registry for signal subscriptions on short-lived objects.

Tracks handlers subscribed to event-emitting sources and guarantees they
are torn down, either on demand or when the source announces its destruction.
"""

__version__ = "1.0.0"

from .config import RegistryConfig, config
from .connections import Connection, Connections
from .contracts import EventSource, TypedEventSource, UnsubscribeFailure
from .logging import configure_logging

__all__ = [
    "__version__",
    "Connection",
    "Connections",
    "EventSource",
    "RegistryConfig",
    "TypedEventSource",
    "UnsubscribeFailure",
    "config",
    "configure_logging",
]
