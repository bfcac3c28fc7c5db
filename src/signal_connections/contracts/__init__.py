"""
Contracts (Protocols) for signal connections.

Using Protocol enables structural subtyping - sources need no base class.
"""

from .errors import UnsubscribeFailure
from .source import EventSource, SignalHandler, TypedEventSource

__all__ = [
    "EventSource",
    "SignalHandler",
    "TypedEventSource",
    "UnsubscribeFailure",
]
