"""Streaming module for autochat.

Turns an incrementally delivered response body into throttled text
snapshots with a guaranteed final one.
"""

from .consumer import StreamConsumer, monotonic_millis
from .models import StreamPhase, StreamResult, StreamState

__all__ = [
    "StreamConsumer",
    "StreamPhase",
    "StreamResult",
    "StreamState",
    "monotonic_millis",
]
