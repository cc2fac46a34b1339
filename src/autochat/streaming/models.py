"""Data structures for stream consumption."""

from dataclasses import dataclass
from enum import Enum

from ..errors import DecodeAnomaly


class StreamPhase(str, Enum):
    """Lifecycle of one response body."""

    IDLE = "idle"
    RECEIVING = "receiving"
    DRAINING = "draining"
    DONE = "done"


@dataclass
class StreamState:
    """Mutable state owned by a consumer for the duration of one request."""

    text: str = ""
    chunks: int = 0
    bytes_received: int = 0
    emissions: int = 0
    last_emit: float | None = None  # Clock reading (ms) of the last emission
    phase: StreamPhase = StreamPhase.IDLE


@dataclass(frozen=True)
class StreamResult:
    """Outcome of consuming a stream.

    ``text`` always equals the last value handed to the sink.
    """

    text: str
    chunks: int
    bytes_received: int
    emissions: int
    anomaly: DecodeAnomaly | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True when the stream ended normally."""
        return self.error is None
