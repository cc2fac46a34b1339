"""Progressive decoding of a streamed reply.

Hides how raw byte chunks become a throttled series of text snapshots:
- incremental decoding across chunk boundaries
- emission throttling against an injectable clock
- the guaranteed final emission when the stream terminates
"""

import codecs
import logging
import time
from collections.abc import AsyncIterable, Callable

from ..config import DEFAULT_THROTTLE_INTERVAL_MS
from ..errors import DecodeAnomaly
from .models import StreamPhase, StreamResult, StreamState

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
TextSink = Callable[[str], None]


def monotonic_millis() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


class StreamConsumer:
    """Consumes one byte stream and feeds a sink with accumulated text.

    Each chunk is decoded and appended to the accumulator. The sink receives
    the whole accumulator (not a delta) at most once per throttle interval,
    and always once more when the stream terminates, so its last value
    reflects every byte received. The throttle is checked only when a chunk
    arrives; there is no timer.

    A read error ends consumption early. The text decoded so far becomes the
    final value and the error is reported on the result, not raised.

    Usage:
        consumer = StreamConsumer(response.aiter_bytes(), sink=print)
        result = await consumer.consume()
    """

    def __init__(
        self,
        source: AsyncIterable[bytes],
        sink: TextSink,
        throttle_interval: float = DEFAULT_THROTTLE_INTERVAL_MS,
        clock: Clock | None = None,
        encoding: str = "utf-8",
    ):
        """Initialize the consumer.

        Args:
            source: Async iterable yielding raw byte chunks
            sink: Called with the full accumulated text on each emission
            throttle_interval: Minimum milliseconds between non-final emissions
            clock: Callable returning the current time in milliseconds
            encoding: Text encoding of the stream
        """
        self._source = source
        self._sink = sink
        self._throttle_interval = throttle_interval
        self._clock = clock or monotonic_millis
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._state = StreamState()

    @property
    def state(self) -> StreamState:
        """Live progress of the stream being consumed."""
        return self._state

    async def consume(self) -> StreamResult:
        """Read the stream to the end and return the final outcome.

        Raises:
            RuntimeError: If this consumer already read its stream
        """
        state = self._state
        if state.phase is not StreamPhase.IDLE:
            raise RuntimeError("Stream has already been consumed")

        iterator = self._source.__aiter__()
        error: Exception | None = None

        while True:
            try:
                chunk = await iterator.__anext__()
            except StopAsyncIteration:
                break
            except Exception as e:
                error = e
                logger.warning(
                    "Stream read failed after %d chunks, keeping %d characters: %s",
                    state.chunks, len(state.text), e,
                )
                break

            if not chunk:
                continue

            state.phase = StreamPhase.RECEIVING
            state.chunks += 1
            state.bytes_received += len(chunk)
            state.text += self._decoder.decode(chunk)
            logger.debug("Chunk %d: %d bytes", state.chunks, len(chunk))

            now = self._clock()
            if state.last_emit is None or now - state.last_emit >= self._throttle_interval:
                self._emit(now)

        if error is None:
            state.phase = StreamPhase.DRAINING

        # Flush bytes held back for an unfinished multi-byte sequence
        state.text += self._decoder.decode(b"", final=True)
        self._emit(self._clock())
        state.phase = StreamPhase.DONE

        anomaly = None
        if state.bytes_received == 0:
            anomaly = DecodeAnomaly()
            logger.warning("Stream ended without any content")

        logger.debug(
            "Stream complete: %d chunks, %d bytes, %d characters, %d emissions",
            state.chunks, state.bytes_received, len(state.text), state.emissions,
        )

        return StreamResult(
            text=state.text,
            chunks=state.chunks,
            bytes_received=state.bytes_received,
            emissions=state.emissions,
            anomaly=anomaly,
            error=error,
        )

    def _emit(self, now: float) -> None:
        self._state.last_emit = now
        self._state.emissions += 1
        self._sink(self._state.text)
