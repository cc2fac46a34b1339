"""Pytest configuration and shared fixtures."""
from collections.abc import AsyncIterator, Iterable

import httpx
import pytest

from autochat.conversation import InMemoryConversation, Message


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, millis: float) -> None:
        self.now += millis


async def byte_source(
    chunks: Iterable[bytes],
    clock: FakeClock | None = None,
    step: float = 0.0,
    fail_with: Exception | None = None,
) -> AsyncIterator[bytes]:
    """Yield chunks, advancing the clock before each one, then optionally fail."""
    for chunk in chunks:
        if clock is not None:
            clock.advance(step)
        yield chunk
    if fail_with is not None:
        raise fail_with


class ChunkStream(httpx.AsyncByteStream):
    """Response body delivered in fixed chunks, optionally breaking off."""

    def __init__(self, chunks: Iterable[bytes], fail_with: Exception | None = None):
        self._chunks = list(chunks)
        self._fail_with = fail_with
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._fail_with is not None:
            raise self._fail_with

    async def aclose(self) -> None:
        self.closed = True


def split_bytes(data: bytes, size: int) -> list[bytes]:
    """Cut data into pieces of at most size bytes."""
    return [data[i:i + size] for i in range(0, len(data), size)]


@pytest.fixture
def clock():
    """Return a fake millisecond clock."""
    return FakeClock()


@pytest.fixture
def pending_conversation():
    """Return a conversation awaiting a reply: user message plus placeholder."""
    conversation = InMemoryConversation()
    conversation.append(Message.user("hello"))
    conversation.append(Message.placeholder())
    return conversation


def streaming_response(
    chunks: Iterable[bytes],
    content_type: str = "text/plain; charset=utf-8",
    fail_with: Exception | None = None,
) -> httpx.Response:
    """Build a 200 response whose body arrives in chunks."""
    return httpx.Response(
        200,
        headers={"content-type": content_type},
        stream=ChunkStream(chunks, fail_with=fail_with),
    )
