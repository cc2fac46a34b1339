"""Routing of chat responses into the conversation.

Hides the decision between streamed and whole-body replies and how each
one ends up in the conversation.
"""

import logging
from dataclasses import dataclass
from enum import Enum

import httpx

from ..config import DEFAULT_THROTTLE_INTERVAL_MS, FALLBACK_ANSWER, STREAMING_CONTENT_TYPES
from ..conversation import ConversationSink, Message
from ..errors import ChatApiError, DecodeAnomaly, StreamReadError
from ..streaming import StreamConsumer
from ..streaming.consumer import Clock

logger = logging.getLogger(__name__)


class DispatchMode(str, Enum):
    """How a reply was delivered."""

    STREAMING = "streaming"
    WHOLE_BODY = "whole_body"


@dataclass(frozen=True)
class DispatchResult:
    """Diagnostics for one dispatched response."""

    mode: DispatchMode
    content: str
    anomaly: DecodeAnomaly | None = None


def is_streaming_content_type(content_type: str | None) -> bool:
    """Check whether a Content-Type header announces a streamed reply."""
    if not content_type:
        return False
    lowered = content_type.lower()
    return any(kind in lowered for kind in STREAMING_CONTENT_TYPES)


class ResponseDispatcher:
    """Feeds one chat response into a conversation.

    Streamed replies overwrite the trailing placeholder as text arrives;
    whole-body replies are appended as a new assistant message.
    """

    def __init__(
        self,
        conversation: ConversationSink,
        throttle_interval: float = DEFAULT_THROTTLE_INTERVAL_MS,
        clock: Clock | None = None,
    ):
        self._conversation = conversation
        self._throttle_interval = throttle_interval
        self._clock = clock

    async def dispatch(self, response: httpx.Response) -> DispatchResult:
        """Write the reply carried by response into the conversation.

        Args:
            response: Response whose body has not been read yet (or a
                fully buffered one)

        Returns:
            DispatchResult describing what was written

        Raises:
            ChatApiError: If the status code is not 2xx
            StreamReadError: If a streamed body broke off; the partial
                text is already in the conversation
            ValueError: If a whole-body reply is not valid JSON
        """
        if not response.is_success:
            raise ChatApiError(response.status_code)

        content_type = response.headers.get("content-type")
        logger.debug("Response %d, content-type %s", response.status_code, content_type)

        if is_streaming_content_type(content_type):
            return await self._dispatch_stream(response)
        return await self._dispatch_body(response)

    async def _dispatch_stream(self, response: httpx.Response) -> DispatchResult:
        logger.info("Streaming reply")
        consumer = StreamConsumer(
            response.aiter_bytes(),
            sink=self._conversation.replace_trailing,
            throttle_interval=self._throttle_interval,
            clock=self._clock,
        )
        result = await consumer.consume()

        if result.error is not None:
            raise StreamReadError(result.text, result.chunks) from result.error

        logger.info(
            "Stream finished: %d chunks, %d characters", result.chunks, len(result.text)
        )
        return DispatchResult(
            mode=DispatchMode.STREAMING,
            content=result.text,
            anomaly=result.anomaly,
        )

    async def _dispatch_body(self, response: httpx.Response) -> DispatchResult:
        logger.info("Whole-body reply")
        await response.aread()
        data = response.json()

        answer = data.get("answer") if isinstance(data, dict) else None
        content = FALLBACK_ANSWER if answer is None else str(answer)
        if answer is None:
            logger.warning("Reply has no 'answer' field, using fallback text")

        self._conversation.append(Message.assistant(content))
        return DispatchResult(mode=DispatchMode.WHOLE_BODY, content=content)
