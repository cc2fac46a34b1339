"""HTTP transport for the chat endpoint.

Hides the request format and the httpx client lifecycle. Supports the
async context manager protocol for cleanup:

    async with ChatClient("http://localhost:3000/api/chat") as client:
        await client.send(conversation, "hello", session_id, history)
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ..config import DEFAULT_THROTTLE_INTERVAL_MS, Settings
from ..conversation import ConversationSink, Message
from ..streaming.consumer import Clock
from .dispatcher import DispatchResult, ResponseDispatcher

logger = logging.getLogger(__name__)


def build_payload(message: str, session_id: str, history: Sequence[Message]) -> dict[str, Any]:
    """Build the JSON body of a chat request."""
    return {
        "message": message,
        "sessionId": session_id,
        "history": [m.to_wire() for m in history],
    }


class ChatClient:
    """Sends chat requests and dispatches the responses.

    A single attempt is made per message; there is no retry. Timeouts are
    disabled unless one is given.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float | None = None,
        throttle_interval: float = DEFAULT_THROTTLE_INTERVAL_MS,
        clock: Clock | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the chat client.

        Args:
            endpoint: Full URL of the chat endpoint
            timeout: Seconds before giving up on the server (None waits forever)
            throttle_interval: Minimum milliseconds between streamed updates
            clock: Millisecond clock for throttling (monotonic by default)
            http_client: Optional preconfigured httpx client; the caller keeps
                ownership and must close it
        """
        self._endpoint = endpoint
        self._throttle_interval = throttle_interval
        self._clock = clock
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ChatClient":
        """Create a client configured from settings."""
        return cls(
            endpoint=settings.endpoint,
            timeout=settings.request_timeout,
            throttle_interval=settings.throttle_interval_ms,
            **kwargs,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def send(
        self,
        conversation: ConversationSink,
        message: str,
        session_id: str,
        history: Sequence[Message],
    ) -> DispatchResult:
        """POST a message and write the reply into the conversation.

        Args:
            conversation: Where the reply goes; must end with the placeholder
                for streamed replies
            message: The user's message text
            session_id: Opaque correlation token
            history: Conversation so far, including the new user message

        Returns:
            DispatchResult for the reply

        Raises:
            httpx.HTTPError: On transport failures
            ChatApiError: On non-2xx responses
            StreamReadError: If a streamed reply broke off
            ValueError: If a whole-body reply is not valid JSON
        """
        request = self._client.build_request(
            "POST",
            self._endpoint,
            json=build_payload(message, session_id, history),
            headers={"Content-Type": "application/json"},
        )
        logger.info("POST %s (%d history messages)", self._endpoint, len(history))

        response = await self._client.send(request, stream=True)
        try:
            dispatcher = ResponseDispatcher(
                conversation,
                throttle_interval=self._throttle_interval,
                clock=self._clock,
            )
            return await dispatcher.dispatch(response)
        finally:
            await response.aclose()

    async def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
