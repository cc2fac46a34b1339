"""Chat session orchestration.

Hides the request/response cycle from the presentation layer: the caller
submits text and renders whatever the conversation holds when notified.
"""

import logging
from collections.abc import Callable, Sequence

from ..client import ChatClient, DispatchResult
from ..config import APOLOGY_TEXT, ERROR_BANNER_TEXT
from ..conversation import InMemoryConversation, Message

logger = logging.getLogger(__name__)

UpdateListener = Callable[[Sequence[Message]], None]


class ChatSession:
    """One conversation with the chat endpoint.

    Only one message can be in flight at a time; further sends are rejected
    until it completes. Every failure is reported the same way to the user:
    an error banner plus one apology message.
    """

    def __init__(
        self,
        client: ChatClient,
        conversation: InMemoryConversation | None = None,
        session_id: str | None = None,
        on_update: UpdateListener | None = None,
    ):
        """Initialize the session.

        Args:
            client: Transport used to reach the chat endpoint
            conversation: Existing conversation to continue (a new empty one
                if omitted)
            session_id: Correlation token; sends are rejected while None
            on_update: Called with the message list after every change.
                When given, it replaces the listener of a supplied
                conversation; otherwise that listener is kept.
        """
        self._client = client
        self._session_id = session_id
        if conversation is None:
            conversation = InMemoryConversation()
        if on_update is not None:
            conversation.on_change = on_update
        self._conversation = conversation
        self._is_sending = False
        self._error: str | None = None
        self._last_result: DispatchResult | None = None

    @property
    def session_id(self) -> str | None:
        return self._session_id

    @property
    def conversation(self) -> InMemoryConversation:
        return self._conversation

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._conversation.messages

    @property
    def is_sending(self) -> bool:
        return self._is_sending

    @property
    def error(self) -> str | None:
        """User-visible error banner text, or None."""
        return self._error

    @property
    def last_result(self) -> DispatchResult | None:
        """Diagnostics of the last successful reply."""
        return self._last_result

    async def send_message(self, text: str) -> bool:
        """Send a user message and collect the reply.

        Args:
            text: Raw input; surrounding whitespace is dropped

        Returns:
            False if the send was rejected (empty text, no session id or a
            request already in flight), True once a request was attempted
        """
        message = text.strip()
        if not message or not self._session_id or self._is_sending:
            logger.debug("Send rejected (empty=%s, in_flight=%s)", not message, self._is_sending)
            return False

        self._is_sending = True
        self._error = None
        try:
            self._conversation.append(Message.user(message))
            history = self._conversation.history()
            self._conversation.append(Message.placeholder())

            try:
                self._last_result = await self._client.send(
                    self._conversation, message, self._session_id, history
                )
            except Exception as e:
                logger.error("Chat request failed (%s): %s", type(e).__name__, e, exc_info=True)
                self._error = ERROR_BANNER_TEXT
                self._conversation.append(Message.assistant(APOLOGY_TEXT))
        finally:
            self._is_sending = False

        return True
