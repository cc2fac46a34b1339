"""In-memory conversation for a single session.

Messages live only as long as the session; nothing is persisted.
"""

from collections.abc import Callable, Sequence

from .base import ConversationSink
from .models import Message, Role, now_millis

ChangeListener = Callable[[Sequence[Message]], None]


class InMemoryConversation(ConversationSink):
    """Ordered list of messages owned by the orchestrator.

    Keeps the placeholder invariant: at most one pending message exists,
    and it is always the last one. Appending a real message while a
    placeholder is trailing retires the placeholder first.
    """

    def __init__(self, on_change: ChangeListener | None = None):
        self._messages: list[Message] = []
        self._on_change = on_change

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the conversation."""
        return tuple(self._messages)

    @property
    def on_change(self) -> ChangeListener | None:
        """Listener called with a snapshot after every mutation."""
        return self._on_change

    @on_change.setter
    def on_change(self, listener: ChangeListener | None) -> None:
        self._on_change = listener

    @property
    def has_placeholder(self) -> bool:
        """Whether the last message is a pending placeholder."""
        return bool(self._messages) and self._messages[-1].pending

    def history(self) -> list[Message]:
        """Messages to send as context: everything except the placeholder."""
        return [m for m in self._messages if not m.pending]

    def append(self, message: Message) -> None:
        if message.pending:
            if self.has_placeholder:
                raise ValueError("Conversation already has a pending placeholder")
        elif self.has_placeholder:
            self._messages.pop()
        self._messages.append(message)
        self._notify()

    def replace_trailing(self, content: str) -> None:
        if not self._messages or self._messages[-1].role is not Role.ASSISTANT:
            raise LookupError("No trailing assistant message to replace")
        self._messages[-1] = Message(
            role=Role.ASSISTANT,
            content=content,
            timestamp=now_millis(),
        )
        self._notify()

    def clear(self) -> None:
        self._messages.clear()
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.messages)

    def __len__(self) -> int:
        return len(self._messages)
