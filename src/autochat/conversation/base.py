"""Abstract capability the core uses to write into a conversation.

The core never receives the message list itself. It can only append a
message or replace the content of the trailing assistant message, which
is all a reply needs.
"""

from abc import ABC, abstractmethod

from .models import Message


class ConversationSink(ABC):
    """Write access to a conversation, as granted to the response core."""

    @abstractmethod
    def append(self, message: Message) -> None:
        """Append a message to the end of the conversation."""

    @abstractmethod
    def replace_trailing(self, content: str) -> None:
        """Overwrite the content of the trailing assistant message.

        Raises:
            LookupError: If the conversation does not end with an
                assistant message
        """
