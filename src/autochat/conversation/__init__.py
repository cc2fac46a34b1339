"""Conversation module for autochat.

Holds the message model and the append / replace-trailing capability
handed to the response core.
"""

from .base import ConversationSink
from .in_memory import InMemoryConversation
from .models import Message, Role

__all__ = [
    "ConversationSink",
    "InMemoryConversation",
    "Message",
    "Role",
]
