"""
autochat: the engine of an embeddable chat widget.

Sends user text to a chat endpoint and turns streamed or whole-body
replies into conversation state, with a small safe markup renderer.
Each module hides one design decision:

- markup: how reply text becomes safe HTML
- streaming: how a byte stream becomes throttled text snapshots
- client: how requests are sent and responses routed
- conversation: how messages are stored and replaced
- session: how a request/response cycle is orchestrated
"""

__version__ = "0.1.0"

from .client import ChatClient, DispatchMode, DispatchResult, ResponseDispatcher
from .conversation import ConversationSink, InMemoryConversation, Message, Role
from .errors import AutoChatError, ChatApiError, DecodeAnomaly, StreamReadError
from .markup import render_message, transform
from .session import ChatSession, SessionIdStore, generate_session_id
from .streaming import StreamConsumer, StreamResult

__all__ = [
    "AutoChatError",
    "ChatApiError",
    "ChatClient",
    "ChatSession",
    "ConversationSink",
    "DecodeAnomaly",
    "DispatchMode",
    "DispatchResult",
    "InMemoryConversation",
    "Message",
    "ResponseDispatcher",
    "Role",
    "SessionIdStore",
    "StreamConsumer",
    "StreamReadError",
    "StreamResult",
    "generate_session_id",
    "render_message",
    "transform",
]
