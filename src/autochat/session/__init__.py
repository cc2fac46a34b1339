"""Session module for autochat.

Provides the chat orchestrator and the persisted session identifier.
"""

from .chat import ChatSession
from .identity import SessionIdStore, generate_session_id

__all__ = [
    "ChatSession",
    "SessionIdStore",
    "generate_session_id",
]
