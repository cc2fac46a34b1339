"""Client module for autochat: request transport and response dispatch."""

from .dispatcher import DispatchMode, DispatchResult, ResponseDispatcher, is_streaming_content_type
from .http import ChatClient, build_payload

__all__ = [
    "ChatClient",
    "DispatchMode",
    "DispatchResult",
    "ResponseDispatcher",
    "build_payload",
    "is_streaming_content_type",
]
