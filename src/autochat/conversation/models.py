"""Data models for the conversation.

These models define what a chat message looks like, independent of how
the presentation layer stores or draws it.
"""

import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import PLACEHOLDER_TEXT


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single entry in the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who wrote the message")
    content: str = Field(description="Message text")
    timestamp: int = Field(default_factory=now_millis, description="Creation time in epoch milliseconds")
    pending: bool = Field(
        default=False,
        description="True for the thinking placeholder awaiting the reply",
    )

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    @classmethod
    def placeholder(cls) -> "Message":
        """Create the thinking indicator shown until the reply arrives."""
        return cls(role=Role.ASSISTANT, content=PLACEHOLDER_TEXT, pending=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the outbound request history."""
        return self.model_dump(mode="json", exclude={"pending"})
