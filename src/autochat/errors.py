"""Error taxonomy for autochat.

Hides the distinction between failure kinds from the presentation layer:
every error surfaced to the user collapses into one apology message,
while these types keep the difference available for diagnostics.
"""


class AutoChatError(Exception):
    """Base class for all autochat errors."""


class ChatApiError(AutoChatError):
    """The chat endpoint answered with a non-success status code."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Chat API error: {status}")


class StreamReadError(AutoChatError):
    """Reading the response body failed mid-stream.

    The text decoded before the failure is kept on ``partial_text``;
    it has already been written to the conversation when this is raised.
    """

    def __init__(self, partial_text: str, chunks: int = 0):
        self.partial_text = partial_text
        self.chunks = chunks
        super().__init__(
            f"Stream read failed after {chunks} chunks "
            f"({len(partial_text)} characters received)"
        )


class DecodeAnomaly(AutoChatError):
    """A streaming response ended without delivering a single byte.

    Recorded on the stream result and logged, never raised.
    """

    def __init__(self, message: str = "Stream ended without any content"):
        super().__init__(message)
