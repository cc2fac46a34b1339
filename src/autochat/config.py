"""Configuration for autochat.

Centralizes fixed texts, protocol constants and the environment-driven
settings used by the client, the session and the CLI.
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


# Conversation texts
PLACEHOLDER_TEXT = "●●●"  # Thinking indicator shown until the reply arrives
FALLBACK_ANSWER = "No response available."
APOLOGY_TEXT = "Sorry, something went wrong. Please try again."
ERROR_BANNER_TEXT = "Failed to get response. Please try again."

# Streaming configuration
DEFAULT_THROTTLE_INTERVAL_MS = 50  # Minimum spacing between non-final emissions
STREAMING_CONTENT_TYPES = ("text/event-stream", "text/plain")

# Endpoint defaults
DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_API_PATH = "/api/chat"
DEFAULT_SESSION_FILE = Path.home() / ".autochat" / "session.json"


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_float(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _env_bool(name: str, fallback: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return fallback
    return raw.strip().lower() not in ("0", "false", "no", "off")


class Settings(BaseModel):
    """Runtime settings with environment fallbacks."""

    base_url: str = Field(default_factory=lambda: os.getenv("AUTOCHAT_BASE_URL", DEFAULT_BASE_URL))
    api_path: str = Field(default_factory=lambda: os.getenv("AUTOCHAT_API_PATH", DEFAULT_API_PATH))
    throttle_interval_ms: int = Field(
        default_factory=lambda: _env_int("AUTOCHAT_THROTTLE_MS", DEFAULT_THROTTLE_INTERVAL_MS),
        ge=0,
    )
    request_timeout: float | None = Field(
        default_factory=lambda: _env_float("AUTOCHAT_REQUEST_TIMEOUT"),
        description="Seconds before a request is abandoned; None waits indefinitely",
    )
    render_markdown: bool = Field(default_factory=lambda: _env_bool("AUTOCHAT_RENDER_MARKDOWN", True))
    session_file: Path = Field(
        default_factory=lambda: Path(os.getenv("AUTOCHAT_SESSION_FILE", str(DEFAULT_SESSION_FILE)))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("AUTOCHAT_LOG_LEVEL", "WARNING"))

    @property
    def endpoint(self) -> str:
        """Full URL of the chat endpoint."""
        return self.base_url.rstrip("/") + "/" + self.api_path.lstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
