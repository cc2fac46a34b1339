"""Persistent session identifier.

The session id is an opaque correlation token sent with every request.
It is created once per storage location and reused afterwards; its
format is never validated.
"""

import json
import logging
from pathlib import Path
from uuid import uuid4

logger = logging.getLogger(__name__)

SESSION_KEY = "sessionId"


def generate_session_id() -> str:
    """Create a new random session id."""
    return str(uuid4())


class SessionIdStore:
    """JSON file holding the session id between runs."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        """Read the stored id, or None if missing or unreadable."""
        if not self._path.is_file():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return None
        value = data.get(SESSION_KEY) if isinstance(data, dict) else None
        return value if isinstance(value, str) and value else None

    def save(self, session_id: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps({SESSION_KEY: session_id}), encoding="utf-8")
        tmp.replace(self._path)

    def load_or_create(self) -> str:
        """Return the stored id, creating and persisting one if absent."""
        session_id = self.load()
        if session_id is None:
            session_id = generate_session_id()
            self.save(session_id)
            logger.info("Created session id %s", session_id)
        return session_id

    def reset(self) -> str:
        """Replace the stored id with a fresh one."""
        session_id = generate_session_id()
        self.save(session_id)
        return session_id
