"""Thread-safe mapping of session identifiers to bound storage clients."""

import secrets
import threading
from typing import TYPE_CHECKING, Optional

from s3_explorer.core import get_logger
from s3_explorer.core.exceptions import SessionError, ValidationError

if TYPE_CHECKING:
    from s3_explorer.objectstorage.clients import StorageClient

logger = get_logger(__name__)


class SessionRegistry:
    """Holds exactly one client per session for the life of the process."""

    def __init__(self) -> None:
        self._clients: dict[str, "StorageClient"] = {}
        self._lock = threading.Lock()

    def register(self, client: "StorageClient", session_id: Optional[str] = None) -> str:
        """Store ``client`` and return its session id.

        A random id is generated unless ``session_id`` is given, which is how
        unattended mode pins its well-known id. An explicit id replaces any
        client already bound to it.
        """
        if session_id is not None and not session_id:
            raise ValidationError("Session id must not be empty")

        with self._lock:
            if session_id is None:
                session_id = secrets.token_urlsafe(16)
                while session_id in self._clients:
                    session_id = secrets.token_urlsafe(16)
            self._clients[session_id] = client

        logger.info("Session registered", session_count=len(self))
        return session_id

    def resolve(self, session_id: str) -> "StorageClient":
        with self._lock:
            client = self._clients.get(session_id)
        if client is None:
            raise SessionError(session_id)
        return client

    def remove(self, session_id: str) -> None:
        with self._lock:
            removed = self._clients.pop(session_id, None) is not None
        if removed:
            logger.info("Session removed")

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._clients

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)
