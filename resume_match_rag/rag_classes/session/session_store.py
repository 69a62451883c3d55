"""session_store.py
Thread-safe in-memory map of session id -> Session.
"""
import threading
from typing import Dict, List, Optional

from resume_match_rag.exceptions import SessionNotFoundError
from resume_match_rag.models import Session

from resume_match_rag.rag_classes.vector_index.vector_index import VectorIndex


class SessionStore:
    """
    Owns session lifecycle: created on first resume upload, removed on explicit
    `delete`. Deleting a session also drops its chunks from the VectorIndex.

    Safe for concurrent access across different sessions. Mutations of a single
    Session object are not serialized.
    """

    def __init__(self, vector_index: Optional[VectorIndex] = None):
        self.vector_index = vector_index or VectorIndex()
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(self) -> Session:
        session = Session()
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> Session:
        """
        Raises:
            SessionNotFoundError: If `session_id` is unknown.
        """
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def exists(self, session_id: Optional[str]) -> bool:
        with self._lock:
            return session_id in self._sessions

    def delete(self, session_id: str) -> None:
        """Remove a session and its indexed chunks. Unknown ids are ignored."""
        with self._lock:
            self._sessions.pop(session_id, None)
        self.vector_index.delete(session_id)

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)
