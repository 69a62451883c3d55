"""vector_index.py
Per-session, append-only store of (DocumentChunk, vector) pairs.
"""
import threading
from typing import Dict, List, Optional

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.exceptions import DimensionMismatchError
from resume_match_rag.models import DocumentChunk
from resume_match_rag.rag_classes.vector_index.search_strategy import (
    BruteForceCosineSearch,
    SearchStrategy,
    StoredChunk,
)


class VectorIndex:
    """
    In-memory vector store keyed by session id.

    Lifecycle is explicit: a session's collection is created on its first
    `store()` and removed by `delete()`. Entries are never deduplicated or
    overwritten, so indexing the same document twice stores its chunks twice.
    Access to the session map is guarded by a lock so different sessions can be
    used from concurrent requests; ordering within one session is not enforced.

    Attributes:
        search_strategy (SearchStrategy): Ranking strategy used by `query_similar()`.
    """

    def __init__(self, search_strategy: Optional[SearchStrategy] = None):
        self.search_strategy = search_strategy or BruteForceCosineSearch()
        self._collections: Dict[str, List[StoredChunk]] = {}
        self._lock = threading.Lock()

    def store(
        self,
        session_id: str,
        chunks: List[DocumentChunk],
        vectors: List[List[float]],
    ) -> None:
        """
        Append chunk/vector pairs to a session's collection, creating it if absent.

        Raises:
            ValueError: If `chunks` and `vectors` differ in length.
            DimensionMismatchError: If a vector's length differs from the vectors
                already stored for the session (or from the others in this call).
        """
        if len(chunks) != len(vectors):
            raise ValueError(
                f"Number of chunks ({len(chunks)}) must match number of vectors ({len(vectors)})."
            )
        if not chunks:
            return

        with self._lock:
            collection = self._collections.get(session_id, [])
            expected_dim = len(collection[0].vector) if collection else len(vectors[0])

            for vector in vectors:
                if len(vector) != expected_dim:
                    raise DimensionMismatchError(
                        expected=expected_dim,
                        actual=len(vector),
                        context=f"VectorIndex.store() for session `{session_id}`"
                    )

            new_entries = [
                StoredChunk(chunk=chunk, vector=list(vector))
                for chunk, vector in zip(chunks, vectors)
            ]
            self._collections[session_id] = collection + new_entries

    def query_similar(
        self,
        session_id: str,
        query_vector: List[float],
        top_k: int = MATCHER_DEFAULTS.RETRIEVAL_TOP_K,
    ) -> List[DocumentChunk]:
        """
        Return up to `top_k` chunks ordered by descending similarity to `query_vector`.

        An unknown or empty session yields an empty list.

        Raises:
            DimensionMismatchError: If `query_vector` differs in length from the
                stored vectors.
        """
        with self._lock:
            entries = list(self._collections.get(session_id, []))

        if not entries:
            return []
        return self.search_strategy.search(query_vector, entries, top_k)

    def delete(self, session_id: str) -> None:
        """Remove every chunk stored for a session. Unknown sessions are ignored."""
        with self._lock:
            self._collections.pop(session_id, None)

    def count(self, session_id: str) -> int:
        """Number of chunks stored for a session."""
        with self._lock:
            return len(self._collections.get(session_id, []))

    def clear(self) -> None:
        """Remove all sessions (useful for testing)."""
        with self._lock:
            self._collections.clear()
