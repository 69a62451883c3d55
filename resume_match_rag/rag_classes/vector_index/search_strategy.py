"""search_strategy.py
Ranking strategies used by VectorIndex.query_similar().
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from resume_match_rag.models import DocumentChunk
from resume_match_rag.rag_classes.vector_index.similarity import cosine_similarity


@dataclass(frozen=True)
class StoredChunk:
    """A DocumentChunk paired with its embedding."""
    chunk: DocumentChunk
    vector: List[float]


class SearchStrategy(ABC):
    """
    Ranks stored chunks against a query vector. Implementations may use an
    approximate nearest neighbour structure as long as they honour the same
    contract: most similar first, at most `top_k` results.
    """

    @abstractmethod
    def search(
        self,
        query_vector: List[float],
        entries: List[StoredChunk],
        top_k: int,
    ) -> List[DocumentChunk]:
        pass


class BruteForceCosineSearch(SearchStrategy):
    """
    Exact O(n * d) scan computing cosine similarity against every stored vector.

    Sorting is stable, so chunks with equal similarity keep insertion order.
    Suitable for the handful of documents held per session; larger corpora
    should plug in an approximate strategy instead.
    """

    def search(
        self,
        query_vector: List[float],
        entries: List[StoredChunk],
        top_k: int,
    ) -> List[DocumentChunk]:
        if top_k <= 0 or not entries:
            return []

        scored = [
            (cosine_similarity(query_vector, entry.vector), entry.chunk)
            for entry in entries
        ]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [chunk for _, chunk in scored[:top_k]]
