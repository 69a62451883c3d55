"""embedding_test_helpers.py
Deterministic embeddings used by EmbeddingClient test mode.
"""
from typing import List, Optional

from langchain_core.embeddings import Embeddings

# Each keyword is one vector dimension
DEFAULT_KEYWORDS = [
    "python", "java", "aws", "docker", "kubernetes", "sql",
    "experience", "years", "engineer", "lead",
    "bachelor", "master", "degree", "university",
    "skills", "requirements", "responsibilities", "preferred",
]


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-keywords embedding model. Each dimension counts occurrences of one
    keyword in the lowercased text, so texts sharing keywords score higher
    cosine similarity. Every call is recorded in `calls`.
    """

    def __init__(self, keywords: Optional[List[str]] = None):
        self.keywords = keywords or DEFAULT_KEYWORDS
        self.calls: List[List[str]] = []

    def _vectorize(self, text: str) -> List[float]:
        lowered = text.lower()
        return [float(lowered.count(keyword)) for keyword in self.keywords]

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        self.calls.append(list(texts))
        return [self._vectorize(text) for text in texts]

    def embed_query(self, text: str) -> List[float]:
        self.calls.append([text])
        return self._vectorize(text)


def create_mock_embeddings_model(keywords: Optional[List[str]] = None) -> KeywordEmbeddings:
    """Return a fresh KeywordEmbeddings instance."""
    return KeywordEmbeddings(keywords=keywords)
