"""embedding_client.py
Converts text into fixed-length vectors through a LangChain `Embeddings` model.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv
from langchain_core.embeddings import Embeddings

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.exceptions import EmbeddingError, LLMConfigError, LLMInitializationError
from resume_match_rag.test_helpers.embedding_test_helpers import create_mock_embeddings_model

SUPPORTED_EMBEDDING_PROVIDERS = ["openai"]
load_dotenv()

Vector = List[float]


class EmbeddingClient:
    """
    Async wrapper around an embedding provider.

    Batches are split into groups of at most `batch_size` texts (one remote call
    per group) and results are concatenated in input order. There is no retry
    logic: any provider failure is raised as `EmbeddingError` and the caller
    decides whether to retry.

    Attributes:
        provider (str): Embedding provider name. Defaults to MATCHER_DEFAULTS.EMBEDDING_PROVIDER.
        model (str): Embedding model identifier.
        dimensions (int): Expected vector length.
        batch_size (int): Maximum texts per remote call.
        test_mode (bool): If True, uses deterministic keyword embeddings instead of
            the live provider. No API key is required.
        client (Embeddings): Initialized LangChain embeddings model.

    Example:
        >>> client = EmbeddingClient()
        >>> client.initialize_client()
        >>> vectors = await client.embed_batch(["Python, AWS", "BSc Computer Science"])
    """

    def __init__(
        self,
        provider: str = MATCHER_DEFAULTS.EMBEDDING_PROVIDER,
        model: Optional[str] = None,
        dimensions: int = MATCHER_DEFAULTS.EMBEDDING_DIMENSIONS,
        batch_size: int = MATCHER_DEFAULTS.EMBEDDING_BATCH_SIZE,
        embeddings_model: Optional[Embeddings] = None,
        test_mode: bool = False,
    ):
        """
        Args:
            provider (str): Embedding provider name ("openai").
            model (Optional[str]): Model identifier. Defaults to MATCHER_DEFAULTS.EMBEDDING_MODEL_ID.
            dimensions (int): Expected vector length.
            batch_size (int): Maximum texts per remote call. Must be positive.
            embeddings_model (Optional[Embeddings]): Pre-built LangChain embeddings model
                to use instead of building one from the provider settings.
            test_mode (bool): Use deterministic keyword embeddings.

        Raises:
            ValueError: If `batch_size` is not positive.
            LLMConfigError: If the provider is unsupported or its API key is missing.
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive (got {batch_size}).")

        self.provider = provider
        self.model = model or MATCHER_DEFAULTS.EMBEDDING_MODEL_ID
        self.dimensions = dimensions
        self.batch_size = batch_size
        self.test_mode = test_mode

        self.client: Optional[Embeddings] = embeddings_model
        self.api_key = None

        if self.client is None and not self.test_mode:
            self._resolve_provider()
            self._resolve_api_key()

    def _resolve_provider(self) -> None:
        """Raise LLMConfigError if the provider is unsupported."""
        if self.provider not in SUPPORTED_EMBEDDING_PROVIDERS:
            raise LLMConfigError(
                variable_name="EMBEDDING_PROVIDER",
                extra_info=f"Choices are: {SUPPORTED_EMBEDDING_PROVIDERS}"
            )

    def _resolve_api_key(self) -> None:
        """Load the provider API key from the environment."""
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key or api_key == "<REPLACE_ME>":
            raise LLMConfigError(
                variable_name="OPENAI_API_KEY",
                message=(
                    "You must set an `openai` API key in your environment variables "
                    "to generate embeddings."
                )
            )
        self.api_key = api_key

    def initialize_client(self) -> None:
        """
        Build the LangChain embeddings model unless one was injected.
        No API call is made during initialization.

        Raises:
            LLMInitializationError: If the embeddings model cannot be created.
        """
        if self.client is not None:
            return

        if self.test_mode:
            self.client = create_mock_embeddings_model()
            return

        try:
            from langchain_openai import OpenAIEmbeddings
            self.client = OpenAIEmbeddings(
                model=self.model,
                api_key=self.api_key,
                dimensions=self.dimensions,
                max_retries=0,
            )
        except Exception as e:
            raise LLMInitializationError(
                provider=self.provider,
                model=self.model,
                original_exception=e,
                additional_message="Embeddings model could not be created"
            )

    def _require_client(self) -> Embeddings:
        if self.client is None:
            raise EmbeddingError(message="EmbeddingClient used before initialize_client() was run")
        return self.client

    async def embed(self, text: str) -> Vector:
        """
        Embed a single text.

        Returns:
            Vector: The embedding of `text`.

        Raises:
            EmbeddingError: If the provider call fails or returns no data.
        """
        client = self._require_client()
        try:
            vector = await client.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(original_exception=e)

        if not vector:
            raise EmbeddingError(message="Embedding provider returned no data")
        return list(vector)

    async def embed_batch(self, texts: List[str]) -> List[Vector]:
        """
        Embed many texts, one remote call per group of `batch_size`.

        The batch is atomic: if any group fails, nothing is returned.

        Returns:
            List[Vector]: One vector per input text, in input order.

        Raises:
            EmbeddingError: If any remote call fails or returns a wrong number of vectors.
        """
        if not texts:
            return []

        client = self._require_client()
        vectors: List[Vector] = []

        for start in range(0, len(texts), self.batch_size):
            batch = texts[start:start + self.batch_size]
            try:
                batch_vectors = await client.aembed_documents(batch)
            except Exception as e:
                raise EmbeddingError(
                    message="Failed to generate embeddings",
                    batch_size=len(batch),
                    original_exception=e,
                )

            if not batch_vectors or len(batch_vectors) != len(batch) or not all(batch_vectors):
                raise EmbeddingError(
                    message="Embedding provider returned incomplete data",
                    batch_size=len(batch),
                )
            vectors.extend(list(vector) for vector in batch_vectors)

        return vectors
