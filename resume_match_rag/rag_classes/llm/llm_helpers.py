"""llm_helpers.py
Functions to help with initiating LLMClient and EmbeddingClient classes
"""

from typing import Optional

from resume_match_rag.rag_classes.llm.llm_client import LLMClient
from resume_match_rag.rag_classes.embeddings.embedding_client import EmbeddingClient

def initialize_llm_if_needed(
    llm_client: Optional[LLMClient] = None,
    function_name: Optional[str] = None,
    fallback_message: Optional[str] = None,
) -> LLMClient:
    """
    Initialize or validate an LLMClient.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of `LLMClient`.
        2. Otherwise builds a new LLMClient from MATCHER_DEFAULTS.
        3. Initializes the underlying LangChain client if it has not been initialized yet
            (test mode clients are returned as-is).

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.
        function_name (Optional[str]): Feature name passed to a newly built client.
        fallback_message (Optional[str]): Empty-content fallback passed to a newly built client.

    Returns:
        LLMClient: A ready-to-use LLMClient instance.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
        LLMConfigError: If a new client is required but provider/model/key information is missing.
    """
    # Validate an existing LLMClient
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
    else:
        llm_client = LLMClient(function_name=function_name, fallback_message=fallback_message)

    if llm_client.client is None and not llm_client.test_mode:
        llm_client.initialize_client()

    return llm_client


def initialize_embeddings_if_needed(
    embedding_client: Optional[EmbeddingClient] = None,
) -> EmbeddingClient:
    """
    Initialize or validate an EmbeddingClient. Mirrors `initialize_llm_if_needed`.

    Raises:
        TypeError: If `embedding_client` is provided but not an instance of `EmbeddingClient`.
        LLMConfigError: If a new client is required but the API key is missing.
    """
    if embedding_client is not None:
        if not isinstance(embedding_client, EmbeddingClient):
            raise TypeError("Provided embedding_client must be an instance of EmbeddingClient.")
    else:
        embedding_client = EmbeddingClient()

    if embedding_client.client is None:
        embedding_client.initialize_client()

    return embedding_client
