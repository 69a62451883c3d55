"""test_llm_helpers.py
Test initialize_llm_if_needed and initialize_embeddings_if_needed.
"""
from unittest.mock import patch

import pytest

from resume_match_rag.rag_classes.embeddings.embedding_client import EmbeddingClient
from resume_match_rag.rag_classes.llm.llm_client import LLMClient
from resume_match_rag.rag_classes.llm.llm_helpers import (
    initialize_embeddings_if_needed,
    initialize_llm_if_needed,
)
from resume_match_rag.test_helpers.embedding_test_helpers import KeywordEmbeddings


class TestInitializeLLMIfNeeded:

    def test_existing_client_returned(self):
        client = LLMClient(test_mode=True, function_name="grounded_answer")
        assert initialize_llm_if_needed(client) is client

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError):
            initialize_llm_if_needed(llm_client="not a client")

    @patch("langchain_openai.ChatOpenAI")
    def test_new_client_built_and_initialized(self, mock_chatopenai, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        client = initialize_llm_if_needed(function_name="grounded_answer", fallback_message="fb")

        assert isinstance(client, LLMClient)
        assert client.function_name == "grounded_answer"
        assert client.fallback_message == "fb"
        mock_chatopenai.assert_called_once()

    def test_new_client_in_test_mode(self, FORCE_MOCK_LLM_RESPONSES):
        client = initialize_llm_if_needed()
        assert client.test_mode is True
        assert client.client is None


class TestInitializeEmbeddingsIfNeeded:

    def test_existing_client_initialized(self):
        client = EmbeddingClient(test_mode=True)
        result = initialize_embeddings_if_needed(client)
        assert result is client
        assert isinstance(result.client, KeywordEmbeddings)

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError):
            initialize_embeddings_if_needed(embedding_client=object())

    def test_new_client_in_test_mode(self, FORCE_MOCK_LLM_RESPONSES):
        client = initialize_embeddings_if_needed()
        assert isinstance(client.client, KeywordEmbeddings)
