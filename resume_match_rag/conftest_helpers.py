"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from resume_match_rag.rag_classes.llm.llm_client import LLMClient
from resume_match_rag.rag_classes.embeddings.embedding_client import EmbeddingClient


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_mock_llm_patch(monkeypatch):
    """
    Core patching logic for LLMClient and EmbeddingClient.

    Forces both provider clients into test mode by default:
      - LLMClient -> `test_mode=True`, `function_name="grounded_answer"`
      - EmbeddingClient -> `test_mode=True` (deterministic keyword embeddings)

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
      - Explicit keyword arguments passed by a test still win.
    """
    original_llm_init = LLMClient.__init__
    original_embedding_init = EmbeddingClient.__init__

    def patched_llm_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        kwargs.setdefault("function_name", "grounded_answer")
        original_llm_init(self, *args, **kwargs)

    def patched_embedding_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        original_embedding_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMClient, "__init__", patched_llm_init)
    monkeypatch.setattr(EmbeddingClient, "__init__", patched_embedding_init)
