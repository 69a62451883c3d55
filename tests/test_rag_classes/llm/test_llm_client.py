"""test_llm_client.py
Test LLMClient class.
"""
import asyncio
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from dotenv import load_dotenv
load_dotenv()  # load environment variables from .env

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from resume_match_rag.exceptions import (
    LLMConfigError,
    LLMEmptyResponse,
    LLMInitializationError,
    LLMQueryError,
)
from resume_match_rag.models import ChatMessage
from resume_match_rag.rag_classes.llm.llm_client import LLMClient
from resume_match_rag.test_helpers.llm_client_test_helpers import (
    create_mock_llm_response,
    expected_test_responses,
)

# -----------------------------
# Skip if OpenAI key missing
# -----------------------------
@pytest.fixture
def has_openai_key():
    """Skip tests if OpenAI API key is missing or placeholder."""
    key = os.getenv("OPENAI_API_KEY")
    if not key or key == "<REPLACE_ME>":
        pytest.skip("OpenAI API key not defined in .env")
    return key


@pytest.fixture
def fake_openai_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

# -----------------------------
# Initialization tests
# -----------------------------
def test_invalid_provider_raises():
    """Ensure initializing LLMClient with unsupported provider raises LLMConfigError."""
    with pytest.raises(LLMConfigError):
        LLMClient(provider="unsupported")


def test_model_resolution_defaults(fake_openai_key):
    """Check that model defaults to MATCHER_DEFAULTS if not provided."""
    client = LLMClient(provider="openai", model=None)
    assert client.model == "gpt-4o-mini"


def test_missing_api_key_raises(monkeypatch):
    """Check that missing API key raises LLMConfigError."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(LLMConfigError):
        LLMClient(provider="anthropic")


def test_test_mode_needs_no_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    client = LLMClient(test_mode=True, function_name="grounded_answer")
    client.initialize_client()
    assert client.client is None

# -----------------------------
# Client initialization
# -----------------------------
@patch("langchain_openai.ChatOpenAI")
def test_initialize_client_openai(mock_chatopenai, fake_openai_key):
    """Verify OpenAI client initializes with deterministic sampling settings."""
    client = LLMClient(provider="openai", model="test-model")
    client.initialize_client()
    mock_chatopenai.assert_called_once()
    kwargs = mock_chatopenai.call_args.kwargs
    assert kwargs["temperature"] == 0.0
    assert kwargs["max_tokens"] == 500
    assert client.client is not None


@patch("langchain_anthropic.ChatAnthropic")
def test_initialize_client_anthropic(mock_chatanthropic, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    client = LLMClient(provider="anthropic", model="test-model")
    client.initialize_client()
    mock_chatanthropic.assert_called_once()


@patch("langchain_openai.ChatOpenAI", side_effect=RuntimeError("bad config"))
def test_initialize_client_failure_wrapped(mock_chatopenai, fake_openai_key):
    client = LLMClient(provider="openai", model="test-model")
    with pytest.raises(LLMInitializationError):
        client.initialize_client()

# -----------------------------
# Message building
# -----------------------------
def test_build_messages_order(fake_openai_key):
    client = LLMClient()
    history = [
        ChatMessage(role="user", content="Hi"),
        ChatMessage(role="assistant", content="Hello"),
    ]
    messages = client.build_messages("sys", "question", history)

    assert [type(m) for m in messages] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
    assert messages[-1].content == "question"


def test_build_messages_without_system_prompt(fake_openai_key):
    messages = LLMClient().build_messages(None, "question")
    assert len(messages) == 1 and isinstance(messages[0], HumanMessage)

# -----------------------------
# Query tests
# -----------------------------
def test_query_without_client_raises(fake_openai_key):
    """Query without initializing client should raise LLMInitializationError."""
    client = LLMClient(provider="openai", model="test-model")
    with pytest.raises(LLMInitializationError):
        asyncio.run(client.aquery(system_prompt="Hi", user_prompt="Hello"))


@pytest.mark.parametrize("provider", ["openai", "anthropic"])
def test_query_test_mode_returns_mock(provider):
    """Verify test_mode returns the canned grounded answer for each provider."""
    client = LLMClient(
        provider=provider,
        test_mode=True,
        function_name="grounded_answer",
        test_response_type="success",
    )
    result = asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))
    assert result == expected_test_responses["grounded_answer"]["success"]


def test_query_fallback_message():
    """Empty content falls back to the configured message."""
    client = LLMClient(
        function_name="grounded_answer",
        fallback_message="fallback",
        test_mode=True,
        test_response_type="empty",
    )
    result = asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))
    assert result == "fallback"


def test_query_test_mode_without_function_name_raises():
    client = LLMClient(test_mode=True)
    with pytest.raises(LLMQueryError):
        asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))


def test_query_live_client_passes_sampling_settings(fake_openai_key):
    client = LLMClient(provider="openai", model="test-model")
    client.client = MagicMock()
    client.client.ainvoke = AsyncMock(
        return_value=create_mock_llm_response("grounded_answer", "openai", "success")
    )

    result = asyncio.run(
        client.aquery(system_prompt="sys", user_prompt="user", temperature=0.0, max_tokens=500)
    )

    assert result == expected_test_responses["grounded_answer"]["success"]
    kwargs = client.client.ainvoke.call_args.kwargs
    assert kwargs == {"temperature": 0.0, "max_tokens": 500}


def test_query_provider_error_wrapped(fake_openai_key):
    client = LLMClient(provider="openai", model="test-model")
    client.client = MagicMock()
    client.client.ainvoke = AsyncMock(side_effect=RuntimeError("insufficient_quota"))

    with pytest.raises(LLMQueryError) as exc_info:
        asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))
    assert "insufficient_quota" in str(exc_info.value)


def test_query_none_response_raises_empty(fake_openai_key):
    client = LLMClient(provider="openai", model="test-model")
    client.client = MagicMock()
    client.client.ainvoke = AsyncMock(return_value=None)

    with pytest.raises(LLMEmptyResponse):
        asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))


def test_query_non_text_content_uses_default_fallback(fake_openai_key):
    client = LLMClient(provider="openai", model="test-model")
    client.client = MagicMock()
    client.client.ainvoke = AsyncMock(return_value=AIMessage(content=[]))

    result = asyncio.run(client.aquery(system_prompt="sys", user_prompt="user"))
    assert result == "No query result"

# -----------------------------
# Live test
# -----------------------------
def test_live_query(has_openai_key, LLM_TEST_MODE):
    if LLM_TEST_MODE == "mock_only":
        pytest.skip("Live LLM calls disabled in mock_only mode")

    client = LLMClient()
    client.initialize_client()
    result = asyncio.run(client.aquery(system_prompt="Reply with one word.", user_prompt="Say pong"))
    assert isinstance(result, str) and result
