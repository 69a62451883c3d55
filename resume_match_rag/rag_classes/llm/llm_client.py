"""
llm_client.py

Universal LangChain-based client for multiple chat-completion providers.
Supports OpenAI and Anthropic (Claude).
Includes configuration validation and an optional test mode with canned responses.
"""
import os
from typing import Optional, List, Literal

from dotenv import load_dotenv

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.exceptions import (
    LLMConfigError,
    LLMInitializationError,
    LLMQueryError,
    LLMEmptyResponse
)
from resume_match_rag.models import ChatMessage
from resume_match_rag.test_helpers.llm_client_test_helpers import (
    create_mock_llm_response
)

SUPPORTED_PROVIDERS = ["openai", "anthropic"]
load_dotenv()

class LLMClient:
    """
    A provider-agnostic client for chat-completion models through the LangChain
    interface. Must be "initialized" using `initialize_client()` before it can be
    used to make queries.

    Handles:
        - Pulling API keys from .env file
        - Resolving provider, model ID, and API keys
        - Validating configuration
        - Optional test mode with deterministic responses
        - Integration with LangChain chat models (OpenAI, Anthropic)

    Initialization uses defaults from `MATCHER_DEFAULTS` if values are not provided.

    Attributes:
        provider (Optional[str]): Name of the LLM provider (e.g., "openai"). Defaults
            to MATCHER_DEFAULTS.LLM_PROVIDER.
        model (Optional[str]): Model identifier. If none provided then the provider's
            MATCHER_DEFAULTS model is used.
        api_key (Optional[str]): Provider-specific API key pulled from the environment.
        function_name (Optional[str]): Name of the feature invoking the LLM. Selects
            the canned response family in test mode.
        fallback_message (Optional[str]): Returned when the model produces no content.
        test_mode (bool): If True, returns mock responses instead of making real API calls.
        test_response_type (str): Mock response type used in test mode.
        client (Any): Initialized LangChain chat model client.

    Raises:
        LLMConfigError: If required environment variables are missing or invalid.
        LLMInitializationError: If the model client cannot be initialized.
        LLMQueryError: If a query fails during execution.

    Example:
        >>> client = LLMClient(provider="openai", model="gpt-4o-mini")
        >>> client.initialize_client()
        >>> answer = await client.aquery(
        ...     system_prompt="Answer only from the context.",
        ...     user_prompt="Context: ...\\n\\nQuestion: Which databases has she used?",
        ... )
    """

    def __init__(
        self,
        provider: Optional[str] = MATCHER_DEFAULTS.LLM_PROVIDER,
        model: Optional[str] = None,
        function_name: Optional[str] = None,
        fallback_message: Optional[str] = None,
        test_mode: Optional[bool] = False,
        test_response_type: Literal["success", "no_information", "empty"] = "success",
    ):
        """Initialize an LLMClient instance and resolve provider-specific configuration.

        Args:
            provider (Optional[str], optional): Name of the LLM provider ("openai" or
                "anthropic"). Defaults to `MATCHER_DEFAULTS.LLM_PROVIDER`.
            model (Optional[str], optional): Model identifier to use for the provider.
                If None, the default model from MATCHER_DEFAULTS will be used.
            function_name (Optional[str], optional): Name of the feature invoking the LLM.
                Defaults to None.
            fallback_message (Optional[str], optional): Message to return if the model
                response is empty. Defaults to None.
            test_mode (Optional[bool], optional): If True, the client returns deterministic
                mock responses instead of querying the live LLM. No API key is required.
            test_response_type (Literal["success", "no_information", "empty"], optional):
                Type of mock response to use when `test_mode` is True.
        """
        self.function_name = function_name
        self.fallback_message = fallback_message
        self.test_mode = test_mode
        self.test_response_type = test_response_type

        # --- Resolve configuration ---
        self.provider = provider
        self._resolve_provider()

        self._resolve_model(model)
        self._resolve_api_key()

        # Only fill client when `initialize_client()` is run
        self.client = None

    # --- Init helpers ---
    def _resolve_provider(self) -> None:
        """
        Validate that self.provider is a supported LLM provider.

        Raises:
            LLMConfigError: If the provider is not one of the supported providers.
        """
        if self.provider not in SUPPORTED_PROVIDERS:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                extra_info=f"Choices are: {SUPPORTED_PROVIDERS}"
            )

    def _resolve_model(self, model: Optional[str]) -> None:
        """
        Resolve and set the model ID for the selected provider.
        - Uses the `model` parameter if provided.
        - Otherwise, falls back to the default model ID from `MATCHER_DEFAULTS`.

        Raises:
            LLMConfigError: If no model ID is provided or available for the selected provider.
        """
        default_models = {
            "openai": MATCHER_DEFAULTS.OPENAI_MODEL_ID,
            "anthropic": MATCHER_DEFAULTS.ANTHROPIC_MODEL_ID,
        }

        resolved_model = model or default_models.get(self.provider)
        if not resolved_model:
            raise LLMConfigError(
                variable_name=f"{self.provider}_MODEL_ID",
                message=(
                    f"You must provide a model ID for `{self.provider}` either via MATCHER_DEFAULTS "
                    "or by explicitly passing `model` when initializing LLMClient."
                )
            )

        self.model = resolved_model

    def _resolve_api_key(self) -> None:
        """
        Retrieve and validate the API key for the selected provider from environment variables.
        Does not check if the API key is valid, simply loads it. Test mode does not
        require a key.

        Raises:
            LLMConfigError: If the API key is missing or the provider is invalid.
        """
        api_key_map = {
            "openai": "OPENAI_API_KEY",
            "anthropic": "ANTHROPIC_API_KEY",
        }

        key_name = api_key_map.get(self.provider)
        if not key_name:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                message=f"No API key mapping defined for provider `{self.provider}`"
            )

        api_key = os.getenv(key_name)
        if (not api_key or api_key == "<REPLACE_ME>") and not self.test_mode:
            raise LLMConfigError(
                variable_name=f"{self.provider}_API_KEY",
                message=(
                    f"You must set a `{self.provider}` API key in your environment variables "
                    "to run LLM queries to their services."
                )
            )

        self.api_key = api_key

    def initialize_client(self) -> None:
        """
        Initialize the LangChain chat model client for the selected provider.
        - Imports the provider-specific client dynamically.
        - Initializes the client using the resolved `self.model` and `self.api_key`.
        - Assigns the initialized client to `self.client`.

        No API call is made during initialization. In test mode no client is built.

        Raises:
            LLMInitializationError: If the client cannot be initialized.
        """
        if self.test_mode:
            return

        try:
            if self.provider == "openai":
                from langchain_openai import ChatOpenAI
                self.client = ChatOpenAI(
                    model=self.model,
                    api_key=self.api_key,
                    temperature=MATCHER_DEFAULTS.LLM_TEMPERATURE,
                    max_tokens=MATCHER_DEFAULTS.LLM_MAX_TOKENS,
                    max_retries=0,
                )
            elif self.provider == "anthropic":
                from langchain_anthropic import ChatAnthropic
                self.client = ChatAnthropic(
                    model=self.model,
                    anthropic_api_key=self.api_key,
                    temperature=MATCHER_DEFAULTS.LLM_TEMPERATURE,
                    max_tokens=MATCHER_DEFAULTS.LLM_MAX_TOKENS,
                    max_retries=0,
                )
            else:
                raise LLMConfigError(
                    variable_name="LLM_PROVIDER",
                    extra_info=f"Unsupported provider: {self.provider}"
                )
        except Exception as e:
            raise LLMInitializationError(
                provider=self.provider,
                model=self.model,
                original_exception=e
            )

    # --- QUERY EXECUTION ---
    def build_messages(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        prior_messages: Optional[List[ChatMessage]] = None,
    ) -> List[BaseMessage]:
        """
        Convert a system instruction, optional transcript and the current prompt
        into LangChain messages (system first, current prompt last).
        """
        messages: List[BaseMessage] = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))

        for message in prior_messages or []:
            if message.role == "assistant":
                messages.append(AIMessage(content=message.content))
            else:
                messages.append(HumanMessage(content=message.content))

        messages.append(HumanMessage(content=user_prompt))
        return messages

    async def aquery(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        prior_messages: Optional[List[ChatMessage]] = None,
        temperature: float = MATCHER_DEFAULTS.LLM_TEMPERATURE,
        max_tokens: int = MATCHER_DEFAULTS.LLM_MAX_TOKENS,
    ) -> str:
        """
        Perform a single chat completion.

        Args:
            system_prompt (Optional[str]): Instruction or behavioral setup for the model.
            user_prompt (str): Input text or main query.
            prior_messages (Optional[List[ChatMessage]]): Role-tagged transcript sent
                between the system instruction and the prompt.
            temperature (float): Sampling temperature.
            max_tokens (int): Maximum tokens to generate.

        Returns:
            str: The stripped completion text, or `fallback_message` (then
                "No query result") if the model produced no content.

        Raises:
            LLMInitializationError: If `initialize_client()` was not run.
            LLMEmptyResponse: If the provider returned no message at all.
            LLMQueryError: If the provider call fails.
        """
        if not self.client and not self.test_mode:
            raise LLMInitializationError(provider=self.provider, model=self.model)

        messages = self.build_messages(system_prompt, user_prompt, prior_messages)

        try:
            if not self.test_mode:
                response: AIMessage = await self.client.ainvoke(
                    messages,
                    temperature=temperature,
                    max_tokens=max_tokens,
                )
            elif self.function_name and self.test_response_type:
                # Return a mock LLM response (for testing)
                response: AIMessage = create_mock_llm_response(
                    function_name=self.function_name,
                    response_type=self.test_response_type,
                    provider=self.provider
                )
            else:
                raise LLMQueryError(
                    provider=self.provider,
                    model=self.model,
                    additional_message=(
                        "Test mode is enabled without valid test variables having been defined. "
                        f"self.test_mode = {self.test_mode} "
                        f"self.function_name = {self.function_name} "
                    ),
                )
        except LLMQueryError:
            raise
        except Exception as e:
            raise LLMQueryError(provider=self.provider, model=self.model, original_exception=e)

        if response is None:
            raise LLMEmptyResponse(provider=self.provider, model=self.model)

        content = response.content if isinstance(response.content, str) else ""
        response_content = content.strip()

        # Return fallback message if result text is empty
        if not response_content:
            response_content = self.fallback_message or "No query result"

        return response_content
