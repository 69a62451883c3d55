"""llm_client_test_helpers.py
Canned LLM responses used by LLMClient test mode.
"""

from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

expected_test_responses = {
    "grounded_answer": {
        "success": (
            "The candidate has 5 years of experience working with Python, AWS and Docker "
            "[experience] [skills]."
        ),
        "no_information": "I don't have that information in the resume.",
        "empty": "",
    }
}

def create_mock_llm_response(
    function_name: Literal["grounded_answer"],
    provider: Literal["openai", "anthropic"],
    response_type: Literal["success", "no_information", "empty"] = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict responses to JSON string; leave strings as-is
    content = json.dumps(content_value) if isinstance(content_value, dict) else content_value

    # --- token counts ---
    input_tokens = random.randint(50, 150)
    output_tokens = random.randint(20, 100)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "openai":
        response_metadata = {
            "id": f"chatcmpl-{uuid.uuid4().hex[:24]}",
            "model_name": "gpt-4o-mini-2024-07-18",
            "finish_reason": "stop",
            "token_usage": {
                "prompt_tokens": input_tokens,
                "completion_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    elif provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
