"""prompts.py
Prompt text and context formatting for grounded question answering.
"""
from typing import List

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.models import DocumentChunk

NO_INFORMATION_ANSWER = "I don't have that information in the resume."

GROUNDED_SYSTEM_PROMPT = f"""You are an AI assistant helping recruiters evaluate candidates.
You have access to the candidate's resume and the job description through the provided context.
Answer questions accurately based ONLY on the information in the context.
Do not use outside knowledge or make assumptions about the candidate.
If the information is not in the context, say "{NO_INFORMATION_ANSWER}"
Be concise and specific, and cite the [section] each detail comes from."""


def build_context(
    chunks: List[DocumentChunk],
    delimiter: str = MATCHER_DEFAULTS.CONTEXT_DELIMITER,
) -> str:
    """Render chunks as `[section]\\ncontent` blocks in retrieval order."""
    return delimiter.join(f"[{chunk.section}]\n{chunk.content}" for chunk in chunks)


def build_user_prompt(context: str, question: str) -> str:
    return f"Context from resume:\n{context}\n\nQuestion: {question}"
