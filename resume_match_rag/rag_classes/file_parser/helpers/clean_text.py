"""clean_text.py
Normalizes extracted document text before it is stored on a session.
"""
import re

def clean_text(text: str) -> str:
    """
    Normalize line endings, collapse runs of 3+ newlines to a single blank
    line, and trim surrounding whitespace.

    Example:
        >>> clean_text("Skills\\r\\n\\n\\n\\nPython  ")
        'Skills\\n\\nPython'
    """
    text = text.replace("\r\n", "\n")
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
