"""text_segmenter.py
Splits raw resume / job description text into labeled DocumentChunks using
heuristic header detection.
"""
import re
from typing import Dict, List, Tuple

from resume_match_rag.models import DocumentChunk, DocumentType

# Ordered (section label, header regex) pairs per document type. Patterns are
# matched case-insensitively against the stripped line, anchored at its start.
RESUME_SECTION_PATTERNS: List[Tuple[str, str]] = [
    ("skills", r"^(?:skills?|technical skills?|core competencies)\b"),
    ("experience", r"^(?:experience|work experience|professional experience|employment)\b"),
    ("education", r"^(?:education|academic|qualifications)\b"),
]

JOB_DESCRIPTION_SECTION_PATTERNS: List[Tuple[str, str]] = [
    ("requirements", r"^(?:requirements?|required skills?|what we need)\b"),
    ("responsibilities", r"^(?:responsibilities|duties|what you'll do)\b"),
    ("qualifications", r"^(?:qualifications?|preferred|nice to have)\b"),
]


class TextSegmenter:
    """
    Single-pass, line-based section splitter.

    Every line is tested against the header patterns of its document type. The
    first matching pattern switches the current section and the header line is
    dropped; all other lines are appended to the current section's buffer.
    Each non-empty buffer becomes one DocumentChunk, ordered by the first time
    its section was entered.

    Attributes:
        SECTION_PATTERNS (Dict[str, List[Tuple[str, str]]]): Header patterns
            keyed by document type.
        DEFAULT_SECTIONS (Dict[str, str]): Section used before any header
            matches, keyed by document type.

    Example:
        >>> segmenter = TextSegmenter()
        >>> chunks = segmenter.segment("Jane Doe\\nSkills\\nPython", "resume")
        >>> [(c.section, c.content) for c in chunks]
        [('summary', 'Jane Doe'), ('skills', 'Python')]
    """

    DEFAULT_SECTIONS: Dict[str, str] = {
        "resume": "summary",
        "job_description": "overview",
    }

    SECTION_PATTERNS: Dict[str, List[Tuple[str, str]]] = {
        "resume": RESUME_SECTION_PATTERNS,
        "job_description": JOB_DESCRIPTION_SECTION_PATTERNS,
    }

    def __init__(self):
        # Compile once per instance
        self._compiled_patterns = {
            document_type: [
                (section, re.compile(pattern, re.IGNORECASE))
                for section, pattern in patterns
            ]
            for document_type, patterns in self.SECTION_PATTERNS.items()
        }

    def segment(self, text: str, document_type: DocumentType) -> List[DocumentChunk]:
        """
        Split `text` into labeled chunks.

        Args:
            text (str): Cleaned plain text of the document.
            document_type (DocumentType): "resume" or "job_description".

        Returns:
            List[DocumentChunk]: Chunks in scan order with zero-based positions.
            If no header ever matches, the whole document is one chunk under
            the default section. Empty text yields an empty list.

        Raises:
            ValueError: If `document_type` is not supported.
        """
        if document_type not in self._compiled_patterns:
            raise ValueError(
                f"Unsupported document_type '{document_type}'. "
                f"Choices are: {list(self._compiled_patterns)}"
            )

        sections = self._split_sections(text, document_type)

        chunks = []
        for section, buffer in sections.items():
            content = buffer.strip()
            if not content:
                continue
            chunks.append(
                DocumentChunk(
                    content=content,
                    section=section,
                    position=len(chunks),
                    document_type=document_type,
                )
            )
        return chunks

    def _split_sections(self, text: str, document_type: DocumentType) -> Dict[str, str]:
        """Accumulate lines into per-section buffers (insertion ordered)."""
        current_section = self.DEFAULT_SECTIONS[document_type]
        sections: Dict[str, str] = {current_section: ""}

        for line in text.split("\n"):
            header_section = self._match_header(line, document_type)
            if header_section is not None:
                current_section = header_section
                sections.setdefault(current_section, "")
                continue
            sections[current_section] += line + "\n"

        return sections

    def _match_header(self, line: str, document_type: DocumentType) -> str | None:
        """Return the section label for a header line, else None."""
        stripped = line.strip()
        for section, pattern in self._compiled_patterns[document_type]:
            if pattern.match(stripped):
                return section
        return None


# Shared instance
text_segmenter = TextSegmenter()


def segment(text: str, document_type: DocumentType) -> List[DocumentChunk]:
    """Module-level shortcut for `TextSegmenter().segment()`."""
    return text_segmenter.segment(text, document_type)
