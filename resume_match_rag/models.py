"""models.py
Holds standardized data models used across various functions.
"""
import uuid
from datetime import datetime
from typing import List, Literal, Optional
from dataclasses import dataclass, field

DocumentType = Literal["resume", "job_description"]
ChatRole = Literal["user", "assistant"]

# Sentinel used by the extractors when a pattern never matches
NOT_SPECIFIED = "Not specified"


@dataclass(frozen=True)
class DocumentChunk:
    """
    Represents a single labeled section of a resume or job description.
    Chunks are the unit of retrieval and are never modified after creation.

    Attributes:
        id (str): Opaque unique identifier.
        content (str): Trimmed text of the section.
        section (str): Section label (e.g. "skills", "requirements").
        position (int): Zero-based order of the chunk among the document's
            non-empty sections.
        document_type (DocumentType): "resume" or "job_description".
    """
    content: str
    section: str
    position: int
    document_type: DocumentType
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class ResumeData:
    """
    Stores structured information extracted from a resume.

    Attributes:
        skills (List[str]): Canonical skill names in vocabulary order.
        experience_years (int): First "<n> years" figure found, 0 if absent.
        education (List[str]): Raw degree matches, or ["Not specified"].
        summary (str): Leading text of the resume.
        raw_text (str): The full resume text.
    """
    skills: List[str] = field(default_factory=list)
    experience_years: int = 0
    education: List[str] = field(default_factory=lambda: [NOT_SPECIFIED])
    summary: str = ""
    raw_text: str = ""


@dataclass
class JobDescriptionData:
    """
    Stores structured requirements extracted from a job description.

    Attributes:
        required_skills (List[str]): Canonical skills mentioned anywhere in the text.
        preferred_skills (List[str]): Canonical skills inside the "preferred" span.
        experience_required (str): Raw "<n> years experience" match or "Not specified".
        education (List[str]): Raw degree matches, or ["Not specified"].
        raw_text (str): The full job description text.
    """
    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    experience_required: str = NOT_SPECIFIED
    education: List[str] = field(default_factory=lambda: [NOT_SPECIFIED])
    raw_text: str = ""


@dataclass
class AnalysisResult:
    """
    Outcome of scoring a resume against a job description. Recomputed on
    every analysis; never updated in place.
    """
    match_score: int
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)


@dataclass
class ChatMessage:
    """A single entry in a session's chat transcript."""
    role: ChatRole
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ChatResponse:
    """
    Grounded answer plus the section labels of the chunks it was grounded on,
    in retrieval order (duplicates allowed).
    """
    answer: str
    sources: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class Session:
    """
    Isolation unit for one resume / job description pairing and its derived state.
    """
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    resume_text: Optional[str] = None
    resume_data: Optional[ResumeData] = None
    job_description_text: Optional[str] = None
    job_description_data: Optional[JobDescriptionData] = None
    analysis: Optional[AnalysisResult] = None
    chat_history: List[ChatMessage] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
