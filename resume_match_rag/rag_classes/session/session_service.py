"""session_service.py
Orchestrates upload -> analyze -> chat flows for a session.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from resume_match_rag.exceptions import ExtractionInputError, MissingDocumentError
from resume_match_rag.logging import LoggerFactory
from resume_match_rag.models import (
    NOT_SPECIFIED,
    AnalysisResult,
    ChatMessage,
    ChatResponse,
)

from resume_match_rag.rag_classes.answering.grounded_answering_pipeline import GroundedAnsweringPipeline
from resume_match_rag.rag_classes.file_parser.helpers.clean_text import clean_text
from resume_match_rag.rag_classes.matching.matching_engine import MatchingEngine
from resume_match_rag.rag_classes.session.session_store import SessionStore

HIGHLIGHT_SKILL_LIMIT = 10

logger = LoggerFactory().get_logger(
    name="session_indexing",
    logger_type="indexing",
    console=True
)


@dataclass
class ResumeHighlights:
    skills: List[str] = field(default_factory=list)
    experience: str = "0 years"
    education: str = NOT_SPECIFIED


@dataclass
class AnalysisReport:
    """AnalysisResult for a session plus a short resume summary."""
    session_id: str
    analysis: AnalysisResult
    resume_highlights: ResumeHighlights


@dataclass
class SessionStatus:
    session_id: str
    has_resume: bool
    has_job_description: bool
    has_analysis: bool


class SessionService:
    """
    Request flows over a SessionStore, a MatchingEngine and a
    GroundedAnsweringPipeline.

    `analyze` schedules indexing of both documents as a background asyncio
    task on the running loop. `ask` awaits that task before retrieving, so a
    question asked right after analysis sees the indexed chunks. Running
    `analyze` again chains the new indexing after the pending one. Indexing
    failures are logged and leave the session with no indexed chunks.

    Args:
        pipeline (GroundedAnsweringPipeline): Shares its VectorIndex with the store.
        session_store (SessionStore | None): Defaults to a store over
            `pipeline.vector_index`.
        matching_engine (MatchingEngine | None): Defaults to MatchingEngine().
    """

    def __init__(
        self,
        pipeline: GroundedAnsweringPipeline,
        session_store: Optional[SessionStore] = None,
        matching_engine: Optional[MatchingEngine] = None,
    ):
        self.pipeline = pipeline
        self.session_store = session_store or SessionStore(vector_index=pipeline.vector_index)
        self.matching_engine = matching_engine or MatchingEngine()
        self._indexing_tasks: Dict[str, asyncio.Task] = {}

    # ----------------------
    # UPLOADS
    # ----------------------
    def upload_resume(self, text: str, session_id: Optional[str] = None) -> str:
        """
        Store resume text, creating a session when `session_id` is missing or unknown.

        Returns:
            str: The session id holding the resume.

        Raises:
            ExtractionInputError: If the text is empty after cleaning.
        """
        cleaned_text = self._clean_upload(text, "resume")

        if session_id is None or not self.session_store.exists(session_id):
            session = self.session_store.create_session()
        else:
            session = self.session_store.get(session_id)

        session.resume_text = cleaned_text
        return session.id

    def upload_job_description(self, session_id: str, text: str) -> str:
        """
        Raises:
            SessionNotFoundError: If the session does not exist (upload a resume first).
            ExtractionInputError: If the text is empty after cleaning.
        """
        session = self.session_store.get(session_id)
        session.job_description_text = self._clean_upload(text, "job_description")
        return session.id

    @staticmethod
    def _clean_upload(text: str, document_type: str) -> str:
        cleaned_text = clean_text(text) if isinstance(text, str) else ""
        if not cleaned_text:
            raise ExtractionInputError(document_type)
        return cleaned_text

    # ----------------------
    # ANALYSIS
    # ----------------------
    async def analyze(self, session_id: str) -> AnalysisReport:
        """
        Extract, score and store results, then schedule background indexing.

        Raises:
            SessionNotFoundError: If the session does not exist.
            MissingDocumentError: If the resume or job description is missing.
        """
        session = self.session_store.get(session_id)
        if not session.resume_text:
            raise MissingDocumentError(session_id, "resume")
        if not session.job_description_text:
            raise MissingDocumentError(session_id, "job_description")

        resume_data = self.matching_engine.extract_resume_data(session.resume_text)
        jd_data = self.matching_engine.extract_job_description_data(session.job_description_text)
        analysis = self.matching_engine.score(resume_data, jd_data)

        session.resume_data = resume_data
        session.job_description_data = jd_data
        session.analysis = analysis

        previous_task = self._indexing_tasks.get(session_id)
        self._indexing_tasks[session_id] = asyncio.create_task(
            self._index_session_documents(
                session_id,
                session.resume_text,
                session.job_description_text,
                previous_task=previous_task,
            )
        )

        return AnalysisReport(
            session_id=session_id,
            analysis=analysis,
            resume_highlights=ResumeHighlights(
                skills=resume_data.skills[:HIGHLIGHT_SKILL_LIMIT],
                experience=f"{resume_data.experience_years} years",
                education=resume_data.education[0] if resume_data.education else NOT_SPECIFIED,
            ),
        )

    async def _index_session_documents(
        self,
        session_id: str,
        resume_text: str,
        job_description_text: str,
        previous_task: Optional[asyncio.Task] = None,
    ) -> None:
        # Earlier indexing of the same session finishes first
        if previous_task is not None and not previous_task.done():
            try:
                await asyncio.wait({previous_task})
            except asyncio.CancelledError:
                previous_task.cancel()
                raise

        try:
            await asyncio.gather(
                self.pipeline.index_resume(session_id, resume_text),
                self.pipeline.index_job_description(session_id, job_description_text),
            )
        except Exception as e:
            logger.error(f"Failed to index documents for session `{session_id}`: {e}")

    async def wait_for_indexing(self, session_id: str) -> None:
        """
        Block until the session has no pending indexing task.

        The task stays registered while it runs so every concurrent caller
        waits on it. Cancelling a waiter does not cancel the indexing.
        """
        while True:
            task = self._indexing_tasks.get(session_id)
            if task is None:
                return
            if task.done():
                if self._indexing_tasks.get(session_id) is task:
                    del self._indexing_tasks[session_id]
                return
            await asyncio.wait({task})

    # ----------------------
    # CHAT
    # ----------------------
    async def ask(self, session_id: str, question: str) -> ChatResponse:
        """
        Answer a question for a session and record both turns in its transcript.

        Raises:
            SessionNotFoundError: If the session does not exist.
            MissingDocumentError: If no resume was uploaded.
            ValueError: If `question` is blank.
            AnsweringError: If embedding or the model call fails.
        """
        session = self.session_store.get(session_id)
        if not isinstance(question, str) or not question.strip():
            raise ValueError("Question is required")
        if not session.resume_text:
            raise MissingDocumentError(session_id, "resume")

        await self.wait_for_indexing(session_id)

        session.chat_history.append(ChatMessage(role="user", content=question))
        response = await self.pipeline.answer(session_id, question, session.chat_history)
        session.chat_history.append(ChatMessage(role="assistant", content=response.answer))

        return response

    def history(self, session_id: str) -> List[ChatMessage]:
        return list(self.session_store.get(session_id).chat_history)

    def status(self, session_id: str) -> SessionStatus:
        session = self.session_store.get(session_id)
        return SessionStatus(
            session_id=session.id,
            has_resume=bool(session.resume_text),
            has_job_description=bool(session.job_description_text),
            has_analysis=session.analysis is not None,
        )

    def delete_session(self, session_id: str) -> None:
        task = self._indexing_tasks.pop(session_id, None)
        if task is not None:
            task.cancel()
        self.session_store.delete(session_id)
