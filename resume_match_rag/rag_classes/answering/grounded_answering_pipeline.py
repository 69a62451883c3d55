"""grounded_answering_pipeline.py
Indexes session documents and answers questions using only retrieved chunks.
"""
from typing import List, Optional

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.exceptions import (
    AnsweringError,
    EmbeddingError,
    LLMEmptyResponse,
    LLMError,
)
from resume_match_rag.models import ChatMessage, ChatResponse, DocumentType

from resume_match_rag.rag_classes.embeddings.embedding_client import EmbeddingClient
from resume_match_rag.rag_classes.llm.llm_client import LLMClient
from resume_match_rag.rag_classes.llm.llm_helpers import (
    initialize_embeddings_if_needed,
    initialize_llm_if_needed,
)
from resume_match_rag.rag_classes.segmenter.text_segmenter import TextSegmenter
from resume_match_rag.rag_classes.vector_index.vector_index import VectorIndex

from resume_match_rag.rag_classes.answering.prompts import (
    GROUNDED_SYSTEM_PROMPT,
    NO_INFORMATION_ANSWER,
    build_context,
    build_user_prompt,
)

GROUNDED_ANSWER_FUNCTION_NAME = "grounded_answer"


class GroundedAnsweringPipeline:
    """
    Retrieval-augmented answering over one session's indexed documents.

    Indexing: segment -> embed_batch -> VectorIndex.store.
    Answering: embed question -> query_similar(top_k) -> build context ->
    single deterministic chat completion.

    Prior chat history is accepted but never sent to the model: each question
    is answered against the current retrieval context only.

    Args:
        vector_index (VectorIndex): Store shared with the session layer.
        embedding_client (EmbeddingClient | None): Defaults to a client built
            from MATCHER_DEFAULTS.
        llm_client (LLMClient | None): Defaults to a client built from
            MATCHER_DEFAULTS.
        segmenter (TextSegmenter | None): Defaults to a new TextSegmenter.
        top_k (int): Number of chunks used as grounding context.
    """

    def __init__(
        self,
        vector_index: VectorIndex,
        embedding_client: Optional[EmbeddingClient] = None,
        llm_client: Optional[LLMClient] = None,
        segmenter: Optional[TextSegmenter] = None,
        top_k: int = MATCHER_DEFAULTS.RETRIEVAL_TOP_K,
    ):
        self.vector_index = vector_index
        self.embedding_client = initialize_embeddings_if_needed(embedding_client)
        self.llm_client = initialize_llm_if_needed(
            llm_client,
            function_name=GROUNDED_ANSWER_FUNCTION_NAME,
            fallback_message=MATCHER_DEFAULTS.NO_RESPONSE_MESSAGE,
        )
        if self.llm_client.fallback_message is None:
            self.llm_client.fallback_message = MATCHER_DEFAULTS.NO_RESPONSE_MESSAGE
        self.segmenter = segmenter or TextSegmenter()
        self.top_k = top_k

    # ----------------------
    # INDEXING
    # ----------------------
    async def index_document(
        self,
        session_id: str,
        text: str,
        document_type: DocumentType,
    ) -> int:
        """
        Segment, embed and store a document for a session.

        Re-indexing the same document appends a second copy of its chunks.

        Returns:
            int: Number of chunks stored.

        Raises:
            EmbeddingError: If the embedding provider fails.
        """
        chunks = self.segmenter.segment(text, document_type)
        if not chunks:
            return 0

        vectors = await self.embedding_client.embed_batch([chunk.content for chunk in chunks])
        self.vector_index.store(session_id, chunks, vectors)
        return len(chunks)

    async def index_resume(self, session_id: str, text: str) -> int:
        return await self.index_document(session_id, text, "resume")

    async def index_job_description(self, session_id: str, text: str) -> int:
        return await self.index_document(session_id, text, "job_description")

    # ----------------------
    # ANSWERING
    # ----------------------
    async def answer(
        self,
        session_id: str,
        question: str,
        prior_history: Optional[List[ChatMessage]] = None,
    ) -> ChatResponse:
        """
        Answer `question` from the session's indexed chunks.

        Args:
            session_id (str): Session whose chunks are searched.
            question (str): Recruiter question.
            prior_history (Optional[List[ChatMessage]]): Accepted for interface
                parity with the chat flow; not included in the prompt.

        Returns:
            ChatResponse: The answer and the section labels of the retrieved
                chunks in grounding order. With nothing retrieved the answer is
                NO_INFORMATION_ANSWER and `sources` is empty.

        Raises:
            AnsweringError: If embedding the question or the model call fails.
        """
        try:
            query_vector = await self.embedding_client.embed(question)
        except EmbeddingError as e:
            raise AnsweringError(
                session_id=session_id,
                message="Failed to embed question",
                original_exception=e,
            )

        chunks = self.vector_index.query_similar(session_id, query_vector, self.top_k)
        if not chunks:
            return ChatResponse(answer=NO_INFORMATION_ANSWER, sources=[])

        user_prompt = build_user_prompt(build_context(chunks), question)

        try:
            answer = await self.llm_client.aquery(
                system_prompt=GROUNDED_SYSTEM_PROMPT,
                user_prompt=user_prompt,
                temperature=MATCHER_DEFAULTS.LLM_TEMPERATURE,
                max_tokens=MATCHER_DEFAULTS.LLM_MAX_TOKENS,
            )
        except LLMEmptyResponse:
            answer = MATCHER_DEFAULTS.NO_RESPONSE_MESSAGE
        except LLMError as e:
            raise AnsweringError(
                session_id=session_id,
                message="Failed to answer question",
                original_exception=e,
            )

        return ChatResponse(answer=answer, sources=[chunk.section for chunk in chunks])
