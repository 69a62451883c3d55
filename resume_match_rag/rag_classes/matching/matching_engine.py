"""matching_engine.py
Public entry point for structured-fact extraction and resume / job description scoring.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

from resume_match_rag.config import ScoringConfig
from resume_match_rag.models import AnalysisResult, JobDescriptionData, ResumeData

from resume_match_rag.rag_classes.matching.document_extractor import DocumentExtractor
from resume_match_rag.rag_classes.matching.extractor_map import (
    ExtractorMap,
    build_default_job_description_extractor_map,
    build_default_resume_extractor_map,
)
from resume_match_rag.rag_classes.matching.match_scorer import MatchScorer


class FactExtractor(ABC):
    """
    Strategy that turns unstructured document text into structured data.

    Implementations must be total: malformed or empty input degrades to
    default values instead of raising. Swap in a different implementation
    (e.g. a learned model) without touching the scorer.
    """

    @abstractmethod
    def extract_resume_data(self, text: str) -> ResumeData:
        pass

    @abstractmethod
    def extract_job_description_data(self, text: str) -> JobDescriptionData:
        pass


class PatternFactExtractor(FactExtractor):
    """
    Keyword / regex based FactExtractor backed by extractor maps.

    Args:
        resume_extractor_map_builder (Callable[[], ExtractorMap] | None): Returns
            the extractor map used for resumes. Defaults to
            `build_default_resume_extractor_map`.
        job_description_extractor_map_builder (Callable[[], ExtractorMap] | None):
            Returns the extractor map used for job descriptions. Defaults to
            `build_default_job_description_extractor_map`.
    """

    def __init__(
        self,
        resume_extractor_map_builder: Optional[Callable[[], ExtractorMap]] = None,
        job_description_extractor_map_builder: Optional[Callable[[], ExtractorMap]] = None,
    ):
        self.resume_extractor_map_builder = (
            resume_extractor_map_builder or build_default_resume_extractor_map
        )
        self.job_description_extractor_map_builder = (
            job_description_extractor_map_builder or build_default_job_description_extractor_map
        )

    def extract_resume_data(self, text: str) -> ResumeData:
        return DocumentExtractor(
            text=text,
            extractor_map=self.resume_extractor_map_builder(),
            data_class=ResumeData,
        ).extract()

    def extract_job_description_data(self, text: str) -> JobDescriptionData:
        return DocumentExtractor(
            text=text,
            extractor_map=self.job_description_extractor_map_builder(),
            data_class=JobDescriptionData,
        ).extract()


class MatchingEngine:
    """
    Combines a FactExtractor with a MatchScorer.

    Example:
        >>> engine = MatchingEngine()
        >>> resume = engine.extract_resume_data(resume_text)
        >>> jd = engine.extract_job_description_data(jd_text)
        >>> engine.score(resume, jd).match_score
        80
    """

    def __init__(
        self,
        fact_extractor: Optional[FactExtractor] = None,
        scoring_config: Optional[ScoringConfig] = None,
    ):
        self.fact_extractor = fact_extractor or PatternFactExtractor()
        self.scorer = MatchScorer(config=scoring_config)

    def extract_resume_data(self, text: str) -> ResumeData:
        return self.fact_extractor.extract_resume_data(text)

    def extract_job_description_data(self, text: str) -> JobDescriptionData:
        return self.fact_extractor.extract_job_description_data(text)

    def score(self, resume: ResumeData, jd: JobDescriptionData) -> AnalysisResult:
        return self.scorer.score(resume, jd)

    def analyze(self, resume_text: str, job_description_text: str) -> AnalysisResult:
        """Extract both documents and score them in one call."""
        return self.score(
            self.extract_resume_data(resume_text),
            self.extract_job_description_data(job_description_text),
        )
