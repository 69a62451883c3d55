"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from typing import List

from resume_match_rag.models import JobDescriptionData, ResumeData
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor
from resume_match_rag.rag_classes.matching.matching_engine import FactExtractor
from resume_match_rag.exceptions import FieldExtractionError

# Dummy subclass for testing where needed
class DummyExtractor(FieldExtractor):
    """A dummy FieldExtractor subclass for testing."""
    SUPPORTED_EXTRACTION_METHODS = ["regex", "keyword"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    def extract(self) -> List[str]:
        # Minimal implementation for testing
        return ["dummy"]


class FailingExtractor(FieldExtractor):
    """Always reports that nothing was found."""
    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    def extract(self):
        raise FieldExtractionError(message="Nothing to find", text=self.text)


class FixedFactExtractor(FactExtractor):
    """FactExtractor returning preset data regardless of the text."""

    def __init__(self, resume: ResumeData, job_description: JobDescriptionData):
        self.resume = resume
        self.job_description = job_description

    def extract_resume_data(self, text: str) -> ResumeData:
        return self.resume

    def extract_job_description_data(self, text: str) -> JobDescriptionData:
        return self.job_description
