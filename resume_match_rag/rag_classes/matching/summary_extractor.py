"""summary_extractor.py
Builds the short resume summary shown alongside the analysis.
"""
from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor


class SummaryExtractor(FieldExtractor):
    """
    Joins the first few lines of the text with spaces and truncates the result.

    Supports:
        - 'rule'
    """

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    def extract(self) -> str:
        lines = self.text.split("\n")[:MATCHER_DEFAULTS.SUMMARY_LINE_COUNT]
        return " ".join(lines)[:MATCHER_DEFAULTS.SUMMARY_CHAR_LIMIT]
