"""education_extractor.py
Extracts degree mentions from resume / job description text.
"""
from typing import List

from resume_match_rag.exceptions import FieldExtractionError
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor


class EducationExtractor(FieldExtractor):
    """
    Applies an ordered list of degree patterns and collects the first match of
    every pattern that matches.

    Supports:
        - 'regex'
    """

    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    # Bachelor's, master's, doctorate, abbreviated forms
    EDUCATION_REGEX = [
        r"bachelor'?s?\s+(?:of\s+)?(?:science|arts|engineering)?\s+(?:in\s+)?([^\n,]+)",
        r"master'?s?\s+(?:of\s+)?(?:science|arts|engineering)?\s+(?:in\s+)?([^\n,]+)",
        r"\b(?:phd|doctorate)\b",
        r"\b(?:B\.?S|M\.?S|Ph\.?D)\b\.?",
    ]

    def extract(self) -> List[str]:
        """
        Returns:
            List[str]: Matched degree strings in pattern order.

        Raises:
            FieldExtractionError: If no degree pattern matches.
        """
        education = []
        for pattern in self.EDUCATION_REGEX:
            try:
                match = self._regex_search(pattern)
            except FieldExtractionError:
                continue
            education.append(match.group(0).strip())

        if not education:
            raise FieldExtractionError(
                field_name="education",
                message="No degree pattern matched",
                text=self.text,
            )
        return education
