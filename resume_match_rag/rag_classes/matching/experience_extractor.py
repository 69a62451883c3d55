"""experience_extractor.py
Extracts years of experience from resumes and experience requirements from job descriptions.
"""
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor


class ExperienceYearsExtractor(FieldExtractor):
    """
    Returns the integer from the first "<n> years" / "<n>+ year" phrase.

    Supports:
        - 'regex'
    """

    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    EXPERIENCE_YEARS_REGEX = r"(\d+)\+?\s*years?"

    def extract(self) -> int:
        """
        Raises:
            FieldExtractionError: If no year figure appears in the text.
        """
        match = self._regex_search(self.EXPERIENCE_YEARS_REGEX)
        return int(match.group(1))


class RequiredExperienceExtractor(FieldExtractor):
    """
    Returns the raw "<n>+ years of experience" phrase of a job description,
    e.g. "3+ years experience".

    Supports:
        - 'regex'
    """

    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    REQUIRED_EXPERIENCE_REGEX = r"(\d+)\+?\s*years?\s+(?:of\s+)?experience"

    def extract(self) -> str:
        """
        Raises:
            FieldExtractionError: If no experience requirement appears in the text.
        """
        return self._regex_search(self.REQUIRED_EXPERIENCE_REGEX).group(0)
