"""skills_extractor.py
Extracts canonical skill names from resume / job description text.
"""
from typing import List, Optional

from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor, EXTRACTION_METHODS

# Canonical vocabulary, in the order results are reported
DEFAULT_SKILL_VOCABULARY = [
    "JavaScript", "TypeScript", "Python", "Java", "C++", "Node.js", "React", "Angular", "Vue",
    "Express", "Django", "Flask", "Spring", "SQL", "PostgreSQL", "MySQL", "MongoDB",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Git", "CI/CD", "Agile", "Scrum",
    "REST", "GraphQL", "Redis", "Elasticsearch", "Microservices", "System Design",
]


class SkillsExtractor(FieldExtractor):
    """
    Finds vocabulary skills mentioned anywhere in the text.

    A skill is present when its lowercase form is a substring of the lowercased
    text, so "Java" also matches inside "JavaScript". Results follow vocabulary
    order and are deduplicated.

    Supports:
        - 'keyword': Substring search over `vocabulary`.
    """

    SUPPORTED_EXTRACTION_METHODS = ["keyword"]
    DEFAULT_EXTRACTION_METHOD = "keyword"

    def __init__(
        self,
        text: Optional[str] = None,
        extraction_method: Optional[EXTRACTION_METHODS] = None,
        vocabulary: Optional[List[str]] = None,
    ):
        super().__init__(text=text, extraction_method=extraction_method)
        self.vocabulary = vocabulary or DEFAULT_SKILL_VOCABULARY

    def extract(self) -> List[str]:
        """
        Returns:
            List[str]: Matched skills (may be empty).

        Raises:
            NotImplementedError: If extraction method is unsupported.
        """
        if self.extraction_method == "keyword":
            return self._keyword_extract(self.text)
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for SkillsExtractor."
        )

    def _keyword_extract(self, text: str) -> List[str]:
        lowered = text.lower()
        skills = []
        for skill in self.vocabulary:
            if skill.lower() in lowered and skill not in skills:
                skills.append(skill)
        return skills


class PreferredSkillsExtractor(SkillsExtractor):
    """
    Finds vocabulary skills inside the "preferred" span of a job description:
    the text between a "preferred" marker and the next "required" /
    "responsibilities" marker (or the end of the text).

    Supports:
        - 'keyword': Regex span capture followed by the SkillsExtractor keyword search.
    """

    PREFERRED_SECTION_REGEX = r"preferred[:\s]+(.*?)(?=required|responsibilities|\Z)"

    def extract(self) -> List[str]:
        """
        Returns:
            List[str]: Skills found in the preferred span (may be empty).

        Raises:
            FieldExtractionError: If the text has no "preferred" span.
        """
        if self.extraction_method != "keyword":
            raise NotImplementedError(
                f"Extraction method '{self.extraction_method}' is not implemented for PreferredSkillsExtractor."
            )
        match = self._regex_search(self.PREFERRED_SECTION_REGEX, dotall=True)
        return self._keyword_extract(match.group(1))
