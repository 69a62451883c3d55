"""test_skills_extractor.py
Run tests on SkillsExtractor and PreferredSkillsExtractor
"""
import pytest

from resume_match_rag.exceptions import FieldExtractionError
from resume_match_rag.rag_classes.matching.skills_extractor import (
    DEFAULT_SKILL_VOCABULARY,
    PreferredSkillsExtractor,
    SkillsExtractor,
)
from resume_match_rag.test_helpers.sample_documents import (
    SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT,
    SAMPLE_RESUME_TEXT,
)


class TestSkillsExtractor:

    def test_sample_resume_skills(self):
        assert SkillsExtractor(SAMPLE_RESUME_TEXT).extract() == ["Python", "AWS", "Docker"]

    def test_results_follow_vocabulary_order(self):
        skills = SkillsExtractor("docker, kubernetes and python").extract()
        assert skills == ["Python", "Docker", "Kubernetes"]

    def test_case_insensitive(self):
        assert SkillsExtractor("POSTGRESQL and graphql").extract() == ["SQL", "PostgreSQL", "GraphQL"]

    @pytest.mark.parametrize("text,expected_subset", [
        ("Expert in JavaScript", {"JavaScript", "Java"}),
        ("Built CI/CD pipelines with Git", {"CI/CD", "Git"}),
        ("Node.js and C++ services", {"Node.js", "C++"}),
    ])
    def test_substring_matching(self, text, expected_subset):
        """Substring matching means "Java" is also found inside "JavaScript"."""
        assert expected_subset <= set(SkillsExtractor(text).extract())

    def test_no_skills_returns_empty_list(self):
        assert SkillsExtractor("I enjoy hiking.").extract() == []

    def test_custom_vocabulary(self):
        extractor = SkillsExtractor("Rust and Go developer", vocabulary=["Rust", "Go"])
        assert extractor.extract() == ["Rust", "Go"]

    def test_default_vocabulary_unique(self):
        assert len(DEFAULT_SKILL_VOCABULARY) == len(set(DEFAULT_SKILL_VOCABULARY))


class TestPreferredSkillsExtractor:

    def test_preferred_span_until_responsibilities(self):
        extractor = PreferredSkillsExtractor(SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT)
        assert extractor.extract() == ["Docker", "Kubernetes"]

    def test_preferred_span_until_required(self):
        text = "Preferred: Redis\nRequired: Python"
        assert PreferredSkillsExtractor(text).extract() == ["Redis"]

    def test_preferred_span_to_end_of_text(self):
        text = "Requirements: Python\nPreferred qualifications\nAWS, GCP"
        assert PreferredSkillsExtractor(text).extract() == ["AWS", "GCP"]

    def test_no_preferred_marker_raises(self):
        with pytest.raises(FieldExtractionError):
            PreferredSkillsExtractor("Requirements: Python").extract()
