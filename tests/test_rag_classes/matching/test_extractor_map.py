"""test_extractor_map.py
Tests for extractor_map helper functions
"""

import pytest
from typing import Dict, List

from resume_match_rag.exceptions import ExtractorMapConfigError
from resume_match_rag.models import JobDescriptionData, ResumeData
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor
from resume_match_rag.rag_classes.matching.skills_extractor import (
    PreferredSkillsExtractor,
    SkillsExtractor,
)
from resume_match_rag.rag_classes.matching.experience_extractor import (
    ExperienceYearsExtractor,
    RequiredExperienceExtractor,
)
from resume_match_rag.rag_classes.matching.extractor_map import (
    build_default_job_description_extractor_map,
    build_default_resume_extractor_map,
    verify_extractor_map,
)
from resume_match_rag.test_helpers.dummy_classes import DummyExtractor


def make_valid_extractor_map() -> Dict[str, List[FieldExtractor]]:
    """Return a minimal valid extractor_map using DummyExtractor instances."""
    return {
        "skills": [DummyExtractor()],
        "education": [DummyExtractor()],
    }


# -------------------------
# Tests for verify_extractor_map
# -------------------------
class TestVerifyExtractorMap:
    """Tests for verify_extractor_map function."""

    def test_valid_map(self):
        verify_extractor_map(make_valid_extractor_map())
        verify_extractor_map(make_valid_extractor_map(), ResumeData)

    def test_not_a_dict(self):
        with pytest.raises(TypeError):
            verify_extractor_map(["not", "a", "dict"])

    def test_field_key_not_string(self):
        extractor_map = make_valid_extractor_map()
        extractor_map[123] = extractor_map.pop("skills")
        with pytest.raises(TypeError) as e:
            verify_extractor_map(extractor_map)
        assert "Field names in extractor_map must be strings" in str(e.value)

    def test_value_not_list(self):
        extractor_map = make_valid_extractor_map()
        extractor_map["skills"] = "not a list"
        with pytest.raises(TypeError) as e:
            verify_extractor_map(extractor_map)
        assert "Value for field 'skills' must be a list" in str(e.value)

    def test_item_not_field_extractor(self):
        extractor_map = make_valid_extractor_map()
        extractor_map["skills"] = ["not an extractor"]
        with pytest.raises(TypeError) as e:
            verify_extractor_map(extractor_map)
        assert "must be FieldExtractor instances" in str(e.value)

    def test_unknown_field_for_data_class(self):
        with pytest.raises(ExtractorMapConfigError):
            verify_extractor_map({"required_skills": [DummyExtractor()]}, ResumeData)

    def test_raw_text_is_not_extractable(self):
        with pytest.raises(ExtractorMapConfigError):
            verify_extractor_map({"raw_text": [DummyExtractor()]}, JobDescriptionData)


# -------------------------
# Tests for the default map builders
# -------------------------
class TestBuildDefaultExtractorMaps:

    def test_resume_map_fields(self):
        extractor_map = build_default_resume_extractor_map()
        assert set(extractor_map) == {"skills", "experience_years", "education", "summary"}
        assert isinstance(extractor_map["skills"][0], SkillsExtractor)
        assert isinstance(extractor_map["experience_years"][0], ExperienceYearsExtractor)
        verify_extractor_map(extractor_map, ResumeData)

    def test_job_description_map_fields(self):
        extractor_map = build_default_job_description_extractor_map()
        assert set(extractor_map) == {
            "required_skills", "preferred_skills", "experience_required", "education"
        }
        assert type(extractor_map["required_skills"][0]) is SkillsExtractor
        assert isinstance(extractor_map["preferred_skills"][0], PreferredSkillsExtractor)
        assert isinstance(extractor_map["experience_required"][0], RequiredExperienceExtractor)
        verify_extractor_map(extractor_map, JobDescriptionData)

    def test_extraction_methods_are_defaults(self):
        for extractors in build_default_resume_extractor_map().values():
            for extractor in extractors:
                assert extractor.extraction_method == type(extractor).DEFAULT_EXTRACTION_METHOD

    def test_text_is_bound_when_given(self):
        extractor_map = build_default_resume_extractor_map(text="Python")
        assert all(ex.text == "Python" for exs in extractor_map.values() for ex in exs)

    def test_each_call_builds_new_instances(self):
        first = build_default_resume_extractor_map()
        second = build_default_resume_extractor_map()
        assert first["skills"][0] is not second["skills"][0]
