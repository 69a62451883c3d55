"""test_field_extractor.py
Test the abstract FieldExtractor class
"""

import pytest

from resume_match_rag.exceptions import FieldExtractionError, FieldExtractionConfigError
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor
from resume_match_rag.test_helpers.dummy_classes import DummyExtractor


class TestFieldExtractorInit:
    """Initialization and extraction method validation."""

    def test_cannot_instantiate_directly(self):
        """Ensure abstract FieldExtractor cannot be instantiated directly."""
        with pytest.raises(TypeError):
            FieldExtractor()

    def test_default_extraction_method_is_used(self):
        extractor = DummyExtractor("text")
        assert extractor.extraction_method == "regex"

    def test_valid_extraction_method(self):
        extractor = DummyExtractor(extraction_method="keyword")
        assert extractor.extraction_method == "keyword"

    def test_unsupported_extraction_method_raises(self):
        with pytest.raises(NotImplementedError):
            DummyExtractor(extraction_method="rule")

    def test_missing_supported_methods_raises(self):
        class NoMethodsExtractor(FieldExtractor):
            SUPPORTED_EXTRACTION_METHODS = []

            def extract(self):
                return None

        with pytest.raises(ValueError):
            NoMethodsExtractor("text")


class TestFieldExtractorExtract:
    """The text requirement and regex helper."""

    def test_extract_requires_text(self):
        with pytest.raises(FieldExtractionConfigError):
            DummyExtractor().extract()

    def test_extract_after_text_assigned(self):
        extractor = DummyExtractor()
        extractor.text = "anything"
        assert extractor.extract() == ["dummy"]

    def test_regex_search_returns_match(self):
        extractor = DummyExtractor("Worked 7 YEARS at Acme")
        match = extractor._regex_search(r"(\d+)\s*years")
        assert match.group(1) == "7"

    def test_regex_search_case_sensitive(self):
        extractor = DummyExtractor("Worked 7 YEARS at Acme")
        with pytest.raises(FieldExtractionError):
            extractor._regex_search(r"(\d+)\s*years", ignore_case=False)

    def test_regex_search_no_match_raises_with_preview(self):
        extractor = DummyExtractor("x" * 500)
        with pytest.raises(FieldExtractionError) as exc_info:
            extractor._regex_search(r"\d+")
        assert len(exc_info.value.text_preview) == FieldExtractionError.PREVIEW_LENGTH

    def test_regex_search_dotall(self):
        extractor = DummyExtractor("start\nmiddle\nend")
        assert extractor._regex_search(r"start(.*)end", dotall=True).group(1) == "\nmiddle\n"
        with pytest.raises(FieldExtractionError):
            extractor._regex_search(r"start(.*)end")
