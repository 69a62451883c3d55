"""extractor_map.py
Builds the "extractor_map" dictionaries used by DocumentExtractor to decide
which extractors fill each ResumeData / JobDescriptionData field.
"""
from dataclasses import fields
from typing import Dict, List, Optional

from resume_match_rag.exceptions import ExtractorMapConfigError

from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor
from resume_match_rag.rag_classes.matching.skills_extractor import SkillsExtractor, PreferredSkillsExtractor
from resume_match_rag.rag_classes.matching.experience_extractor import (
    ExperienceYearsExtractor,
    RequiredExperienceExtractor,
)
from resume_match_rag.rag_classes.matching.education_extractor import EducationExtractor
from resume_match_rag.rag_classes.matching.summary_extractor import SummaryExtractor

ExtractorMap = Dict[str, List[FieldExtractor]]

# Each field maps to a list of entries with 'model' and optional 'extraction_method'.
# Entries are tried in order until one succeeds.
DEFAULT_RESUME_EXTRACTOR_CLASSES = {
    "skills": [
        {"model": SkillsExtractor, "extraction_method": None},
    ],
    "experience_years": [
        {"model": ExperienceYearsExtractor, "extraction_method": None},
    ],
    "education": [
        {"model": EducationExtractor, "extraction_method": None},
    ],
    "summary": [
        {"model": SummaryExtractor, "extraction_method": None},
    ],
}

DEFAULT_JOB_DESCRIPTION_EXTRACTOR_CLASSES = {
    "required_skills": [
        {"model": SkillsExtractor, "extraction_method": None},
    ],
    "preferred_skills": [
        {"model": PreferredSkillsExtractor, "extraction_method": None},
    ],
    "experience_required": [
        {"model": RequiredExperienceExtractor, "extraction_method": None},
    ],
    "education": [
        {"model": EducationExtractor, "extraction_method": None},
    ],
}


def _instantiate_extractor_map(
    extractor_classes_map: dict,
    text: Optional[str] = None,
) -> ExtractorMap:
    """Create one extractor instance per entry, bound to `text` when given."""
    extractor_map = {}
    for field_name, entries in extractor_classes_map.items():
        extractor_map[field_name] = []
        for entry in entries:
            model_cls = entry["model"]
            extraction_method = entry.get("extraction_method") or model_cls.DEFAULT_EXTRACTION_METHOD
            extractor_map[field_name].append(
                model_cls(text=text, extraction_method=extraction_method)
            )
    return extractor_map


def build_default_resume_extractor_map(text: Optional[str] = None) -> ExtractorMap:
    """
    Builds the default extractor map for resumes.

    Returns:
        dict: Mapping of ResumeData field names -> list of extractor instances.

    Example:
        {
            "skills": [SkillsExtractor()],
            "experience_years": [ExperienceYearsExtractor()],
            "education": [EducationExtractor()],
            "summary": [SummaryExtractor()],
        }
    """
    return _instantiate_extractor_map(DEFAULT_RESUME_EXTRACTOR_CLASSES, text=text)


def build_default_job_description_extractor_map(text: Optional[str] = None) -> ExtractorMap:
    """
    Builds the default extractor map for job descriptions.

    Returns:
        dict: Mapping of JobDescriptionData field names -> list of extractor instances.
    """
    return _instantiate_extractor_map(DEFAULT_JOB_DESCRIPTION_EXTRACTOR_CLASSES, text=text)


def verify_extractor_map(
    extractor_map: Optional[ExtractorMap],
    data_class: Optional[type] = None,
) -> None:
    """
    Verifies the format and content of the extractor map.

    This method performs validation checks on the extractor_map dictionary to ensure:
    1. The extractor_map is a dictionary
    2. All keys (fields) are strings
    3. All values are lists
    4. All items in the lists are FieldExtractor instances
    5. When `data_class` is given, every key names one of its fields (other than `raw_text`)

    Raises:
        TypeError: If the structure of the map is wrong.
        ExtractorMapConfigError: If a key does not name a field of `data_class`.
    """
    if not isinstance(extractor_map, dict):
        raise TypeError(
            f"extractor_map must be a dictionary, got {type(extractor_map).__name__}"
        )

    allowed_fields = None
    if data_class is not None:
        allowed_fields = {f.name for f in fields(data_class)} - {"raw_text"}

    for field_name, extractors in extractor_map.items():
        if not isinstance(field_name, str):
            raise TypeError(
                f"Field names in extractor_map must be strings, got {type(field_name).__name__}"
            )
        if allowed_fields is not None and field_name not in allowed_fields:
            raise ExtractorMapConfigError(
                f"Field '{field_name}' is not a field of {data_class.__name__}. "
                f"Allowed fields: {sorted(allowed_fields)}"
            )
        if not isinstance(extractors, list):
            raise TypeError(
                f"Value for field '{field_name}' must be a list, got {type(extractors).__name__}"
            )
        for extractor in extractors:
            if not isinstance(extractor, FieldExtractor):
                raise TypeError(
                    f"All items in extractor list for field '{field_name}' must be "
                    f"FieldExtractor instances, got {type(extractor).__name__}"
                )
