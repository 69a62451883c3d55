"""test_matching_engine.py
End-to-end extraction and scoring through MatchingEngine.
"""
from resume_match_rag.config import ScoringConfig
from resume_match_rag.models import JobDescriptionData, ResumeData
from resume_match_rag.rag_classes.matching.extractor_map import build_default_resume_extractor_map
from resume_match_rag.rag_classes.matching.matching_engine import (
    FactExtractor,
    MatchingEngine,
    PatternFactExtractor,
)
from resume_match_rag.rag_classes.matching.match_scorer import INSIGHT_STRONG
from resume_match_rag.test_helpers.dummy_classes import DummyExtractor, FixedFactExtractor
from resume_match_rag.test_helpers.sample_documents import (
    SAMPLE_JOB_DESCRIPTION_TEXT,
    SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT,
    SAMPLE_RESUME_TEXT,
)


class TestMatchingEngine:

    def test_default_fact_extractor(self):
        engine = MatchingEngine()
        assert isinstance(engine.fact_extractor, PatternFactExtractor)
        assert isinstance(engine.fact_extractor, FactExtractor)

    def test_reference_pair_end_to_end(self):
        engine = MatchingEngine()
        resume = engine.extract_resume_data(SAMPLE_RESUME_TEXT)
        jd = engine.extract_job_description_data(SAMPLE_JOB_DESCRIPTION_TEXT)

        assert {"Python", "AWS", "Docker"} <= set(resume.skills)
        assert resume.experience_years == 5
        assert resume.education == ["Bachelor of Science in Computer Science"]
        assert {"Python", "Kubernetes"} <= set(jd.required_skills)
        assert jd.experience_required == "3+ years experience"

        result = engine.score(resume, jd)
        assert result.match_score == 80
        assert result.insights == [INSIGHT_STRONG]

    def test_analyze_matches_manual_steps(self):
        engine = MatchingEngine()
        manual = engine.score(
            engine.extract_resume_data(SAMPLE_RESUME_TEXT),
            engine.extract_job_description_data(SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT),
        )
        assert engine.analyze(SAMPLE_RESUME_TEXT, SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT) == manual

    def test_job_description_with_preferred_section(self):
        jd = MatchingEngine().extract_job_description_data(SAMPLE_JOB_DESCRIPTION_WITH_PREFERRED_TEXT)

        assert jd.required_skills == ["Python", "SQL", "Docker", "Kubernetes"]
        assert jd.preferred_skills == ["Docker", "Kubernetes"]
        assert jd.experience_required == "5+ years of experience"
        assert jd.education == ["Master of Science in Computer Science"]

    def test_custom_fact_extractor(self):
        resume = ResumeData(skills=["Python"], experience_years=2, education=["Bachelor of Arts"])
        jd = JobDescriptionData(required_skills=["Python"], experience_required="2 years experience")
        engine = MatchingEngine(fact_extractor=FixedFactExtractor(resume, jd))

        assert engine.extract_resume_data("ignored") is resume
        assert engine.analyze("ignored", "ignored").match_score == 100

    def test_custom_extractor_map_builder(self):
        def builder():
            extractor_map = build_default_resume_extractor_map()
            extractor_map["skills"] = [DummyExtractor()]
            return extractor_map

        engine = MatchingEngine(fact_extractor=PatternFactExtractor(resume_extractor_map_builder=builder))
        assert engine.extract_resume_data(SAMPLE_RESUME_TEXT).skills == ["dummy"]

    def test_scoring_config_passed_through(self):
        config = ScoringConfig(BASELINE_SCORE=0.0)
        engine = MatchingEngine(scoring_config=config)
        assert engine.scorer.config is config
        assert engine.analyze(SAMPLE_RESUME_TEXT, SAMPLE_JOB_DESCRIPTION_TEXT).match_score == 70
