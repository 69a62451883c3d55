"""match_scorer.py
Deterministic weighted scoring of ResumeData against JobDescriptionData.
"""
import math
import re
from dataclasses import dataclass
from typing import List, Optional

from resume_match_rag.config import SCORING_DEFAULTS, ScoringConfig
from resume_match_rag.models import AnalysisResult, JobDescriptionData, ResumeData

DEGREE_KEYWORDS = ["bachelor", "master", "phd"]
STRENGTH_DEGREE_KEYWORDS = ["bachelor", "master"]

INSIGHT_STRONG = "Strong candidate for this position"
INSIGHT_MODERATE = "Moderate match with some development potential"
INSIGHT_DEVELOPMENT = "May require significant training or development"


@dataclass
class SkillComparison:
    """Result of comparing resume skills to job skills (case-insensitive)."""
    matched_skills: List[str]
    missing_skills: List[str]
    required_match_count: int
    skill_score: float


class MatchScorer:
    """
    Computes the weighted match score plus strengths, gaps and insights.

    total = skill * SKILL_WEIGHT + experience * EXPERIENCE_WEIGHT
            + education * EDUCATION_WEIGHT + BASELINE_SCORE
    match_score = round(100 * total)

    All weights and thresholds come from a ScoringConfig, so scoring is a pure
    function of (resume, job description, config).
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or SCORING_DEFAULTS

    # ----------------------
    # COMPONENT SCORES
    # ----------------------
    def compare_skills(
        self,
        resume_skills: List[str],
        required_skills: List[str],
        preferred_skills: List[str],
    ) -> SkillComparison:
        """
        matched = resume skills found in required or preferred (resume order),
        missing = required skills absent from the resume (job order),
        skill_score = |required matched| / |required|, or the neutral score if
        the job lists no required skills.
        """
        resume_set = {s.lower() for s in resume_skills}
        required_set = {s.lower() for s in required_skills}
        preferred_set = {s.lower() for s in preferred_skills}

        matched_skills = [
            s for s in resume_skills
            if s.lower() in required_set or s.lower() in preferred_set
        ]
        missing_skills = [s for s in required_skills if s.lower() not in resume_set]
        required_match_count = sum(1 for s in required_skills if s.lower() in resume_set)

        if required_skills:
            skill_score = required_match_count / len(required_skills)
        else:
            skill_score = self.config.NEUTRAL_SKILL_SCORE

        return SkillComparison(
            matched_skills=matched_skills,
            missing_skills=missing_skills,
            required_match_count=required_match_count,
            skill_score=skill_score,
        )

    def compare_experience(self, resume_years: int, experience_required: str) -> float:
        """
        Score resume years against the leading integer of the job's requirement.
        A missing or zero requirement is treated as unspecified.
        """
        match = re.search(r"(\d+)", experience_required or "")
        required_years = int(match.group(1)) if match else 0
        if required_years == 0:
            return self.config.UNSPECIFIED_EXPERIENCE_SCORE

        if resume_years >= required_years:
            return 1.0
        if resume_years >= required_years * self.config.PARTIAL_EXPERIENCE_RATIO:
            return self.config.PARTIAL_EXPERIENCE_SCORE
        return self.config.LOW_EXPERIENCE_SCORE

    def compare_education(self, resume_education: List[str], job_education: List[str]) -> float:
        """
        An empty job education list counts as "no requirement". The
        "Not specified" sentinel is a non-empty list and is scored like any
        other requirement.
        """
        if not job_education:
            return self.config.NO_EDUCATION_REQUIREMENT_SCORE

        resume_str = " ".join(resume_education).lower()
        if any(keyword in resume_str for keyword in DEGREE_KEYWORDS):
            return self.config.DEGREE_MATCH_SCORE
        return self.config.NO_DEGREE_SCORE

    # ----------------------
    # FULL SCORE
    # ----------------------
    def score(self, resume: ResumeData, jd: JobDescriptionData) -> AnalysisResult:
        """
        Score a resume against a job description.

        Returns:
            AnalysisResult: Integer match score (0-100), at most MAX_NARRATIVE_ITEMS
                strengths and gaps, and exactly one insight.
        """
        cfg = self.config
        strengths: List[str] = []
        gaps: List[str] = []

        skills = self.compare_skills(resume.skills, jd.required_skills, jd.preferred_skills)
        total_score = skills.skill_score * cfg.SKILL_WEIGHT

        if skills.matched_skills:
            strengths.append(
                f"Strong match in {', '.join(skills.matched_skills[:cfg.TOP_SKILLS_LISTED])}"
            )
        if skills.missing_skills:
            gaps.append(f"Missing: {', '.join(skills.missing_skills[:cfg.TOP_SKILLS_LISTED])}")

        experience_score = self.compare_experience(resume.experience_years, jd.experience_required)
        total_score += experience_score * cfg.EXPERIENCE_WEIGHT

        if resume.experience_years >= cfg.SENIOR_EXPERIENCE_YEARS:
            strengths.append(f"{resume.experience_years}+ years of experience")
        if experience_score < cfg.LOW_EXPERIENCE_GAP_THRESHOLD:
            gaps.append(f"May need more experience ({resume.experience_years} years)")

        education_score = self.compare_education(resume.education, jd.education)
        total_score += education_score * cfg.EDUCATION_WEIGHT

        if resume.education:
            first_entry = resume.education[0]
            if any(keyword in first_entry.lower() for keyword in STRENGTH_DEGREE_KEYWORDS):
                strengths.append(first_entry)

        total_score += cfg.BASELINE_SCORE

        return AnalysisResult(
            match_score=math.floor(total_score * 100 + 0.5),
            strengths=strengths[:cfg.MAX_NARRATIVE_ITEMS],
            gaps=gaps[:cfg.MAX_NARRATIVE_ITEMS],
            insights=[self._select_insight(total_score)],
        )

    def _select_insight(self, total_score: float) -> str:
        """Pick the qualitative sentence from the 0-1 total score."""
        if total_score >= self.config.STRONG_MATCH_THRESHOLD:
            return INSIGHT_STRONG
        if total_score >= self.config.MODERATE_MATCH_THRESHOLD:
            return INSIGHT_MODERATE
        return INSIGHT_DEVELOPMENT
