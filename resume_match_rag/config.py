"""config.py
Holds various defaults for the resume matching and grounded answering pipeline.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class MatcherDefaults:
    """
    Default settings for parameters used across the resume_match_rag repo.
    """
    # ---- EmbeddingClient settings ----
    EMBEDDING_PROVIDER: str = field(
        default = "openai",
        metadata = {
            "description": 'Embedding provider: "openai"'
    })
    EMBEDDING_MODEL_ID: str = field(
        default = "text-embedding-3-small",
        metadata = {
            "description": "Embedding model ID"
    })
    EMBEDDING_DIMENSIONS: int = field(
        default = 1536,
        metadata = {
            "description": "Length of every vector returned by the embedding model"
    })
    EMBEDDING_BATCH_SIZE: int = field(
        default = 20,
        metadata = {
            "description": "Maximum number of texts sent in a single embedding request"
    })

    # ---- LLMClient settings ----
    LLM_PROVIDER: str = field(
        default = "openai",
        metadata = {
            "description": 'LLM provider: "openai" or "anthropic"'
    })
    OPENAI_MODEL_ID: str = field(
        default = "gpt-4o-mini",
        metadata = {
            "description": "OpenAI chat model ID"
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID"
    })
    LLM_TEMPERATURE: float = field(
        default = 0.0,
        metadata = {
            "description": "Sampling temperature for grounded answers (minimum for reproducibility)"
    })
    LLM_MAX_TOKENS: int = field(
        default = 500,
        metadata = {
            "description": "Maximum tokens generated per answer"
    })
    NO_RESPONSE_MESSAGE: str = field(
        default = "No response generated.",
        metadata = {
            "description": "Answer substituted when the model returns no content"
    })

    # ---- GroundedAnsweringPipeline settings ----
    RETRIEVAL_TOP_K: int = field(
        default = 5,
        metadata = {
            "description": "Number of chunks retrieved as grounding context"
    })
    CONTEXT_DELIMITER: str = field(
        default = "\n\n---\n\n",
        metadata = {
            "description": "Separator placed between retrieved chunks in the grounding context"
    })

    # ---- Extraction settings ----
    SUMMARY_CHAR_LIMIT: int = field(
        default = 200,
        metadata = {
            "description": "Number of characters kept for the resume summary"
    })
    SUMMARY_LINE_COUNT: int = field(
        default = 3,
        metadata = {
            "description": "Number of leading lines joined to build the resume summary"
    })

    # ---- File loading settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 10.0,
        metadata = {
            "description": "Maximum allowed file size in MB"
    })


@dataclass
class ScoringConfig:
    """
    Heuristic weights and thresholds used by the match scorer. None of these
    values are derived; swap in a different instance to tune them.
    """
    # ---- Component weights ----
    SKILL_WEIGHT: float = field(
        default = 0.4,
        metadata = {
            "description": "Weight of the required skill coverage"
    })
    EXPERIENCE_WEIGHT: float = field(
        default = 0.3,
        metadata = {
            "description": "Weight of the experience comparison"
    })
    EDUCATION_WEIGHT: float = field(
        default = 0.2,
        metadata = {
            "description": "Weight of the education comparison"
    })
    BASELINE_SCORE: float = field(
        default = 0.1,
        metadata = {
            "description": "Flat contribution for factors that are not modelled"
    })

    # ---- Skill scoring ----
    NEUTRAL_SKILL_SCORE: float = field(
        default = 0.5,
        metadata = {
            "description": "Skill score used when the job lists no required skills"
    })

    # ---- Experience scoring ----
    UNSPECIFIED_EXPERIENCE_SCORE: float = field(
        default = 0.7,
        metadata = {
            "description": "Experience score used when the job states no year requirement (or zero years)"
    })
    PARTIAL_EXPERIENCE_RATIO: float = field(
        default = 0.7,
        metadata = {
            "description": "Fraction of required years that still earns partial credit"
    })
    PARTIAL_EXPERIENCE_SCORE: float = field(
        default = 0.7,
        metadata = {
            "description": "Experience score for candidates above the partial ratio"
    })
    LOW_EXPERIENCE_SCORE: float = field(
        default = 0.4,
        metadata = {
            "description": "Experience score for candidates below the partial ratio"
    })
    LOW_EXPERIENCE_GAP_THRESHOLD: float = field(
        default = 0.5,
        metadata = {
            "description": "Experience scores below this value add a gap entry"
    })
    SENIOR_EXPERIENCE_YEARS: int = field(
        default = 5,
        metadata = {
            "description": "Years of experience that count as a strength"
    })

    # ---- Education scoring ----
    NO_EDUCATION_REQUIREMENT_SCORE: float = field(
        default = 0.8,
        metadata = {
            "description": "Education score used when the job lists no education entries"
    })
    DEGREE_MATCH_SCORE: float = field(
        default = 1.0,
        metadata = {
            "description": "Education score when the resume mentions a degree"
    })
    NO_DEGREE_SCORE: float = field(
        default = 0.5,
        metadata = {
            "description": "Education score when the resume mentions no degree"
    })

    # ---- Narrative ----
    STRONG_MATCH_THRESHOLD: float = field(
        default = 0.7,
        metadata = {
            "description": "Total score (0-1) at or above which the candidate is a strong match"
    })
    MODERATE_MATCH_THRESHOLD: float = field(
        default = 0.5,
        metadata = {
            "description": "Total score (0-1) at or above which the candidate is a moderate match"
    })
    MAX_NARRATIVE_ITEMS: int = field(
        default = 5,
        metadata = {
            "description": "Maximum entries kept in strengths and gaps"
    })
    TOP_SKILLS_LISTED: int = field(
        default = 3,
        metadata = {
            "description": "Number of skills named in a strength or gap entry"
    })


# Import these where needed
MATCHER_DEFAULTS = MatcherDefaults()
SCORING_DEFAULTS = ScoringConfig()
