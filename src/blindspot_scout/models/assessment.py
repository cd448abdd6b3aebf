"""Quality assessment model."""

from pydantic import BaseModel, ConfigDict, Field


class QualityAssessment(BaseModel):
    """Scores for one paper. Created once during scoring, never mutated."""

    model_config = ConfigDict(frozen=True)

    paper_id: str  # DOI, URL, title or content hash
    source_score: float = Field(ge=0.0, le=1.0)
    recency_score: float = Field(ge=0.0, le=1.0)
    text_relevance_score: float = Field(ge=0.0, le=1.0)
    overall_score: float = Field(ge=0.0, le=1.0)
    is_high_quality: bool
    rationale: str  # inclusion reason, or exclusion reason with score and threshold
