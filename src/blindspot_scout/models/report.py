"""Analysis and report output models."""

from pydantic import BaseModel, ConfigDict

from blindspot_scout.models.blind_spot import BlindSpot
from blindspot_scout.models.coverage import PopulationCoverage


class AnalysisResult(BaseModel):
    """Coverage and blind spots for the high-quality subset."""

    model_config = ConfigDict(frozen=True)

    total_papers_analyzed: int
    population_coverage: PopulationCoverage
    blind_spots: list[BlindSpot]
    strategy: str  # extraction strategy that produced the signals


class KeyMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_papers: int
    high_quality_papers: int
    time_range: str | None = None  # "2019-2024", "2024", or None


class ReportSummary(BaseModel):
    """Final report, built once at the end of a run."""

    model_config = ConfigDict(frozen=True)

    executive_summary: str
    key_metrics: KeyMetrics
    main_blind_spots: list[BlindSpot]
    recommendations: list[str]
