"""Shared pipeline state passed between agents."""

from pydantic import BaseModel

from blindspot_scout.models.assessment import QualityAssessment
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.models.query import DiseaseQuery
from blindspot_scout.models.report import AnalysisResult, ReportSummary


class PipelineState(BaseModel):
    """Everything a run has produced so far.

    Agents return partial updates (dicts keyed by field name); the orchestrator
    merges each one into a new state.
    """

    query: DiseaseQuery | None = None
    papers: list[PaperRecord] = []
    quality_assessments: dict[str, QualityAssessment] = {}
    high_quality_papers: list[PaperRecord] = []
    analysis: AnalysisResult | None = None
    report: ReportSummary | None = None
