"""Data models for BlindSpot Scout."""

from blindspot_scout.models.assessment import QualityAssessment
from blindspot_scout.models.blind_spot import BlindSpot, Severity
from blindspot_scout.models.coverage import Dimension, PaperSignals, PopulationCoverage
from blindspot_scout.models.paper import PaperRecord, SourceCategory
from blindspot_scout.models.query import DiseaseQuery, QueryFilters
from blindspot_scout.models.report import AnalysisResult, KeyMetrics, ReportSummary
from blindspot_scout.models.state import PipelineState

__all__ = [
    "AnalysisResult",
    "BlindSpot",
    "Dimension",
    "DiseaseQuery",
    "KeyMetrics",
    "PaperRecord",
    "PaperSignals",
    "PipelineState",
    "PopulationCoverage",
    "QualityAssessment",
    "QueryFilters",
    "ReportSummary",
    "Severity",
    "SourceCategory",
]
