"""Population agent: extracts demographics, aggregates coverage, detects blind spots."""

import logging
from typing import Any

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.exceptions import ExtractionError
from blindspot_scout.models.blind_spot import BlindSpot, Severity
from blindspot_scout.models.coverage import PopulationCoverage
from blindspot_scout.models.report import AnalysisResult
from blindspot_scout.models.state import PipelineState
from blindspot_scout.services.blind_spot_detector import NO_DATA_BLIND_SPOT, detect
from blindspot_scout.services.coverage_aggregator import aggregate
from blindspot_scout.services.demographic_extractor import (
    ExtractionStrategy,
    KeywordDemographicExtractor,
)

logger = logging.getLogger(__name__)


class PopulationAgent(BaseAgent):
    """Runs the configured extraction strategy over the high-quality papers.

    An ExtractionError never aborts the run: coverage degrades to 100%
    not_specified and a single "error" blind spot explains why.
    """

    name = "population"

    def __init__(self, extractor: ExtractionStrategy | None = None):
        self.extractor = extractor or KeywordDemographicExtractor()

    async def run(self, state: PipelineState) -> dict[str, Any]:
        papers = state.high_quality_papers
        if not papers:
            logger.warning("No high-quality papers to analyze")
            return {
                "analysis": AnalysisResult(
                    total_papers_analyzed=0,
                    population_coverage=PopulationCoverage.empty(),
                    blind_spots=[NO_DATA_BLIND_SPOT],
                    strategy=self.extractor.name,
                )
            }

        try:
            signals = await self.extractor.extract(papers)
        except ExtractionError as e:
            logger.warning("Extraction failed, using neutral coverage: %s", e)
            return {
                "analysis": AnalysisResult(
                    total_papers_analyzed=len(papers),
                    population_coverage=PopulationCoverage.empty(),
                    blind_spots=[
                        BlindSpot(
                            category="error",
                            gap=f"{e.strategy.upper()} demographic extraction failed",
                            severity=Severity.HIGH,
                            details=str(e),
                        )
                    ],
                    strategy=self.extractor.name,
                )
            }

        coverage = aggregate(signals)
        blind_spots = detect(coverage)
        logger.info(
            "Analyzed %d papers with %s extraction, found %d blind spots",
            len(papers),
            self.extractor.name,
            len(blind_spots),
        )
        return {
            "analysis": AnalysisResult(
                total_papers_analyzed=len(papers),
                population_coverage=coverage,
                blind_spots=blind_spots,
                strategy=self.extractor.name,
            )
        }
