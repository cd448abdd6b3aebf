"""Synthesis agent: ranks blind spots and builds the report summary."""

import logging
from typing import Any

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.constants import DEFAULT_TOP_BLIND_SPOTS, MAX_RECOMMENDATIONS
from blindspot_scout.models.state import PipelineState
from blindspot_scout.services.synthesis import summarize

logger = logging.getLogger(__name__)


class SynthesisAgent(BaseAgent):
    name = "synthesis"

    def __init__(
        self,
        top_n: int = DEFAULT_TOP_BLIND_SPOTS,
        max_recommendations: int = MAX_RECOMMENDATIONS,
    ):
        self.top_n = top_n
        self.max_recommendations = max_recommendations

    async def run(self, state: PipelineState) -> dict[str, Any]:
        if state.query is None or state.analysis is None:
            logger.warning("Missing query or analysis; skipping synthesis")
            return {}

        report = summarize(
            state.query.disease,
            total_papers=len(state.papers),
            high_quality_papers=state.high_quality_papers,
            blind_spots=state.analysis.blind_spots,
            top_n=self.top_n,
            max_recommendations=self.max_recommendations,
        )
        return {"report": report}
