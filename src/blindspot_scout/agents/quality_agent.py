"""Quality agent: scores papers and keeps the high-quality subset."""

import logging
from typing import Any

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.exceptions import MissingQueryError
from blindspot_scout.models.state import PipelineState
from blindspot_scout.services.quality_scorer import QualityScorer

logger = logging.getLogger(__name__)


class QualityAgent(BaseAgent):
    name = "quality"

    def __init__(self, scorer: QualityScorer | None = None):
        self.scorer = scorer or QualityScorer()

    async def run(self, state: PipelineState) -> dict[str, Any]:
        if state.query is None:
            raise MissingQueryError("Quality assessment needs a query")
        if not state.papers:
            logger.warning("No papers to assess")
            return {"quality_assessments": {}, "high_quality_papers": []}

        assessments, high_quality = self.scorer.assess(state.papers, state.query.disease)
        return {"quality_assessments": assessments, "high_quality_papers": high_quality}
