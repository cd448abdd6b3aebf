"""Input agent: validates the query and normalizes the disease name."""

import logging
from typing import Any

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.models.state import PipelineState
from blindspot_scout.services.query_normalizer import normalize_query

logger = logging.getLogger(__name__)


class InputAgent(BaseAgent):
    name = "input"

    async def run(self, state: PipelineState) -> dict[str, Any]:
        query = normalize_query(state.query)
        logger.info("Filters: %s", query.filters.model_dump())
        return {"query": query}
