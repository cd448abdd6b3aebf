"""Orchestrator that runs the pipeline agents in order."""

import logging

from blindspot_scout.agents.base import BaseAgent
from blindspot_scout.agents.input_agent import InputAgent
from blindspot_scout.agents.population_agent import PopulationAgent
from blindspot_scout.agents.quality_agent import QualityAgent
from blindspot_scout.agents.synthesis_agent import SynthesisAgent
from blindspot_scout.config import PipelineConfig
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.models.query import DiseaseQuery
from blindspot_scout.models.state import PipelineState
from blindspot_scout.services.demographic_extractor import (
    ExtractionStrategy,
    KeywordDemographicExtractor,
)
from blindspot_scout.services.llm import AnthropicBackend, LLMBackend, MockBackend
from blindspot_scout.services.llm_extractor import LLMDemographicExtractor
from blindspot_scout.services.quality_scorer import QualityScorer

logger = logging.getLogger(__name__)


def build_extractor(config: PipelineConfig) -> ExtractionStrategy:
    """Pick the extraction strategy named in the config."""
    if config.extraction_strategy == "keyword":
        return KeywordDemographicExtractor()

    backend: LLMBackend
    if config.llm_backend == "anthropic":
        backend = AnthropicBackend(config.llm_model, api_key=config.anthropic_api_key)
    else:
        backend = MockBackend()
    return LLMDemographicExtractor(backend, max_concurrency=config.llm_max_concurrency)


class Orchestrator:
    """Runs input → quality → population → synthesis over one set of papers.

    The extraction strategy is fixed at construction: pass one explicitly, or
    let ``build_extractor`` choose from the config. A strategy built here is
    owned by the orchestrator and released by ``close``; an injected one is
    left to the caller.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        extractor: ExtractionStrategy | None = None,
    ):
        self.config = config or PipelineConfig()
        self._owns_extractor = extractor is None
        self.extractor = extractor or build_extractor(self.config)
        self.agents: list[BaseAgent] = [
            InputAgent(),
            QualityAgent(QualityScorer(current_year=self.config.current_year)),
            PopulationAgent(self.extractor),
            SynthesisAgent(
                top_n=self.config.top_blind_spots,
                max_recommendations=self.config.max_recommendations,
            ),
        ]

    async def run(
        self, query: DiseaseQuery | str | None, papers: list[PaperRecord]
    ) -> PipelineState:
        """Run every stage and return the final state.

        Raises:
            MissingQueryError: if the query is missing or blank.
        """
        if isinstance(query, str):
            query = DiseaseQuery(disease=query)
        state = PipelineState(query=query, papers=list(papers))

        logger.info(
            "Starting analysis of %d papers with %s extraction",
            len(state.papers),
            self.extractor.name,
        )
        for agent in self.agents:
            update = await agent.run(state)
            state = state.model_copy(update=update)
            logger.debug("Agent %s updated %s", agent.name, sorted(update))

        return state

    async def close(self) -> None:
        if self._owns_extractor:
            await self.extractor.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()
