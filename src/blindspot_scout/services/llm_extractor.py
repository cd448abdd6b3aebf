"""LLM-backed demographic extraction strategy."""

import asyncio
import logging

from pydantic import BaseModel

from blindspot_scout.constants import DEFAULT_LLM_MAX_CONCURRENCY, LLM_ABSTRACT_CHAR_LIMIT
from blindspot_scout.exceptions import ExtractionError
from blindspot_scout.models.coverage import Dimension, PaperSignals
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.services.demographic_extractor import (
    DIMENSION_KEYWORDS,
    ExtractionStrategy,
    match_buckets,
    signal_counts,
)
from blindspot_scout.services.llm import LLMBackend, parse_llm_json

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a medical research analyst. Extract demographic data from research "
    "abstracts and return ONLY valid JSON, no additional text."
)

EXTRACTION_PROMPT = (
    "Analyze the following research paper and extract demographic information about "
    "the study population. Return ONLY a JSON object with this exact structure:\n\n"
    "{{\n"
    '  "age_buckets": ["18-65", "65-75"],\n'
    '  "genders": ["male", "female"],\n'
    '  "pregnancy_mentioned": false,\n'
    '  "regions": ["North America", "Europe"]\n'
    "}}\n\n"
    "Rules:\n"
    '- age_buckets: any of "0-18", "18-65", "65-75", ">75"; [] if not specified\n'
    '- genders: any of "male", "female"; [] if not specified\n'
    "- pregnancy_mentioned: true if pregnancy or pregnant participants are mentioned\n"
    '- regions: any of "North America", "Europe", "Asia", "Other"; [] if not specified\n\n'
    "Title: {title}\n\n"
    "Abstract: {abstract}\n\n"
    "JSON output:"
)


class LLMDemographics(BaseModel):
    """Schema the model is asked to fill for each paper."""

    age_buckets: list[str] = []
    genders: list[str] = []
    pregnancy_mentioned: bool = False
    regions: list[str] = []


def map_labels(labels: list[str], dimension: Dimension) -> list[str]:
    """Map free-form model labels onto a dimension's bucket names.

    Exact bucket names match case-insensitively; anything else ("USA",
    "elderly") goes through the keyword table. Unmappable labels are dropped.
    """
    table = DIMENSION_KEYWORDS[dimension]
    by_lower = {bucket.lower(): bucket for bucket in table}
    buckets: list[str] = []
    for label in labels:
        label_lower = label.strip().lower()
        if label_lower in by_lower:
            buckets.append(by_lower[label_lower])
        else:
            buckets.extend(match_buckets(label_lower, table))
    return buckets


def to_signals(paper_id: str, demographics: LLMDemographics) -> PaperSignals:
    """Convert a parsed model answer into the shared PaperSignals contract."""
    pregnancy = ["pregnant"] if demographics.pregnancy_mentioned else []
    return PaperSignals(
        paper_id=paper_id,
        age=signal_counts(Dimension.AGE, map_labels(demographics.age_buckets, Dimension.AGE)),
        gender=signal_counts(
            Dimension.GENDER, map_labels(demographics.genders, Dimension.GENDER)
        ),
        pregnancy=signal_counts(Dimension.PREGNANCY, pregnancy),
        geography=signal_counts(
            Dimension.GEOGRAPHY, map_labels(demographics.regions, Dimension.GEOGRAPHY)
        ),
    )


class LLMDemographicExtractor(ExtractionStrategy):
    """Structured extraction with one LLM call per paper.

    Calls run concurrently, bounded by ``max_concurrency``. Any failed call
    fails the whole extraction with ExtractionError; the caller decides how
    to degrade.
    """

    name = "llm"

    def __init__(
        self, backend: LLMBackend, max_concurrency: int = DEFAULT_LLM_MAX_CONCURRENCY
    ):
        self.backend = backend
        self.max_concurrency = max_concurrency

    def build_prompt(self, paper: PaperRecord) -> str:
        return EXTRACTION_PROMPT.format(
            title=paper.title,
            abstract=paper.abstract[:LLM_ABSTRACT_CHAR_LIMIT],
        )

    async def _extract_one(
        self, paper: PaperRecord, semaphore: asyncio.Semaphore
    ) -> PaperSignals:
        async with semaphore:
            try:
                response = await self.backend.complete(
                    self.build_prompt(paper), system=SYSTEM_PROMPT
                )
                demographics = LLMDemographics.model_validate(parse_llm_json(response))
            except Exception as e:
                raise ExtractionError(
                    self.name, f"Failed to extract demographics for '{paper.title[:60]}': {e}"
                ) from e
        return to_signals(paper.identifier, demographics)

    async def extract(self, papers: list[PaperRecord]) -> list[PaperSignals]:
        if not papers:
            return []

        logger.info(
            "Calling %s backend for %d papers (max_concurrency=%d)",
            self.backend.name,
            len(papers),
            self.max_concurrency,
        )
        semaphore = asyncio.Semaphore(self.max_concurrency)
        # the first failure cancels the calls still pending
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._extract_one(p, semaphore)) for p in papers]
        except ExceptionGroup as eg:
            raise eg.exceptions[0]
        return [task.result() for task in tasks]

    async def close(self) -> None:
        await self.backend.close()
