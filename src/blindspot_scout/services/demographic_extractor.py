"""
Demographic signal extraction.

Two interchangeable strategies implement ``ExtractionStrategy``:
  1. KeywordDemographicExtractor: substring matching against fixed tables (default)
  2. LLMDemographicExtractor:     structured extraction via an LLM backend
                                   (see services/llm_extractor.py)

Both return one ``PaperSignals`` per paper; downstream stages never know
which strategy ran.
"""

import logging
from abc import ABC, abstractmethod

from blindspot_scout.constants import (
    AGE_KEYWORDS,
    GENDER_KEYWORDS,
    GEOGRAPHY_KEYWORDS,
    NOT_SPECIFIED,
    PREGNANCY_KEYWORDS,
)
from blindspot_scout.models.coverage import Dimension, PaperSignals, empty_counts
from blindspot_scout.models.paper import PaperRecord

logger = logging.getLogger(__name__)

DIMENSION_KEYWORDS: dict[Dimension, dict[str, tuple[str, ...]]] = {
    Dimension.AGE: AGE_KEYWORDS,
    Dimension.GENDER: GENDER_KEYWORDS,
    Dimension.PREGNANCY: PREGNANCY_KEYWORDS,
    Dimension.GEOGRAPHY: GEOGRAPHY_KEYWORDS,
}


class ExtractionStrategy(ABC):
    """Abstract base class for demographic extraction strategies."""

    name: str = "base"

    @abstractmethod
    async def extract(self, papers: list[PaperRecord]) -> list[PaperSignals]:
        """Return one PaperSignals per paper, in input order.

        Raises:
            ExtractionError: if signals cannot be produced.
        """
        pass

    async def close(self) -> None:
        """Release resources held by the strategy, such as an LLM client."""


def match_buckets(text: str, table: dict[str, tuple[str, ...]]) -> list[str]:
    """Return every bucket whose keywords occur in text (case-insensitive)."""
    lower = text.lower()
    return [
        bucket
        for bucket, keywords in table.items()
        if any(keyword in lower for keyword in keywords)
    ]


def signal_counts(dimension: Dimension, matched: list[str]) -> dict[str, int]:
    """Turn matched bucket names into a 0/1 count mapping for a dimension.

    Unknown bucket names are ignored. With no known match, not_specified is 1;
    it is never combined with a real match.
    """
    counts = empty_counts(dimension)
    found = False
    for bucket in matched:
        if bucket in counts and bucket != NOT_SPECIFIED:
            counts[bucket] = 1
            found = True
    if not found:
        counts[NOT_SPECIFIED] = 1
    return counts


def extract_dimension(text: str, dimension: Dimension) -> dict[str, int]:
    """Keyword-match one dimension of a paper's text."""
    return signal_counts(dimension, match_buckets(text, DIMENSION_KEYWORDS[dimension]))


def extract_paper(paper: PaperRecord) -> PaperSignals:
    """Keyword-match all four dimensions for one paper."""
    text = paper.text
    return PaperSignals(
        paper_id=paper.identifier,
        **{dim.value: extract_dimension(text, dim) for dim in Dimension},
    )


class KeywordDemographicExtractor(ExtractionStrategy):
    """Rule-based extraction using the keyword tables in constants.py."""

    name = "keyword"

    async def extract(self, papers: list[PaperRecord]) -> list[PaperSignals]:
        signals = [extract_paper(paper) for paper in papers]
        logger.debug("Keyword extraction produced signals for %d papers", len(signals))
        return signals
