"""Demographic signal and coverage models.

``PaperSignals`` is what every extraction strategy produces per paper;
``PopulationCoverage`` is what the aggregator builds from them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from blindspot_scout.constants import (
    AGE_KEYWORDS,
    GENDER_KEYWORDS,
    GEOGRAPHY_KEYWORDS,
    NOT_SPECIFIED,
    PREGNANCY_EXTRA_BUCKETS,
    PREGNANCY_KEYWORDS,
)


class Dimension(str, Enum):
    AGE = "age"
    GENDER = "gender"
    PREGNANCY = "pregnancy"
    GEOGRAPHY = "geography"


# Every bucket reported per dimension, in display order
DIMENSION_BUCKETS: dict[Dimension, tuple[str, ...]] = {
    Dimension.AGE: (*AGE_KEYWORDS, NOT_SPECIFIED),
    Dimension.GENDER: (*GENDER_KEYWORDS, NOT_SPECIFIED),
    Dimension.PREGNANCY: (*PREGNANCY_KEYWORDS, *PREGNANCY_EXTRA_BUCKETS, NOT_SPECIFIED),
    Dimension.GEOGRAPHY: (*GEOGRAPHY_KEYWORDS, NOT_SPECIFIED),
}


def empty_counts(dimension: Dimension) -> dict[str, int]:
    """Zeroed bucket mapping for a dimension."""
    return {bucket: 0 for bucket in DIMENSION_BUCKETS[dimension]}


class PaperSignals(BaseModel):
    """Per-paper bucket counts (0 or 1) for each dimension."""

    model_config = ConfigDict(frozen=True)

    paper_id: str
    age: dict[str, int]
    gender: dict[str, int]
    pregnancy: dict[str, int]
    geography: dict[str, int]

    def for_dimension(self, dimension: Dimension) -> dict[str, int]:
        return getattr(self, dimension.value)

    @classmethod
    def unspecified(cls, paper_id: str) -> "PaperSignals":
        """Signals for a paper that mentions nothing in any dimension."""
        values = {}
        for dimension in Dimension:
            counts = empty_counts(dimension)
            counts[NOT_SPECIFIED] = 1
            values[dimension.value] = counts
        return cls(paper_id=paper_id, **values)


class PopulationCoverage(BaseModel):
    """Percent of analyzed papers (0-100) matching each bucket.

    Values within a dimension need not sum to 100: a paper can match several
    buckets, and each value is rounded independently.
    """

    model_config = ConfigDict(frozen=True)

    total_papers: int = 0
    age: dict[str, int]
    gender: dict[str, int]
    pregnancy: dict[str, int]
    geography: dict[str, int]

    def for_dimension(self, dimension: Dimension) -> dict[str, int]:
        return getattr(self, dimension.value)

    @classmethod
    def empty(cls) -> "PopulationCoverage":
        """Degenerate coverage used when nothing could be analyzed: 100% not_specified."""
        values = {}
        for dimension in Dimension:
            percentages = empty_counts(dimension)
            percentages[NOT_SPECIFIED] = 100
            values[dimension.value] = percentages
        return cls(total_papers=0, **values)
