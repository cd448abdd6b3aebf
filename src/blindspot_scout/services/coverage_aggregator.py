"""Aggregate per-paper demographic signals into population coverage."""

import logging
import math

from blindspot_scout.models.coverage import (
    Dimension,
    PaperSignals,
    PopulationCoverage,
    empty_counts,
)

logger = logging.getLogger(__name__)


def to_percent(count: int, total: int) -> int:
    """``count / total`` as a whole percent, halves rounded up."""
    return math.floor(100 * count / total + 0.5)


def sum_counts(signals: list[PaperSignals], dimension: Dimension) -> dict[str, int]:
    """Total each bucket of one dimension across papers."""
    totals = empty_counts(dimension)
    for paper_signals in signals:
        for bucket, count in paper_signals.for_dimension(dimension).items():
            totals[bucket] = totals.get(bucket, 0) + count
    return totals


def aggregate(signals: list[PaperSignals]) -> PopulationCoverage:
    """Turn per-paper signals into coverage percentages, one dimension at a time.

    No normalization is applied: multi-bucket matches and independent rounding
    mean a dimension's percentages may not sum to exactly 100.
    """
    total = len(signals)
    if total == 0:
        logger.debug("No signals to aggregate; returning empty coverage")
        return PopulationCoverage.empty()

    percentages = {
        dimension.value: {
            bucket: to_percent(count, total)
            for bucket, count in sum_counts(signals, dimension).items()
        }
        for dimension in Dimension
    }
    return PopulationCoverage(total_papers=total, **percentages)
