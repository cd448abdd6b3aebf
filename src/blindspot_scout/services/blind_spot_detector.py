"""Threshold rules that turn population coverage into blind spots."""

import logging
from dataclasses import dataclass
from typing import Callable

from blindspot_scout.constants import (
    GENDER_UNSPECIFIED_MAX_PCT,
    GEOGRAPHY_SPECIFIED_MIN_PCT,
    LOW_AGE_COVERAGE_PCT,
    NOT_SPECIFIED,
)
from blindspot_scout.models.blind_spot import BlindSpot, Severity
from blindspot_scout.models.coverage import Dimension, PopulationCoverage

logger = logging.getLogger(__name__)

NO_DATA_BLIND_SPOT = BlindSpot(
    category="data",
    gap="No analyzable papers available",
    severity=Severity.CRITICAL,
    details="Cannot perform population analysis without high-quality papers",
)


@dataclass(frozen=True)
class BlindSpotRule:
    """One independent threshold check on a single coverage dimension.

    ``value`` reads the percentage under test from the dimension's mapping;
    ``gap`` and ``details`` are templates formatted with ``{value}``.
    """

    dimension: Dimension
    value: Callable[[dict[str, int]], int]
    condition: Callable[[int], bool]
    severity: Severity
    gap: str
    details: str | None = None

    def evaluate(self, coverage: PopulationCoverage) -> BlindSpot | None:
        pct = self.value(coverage.for_dimension(self.dimension))
        if not self.condition(pct):
            return None
        return BlindSpot(
            category=self.dimension.value,
            gap=self.gap.format(value=pct),
            severity=self.severity,
            details=self.details.format(value=pct) if self.details else None,
        )


def bucket(name: str) -> Callable[[dict[str, int]], int]:
    return lambda percentages: percentages.get(name, 0)


def specified_share(percentages: dict[str, int]) -> int:
    return 100 - percentages.get(NOT_SPECIFIED, 0)


def _is_zero(pct: int) -> bool:
    return pct == 0


def _is_low(pct: int) -> bool:
    # exactly LOW_AGE_COVERAGE_PCT is not a blind spot
    return 0 < pct < LOW_AGE_COVERAGE_PCT


BLIND_SPOT_RULES: tuple[BlindSpotRule, ...] = (
    BlindSpotRule(
        Dimension.AGE,
        bucket("0-18"),
        _is_zero,
        Severity.CRITICAL,
        gap="No coverage of pediatric populations (0-18 years, {value}% of studies)",
        details="Children and adolescents are completely absent from the research",
    ),
    BlindSpotRule(
        Dimension.AGE,
        bucket("0-18"),
        _is_low,
        Severity.HIGH,
        gap="Very low coverage of pediatric populations ({value}% of studies)",
        details="Only {value}% of studies include children/adolescents",
    ),
    BlindSpotRule(
        Dimension.AGE,
        bucket(">75"),
        _is_zero,
        Severity.CRITICAL,
        gap="No coverage of very elderly populations (>75 years, {value}% of studies)",
        details="The oldest demographic is completely absent from the research",
    ),
    BlindSpotRule(
        Dimension.AGE,
        bucket(">75"),
        _is_low,
        Severity.HIGH,
        gap="Very low coverage of very elderly populations ({value}% of studies)",
        details="Only {value}% of studies include people over 75",
    ),
    BlindSpotRule(
        Dimension.GENDER,
        bucket(NOT_SPECIFIED),
        lambda pct: pct > GENDER_UNSPECIFIED_MAX_PCT,
        Severity.HIGH,
        gap="Poor gender reporting in research ({value}% of studies unspecified)",
        details="{value}% of studies don't specify gender demographics",
    ),
    BlindSpotRule(
        Dimension.GENDER,
        bucket("male"),
        _is_zero,
        Severity.CRITICAL,
        gap="No male representation ({value}% of studies)",
    ),
    BlindSpotRule(
        Dimension.GENDER,
        bucket("female"),
        _is_zero,
        Severity.CRITICAL,
        gap="No female representation ({value}% of studies)",
    ),
    BlindSpotRule(
        Dimension.PREGNANCY,
        bucket("pregnant"),
        _is_zero,
        Severity.CRITICAL,
        gap="No coverage of pregnant populations ({value}% of studies)",
        details="Pregnant women are excluded from all research",
    ),
    BlindSpotRule(
        Dimension.GEOGRAPHY,
        specified_share,
        lambda pct: pct < GEOGRAPHY_SPECIFIED_MIN_PCT,
        Severity.MEDIUM,
        gap="Poor geographic diversity reporting (only {value}% of studies specify a region)",
        details="Only {value}% of studies specify geographic regions",
    ),
    BlindSpotRule(
        Dimension.GEOGRAPHY,
        bucket("Asia"),
        _is_zero,
        Severity.HIGH,
        gap="No Asian population representation ({value}% of studies)",
        details="Studies from Asia or including Asian populations are absent",
    ),
)


def detect(
    coverage: PopulationCoverage,
    rules: tuple[BlindSpotRule, ...] = BLIND_SPOT_RULES,
) -> list[BlindSpot]:
    """Evaluate every rule against the coverage, in rule order.

    With no analyzed papers the rules are skipped and a single critical
    "no data" blind spot is returned instead.
    """
    if coverage.total_papers == 0:
        return [NO_DATA_BLIND_SPOT]

    blind_spots = [spot for rule in rules if (spot := rule.evaluate(coverage)) is not None]
    logger.info("Detected %d blind spots", len(blind_spots))
    return blind_spots
