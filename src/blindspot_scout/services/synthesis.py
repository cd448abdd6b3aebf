"""Blind spot ranking, recommendations and report summary."""

import logging
import re

from blindspot_scout.constants import (
    DEFAULT_TOP_BLIND_SPOTS,
    MAX_RECOMMENDATIONS,
    MAX_SUMMARY_CRITICAL_GAPS,
)
from blindspot_scout.models.blind_spot import BlindSpot, Severity
from blindspot_scout.models.paper import PaperRecord
from blindspot_scout.models.report import KeyMetrics, ReportSummary

logger = logging.getLogger(__name__)

# (category, pattern searched case-insensitively in the gap, recommendation)
RECOMMENDATION_RULES: tuple[tuple[str, re.Pattern, str], ...] = (
    (
        "age",
        re.compile(r"pediatric|0-18", re.IGNORECASE),
        "Design studies that safely include pediatric populations (children and "
        "adolescents) where ethically appropriate.",
    ),
    (
        "age",
        re.compile(r"elderly|>75", re.IGNORECASE),
        "Include participants over 75 years old in clinical trials to understand "
        "treatment efficacy in very elderly populations.",
    ),
    (
        "gender",
        re.compile(r"\bpoor\b|reporting", re.IGNORECASE),
        "Improve reporting of gender distribution and conduct sex-disaggregated "
        "analysis in all studies.",
    ),
    (
        "gender",
        re.compile(r"\bfemale\b", re.IGNORECASE),
        "Increase recruitment of female participants to ensure findings are "
        "generalizable across sexes.",
    ),
    (
        "gender",
        re.compile(r"\bmale\b", re.IGNORECASE),
        "Increase recruitment of male participants to ensure findings are "
        "generalizable across sexes.",
    ),
    (
        "pregnancy",
        re.compile(r"pregnan", re.IGNORECASE),
        "Where ethically appropriate and safe, include pregnant women in research to "
        "understand treatment effects during pregnancy.",
    ),
    (
        "geography",
        re.compile(r"\basia", re.IGNORECASE),
        "Conduct multi-center studies including Asian populations to improve global "
        "representativeness.",
    ),
    (
        "geography",
        re.compile(r"diversity", re.IGNORECASE),
        "Expand geographic diversity in research to ensure findings apply across "
        "different populations and healthcare systems.",
    ),
)

CLOSING_SENTENCE = (
    "These findings highlight important gaps in research coverage that should be "
    "addressed in future studies."
)


def rank_blind_spots(blind_spots: list[BlindSpot]) -> list[BlindSpot]:
    """Sort critical -> low; ties keep detection order."""
    return sorted(blind_spots, key=lambda spot: spot.severity.rank)


def generate_recommendations(
    blind_spots: list[BlindSpot], limit: int = MAX_RECOMMENDATIONS
) -> list[str]:
    """Look up recommendation sentences for each blind spot.

    Deduplicated in first-seen order and capped at ``limit``.
    """
    recommendations: list[str] = []
    for spot in blind_spots:
        for category, pattern, sentence in RECOMMENDATION_RULES:
            if spot.category == category and pattern.search(spot.gap):
                if sentence not in recommendations:
                    recommendations.append(sentence)
    return recommendations[:limit]


def calculate_time_range(papers: list[PaperRecord]) -> str | None:
    """Publication year span of the papers: "YYYY-YYYY", "YYYY", or None."""
    years = sorted(year for paper in papers if (year := paper.year) is not None)
    if not years:
        return None
    min_year, max_year = years[0], years[-1]
    return f"{min_year}" if min_year == max_year else f"{min_year}-{max_year}"


def build_executive_summary(
    disease: str,
    total_papers: int,
    high_quality_papers: int,
    blind_spots: list[BlindSpot],
) -> str:
    """Templated summary paragraph for the report."""
    critical = [s for s in blind_spots if s.severity == Severity.CRITICAL]
    high = [s for s in blind_spots if s.severity == Severity.HIGH]

    parts = [
        f"Analysis of {disease} research literature identified {total_papers} relevant "
        f"papers, of which {high_quality_papers} met high-quality criteria for detailed "
        "analysis."
    ]

    if critical:
        plural = "s" if len(critical) > 1 else ""
        gaps = "; ".join(s.gap.lower() for s in critical[:MAX_SUMMARY_CRITICAL_GAPS])
        parts.append(
            f"The analysis revealed {len(critical)} critical blind spot{plural}: {gaps}."
        )

    if high:
        verb = "gaps were" if len(high) > 1 else "gap was"
        parts.append(f"Additionally, {len(high)} high-severity {verb} identified.")

    if not critical and not high:
        parts.append("No critical or high-severity blind spots were identified.")

    parts.append(CLOSING_SENTENCE)
    return " ".join(parts)


def summarize(
    disease: str,
    total_papers: int,
    high_quality_papers: list[PaperRecord],
    blind_spots: list[BlindSpot],
    top_n: int = DEFAULT_TOP_BLIND_SPOTS,
    max_recommendations: int = MAX_RECOMMENDATIONS,
) -> ReportSummary:
    """Build the final report from a run's blind spots and papers."""
    ranked = rank_blind_spots(blind_spots)
    main_blind_spots = ranked[:top_n]

    summary = ReportSummary(
        executive_summary=build_executive_summary(
            disease, total_papers, len(high_quality_papers), ranked
        ),
        key_metrics=KeyMetrics(
            total_papers=total_papers,
            high_quality_papers=len(high_quality_papers),
            time_range=calculate_time_range(high_quality_papers),
        ),
        main_blind_spots=main_blind_spots,
        recommendations=generate_recommendations(main_blind_spots, max_recommendations),
    )
    logger.info(
        "Report generated: %d main blind spots, %d recommendations",
        len(summary.main_blind_spots),
        len(summary.recommendations),
    )
    return summary
