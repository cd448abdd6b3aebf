"""Paper quality scoring service."""

import logging
from datetime import date

from blindspot_scout.constants import (
    ABSTRACT_MATCH_POINTS,
    DEFAULT_SOURCE_SCORE,
    GENERIC_QUERY_TERMS,
    MIN_QUERY_TERM_LENGTH,
    MIN_RECENCY_SCORE,
    NEUTRAL_RELEVANCE_SCORE,
    QUALITY_THRESHOLD,
    RECENCY_DECAY_YEARS,
    RECENCY_STEPS,
    RECENCY_WEIGHT,
    RELEVANCE_WEIGHT,
    SOURCE_SCORES,
    SOURCE_WEIGHT,
    TITLE_MATCH_POINTS,
)
from blindspot_scout.models.assessment import QualityAssessment
from blindspot_scout.models.paper import PaperRecord

logger = logging.getLogger(__name__)


def extract_query_terms(query: str) -> list[str]:
    """Split a disease query into lower-cased terms worth matching.

    Drops short words ("of", "the") and generic words like "disease".
    """
    return [
        term
        for term in query.lower().split()
        if len(term) >= MIN_QUERY_TERM_LENGTH and term not in GENERIC_QUERY_TERMS
    ]


class QualityScorer:
    """Service for scoring paper quality and relevance to a query."""

    def __init__(self, current_year: int | None = None):
        self.current_year = current_year or date.today().year

    def source_score(self, paper: PaperRecord) -> float:
        """Reputation of the publication source."""
        return SOURCE_SCORES.get(paper.source.value, DEFAULT_SOURCE_SCORE)

    def recency_score(self, paper: PaperRecord) -> float:
        """Step function of paper age; unparseable dates count as maximally stale."""
        year = paper.year
        if year is None:
            return MIN_RECENCY_SCORE

        age = self.current_year - year
        for max_age, score in RECENCY_STEPS:
            if age <= max_age:
                return score
        return max(MIN_RECENCY_SCORE, 1.0 - age / RECENCY_DECAY_YEARS)

    def text_relevance_score(self, paper: PaperRecord, query_terms: list[str]) -> float:
        """Keyword overlap between query terms and the title (2x) / abstract (1x)."""
        if not query_terms:
            return NEUTRAL_RELEVANCE_SCORE

        title = paper.title.lower()
        abstract = paper.abstract.lower()
        points = 0
        for term in query_terms:
            if term in title:
                points += TITLE_MATCH_POINTS
            if term in abstract:
                points += ABSTRACT_MATCH_POINTS

        max_points = len(query_terms) * (TITLE_MATCH_POINTS + ABSTRACT_MATCH_POINTS)
        return min(1.0, max(0.0, points / max_points))

    def score(self, paper: PaperRecord, query_terms: list[str]) -> QualityAssessment:
        """Calculate the full quality assessment for one paper."""
        source = self.source_score(paper)
        recency = self.recency_score(paper)
        relevance = self.text_relevance_score(paper, query_terms)

        overall = min(
            1.0,
            RECENCY_WEIGHT * recency + RELEVANCE_WEIGHT * relevance + SOURCE_WEIGHT * source,
        )
        is_high_quality = overall >= QUALITY_THRESHOLD

        if is_high_quality:
            rationale = (
                f"High relevance ({relevance * 100:.0f}%) "
                f"and recency ({recency * 100:.0f}%)"
            )
        else:
            rationale = f"Overall score {overall:.2f} below threshold {QUALITY_THRESHOLD}"

        return QualityAssessment(
            paper_id=paper.identifier,
            source_score=source,
            recency_score=recency,
            text_relevance_score=relevance,
            overall_score=overall,
            is_high_quality=is_high_quality,
            rationale=rationale,
        )

    def assess(
        self, papers: list[PaperRecord], query: str
    ) -> tuple[dict[str, QualityAssessment], list[PaperRecord]]:
        """Score every paper and split out the high-quality subset.

        Returns:
            (assessments keyed by paper id, high-quality papers in input order).
            A later paper with a duplicate id replaces the earlier assessment.
        """
        query_terms = extract_query_terms(query)
        assessments: dict[str, QualityAssessment] = {}
        high_quality: list[PaperRecord] = []

        for paper in papers:
            assessment = self.score(paper, query_terms)
            if assessment.paper_id in assessments:
                logger.warning("Duplicate paper id %s; keeping latest", assessment.paper_id)
            assessments[assessment.paper_id] = assessment
            if assessment.is_high_quality:
                high_quality.append(paper)

        logger.info(
            "Assessed %d papers, %d are high quality", len(papers), len(high_quality)
        )
        return assessments, high_quality
