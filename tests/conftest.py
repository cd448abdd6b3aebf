"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from blindspot_scout.models.paper import PaperRecord, SourceCategory

CURRENT_YEAR = 2025


@pytest.fixture
def current_year() -> int:
    """Fixed year so recency scores are deterministic."""
    return CURRENT_YEAR


@pytest.fixture
def make_paper() -> Callable[..., PaperRecord]:
    """Factory for PaperRecord with sensible defaults; override any field."""
    counter = {"n": 0}

    def _make(**overrides) -> PaperRecord:
        counter["n"] += 1
        n = counter["n"]
        values = {
            "doi": f"10.1000/test.{n}",
            "title": f"Study {n} of Crohn's disease outcomes",
            "authors": ["Smith, John"],
            "journal": "Gut",
            "publication_date": f"{CURRENT_YEAR}-01-15",
            "abstract": "We followed patients with Crohn's disease for two years.",
            "source": SourceCategory.PUBMED,
        }
        values.update(overrides)
        return PaperRecord(**values)

    return _make


@pytest.fixture
def sample_paper(make_paper) -> PaperRecord:
    """A fully relevant, recent PubMed paper."""
    return make_paper(
        doi="10.1000/crohn.1",
        title="Crohn's disease in elderly women in Japan",
        abstract=(
            "Crohn's disease outcomes in elderly women over 75 enrolled in Japan "
            "were compared with adult men in the United States."
        ),
    )
