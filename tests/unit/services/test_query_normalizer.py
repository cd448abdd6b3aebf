"""Unit tests for services/query_normalizer."""

import pytest

from blindspot_scout.exceptions import MissingQueryError
from blindspot_scout.models.query import DiseaseQuery, QueryFilters
from blindspot_scout.services.query_normalizer import normalize_disease_name, normalize_query


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("alzheimer", "Alzheimer's disease"),
        ("Parkinson's", "Parkinson's disease"),
        ("  CROHN  ", "Crohn's disease"),
        ("huntington", "Huntington's disease"),
        ("diabetes", "Diabetes"),
        ("multiple SCLEROSIS", "Multiple Sclerosis"),
        ("type  2   diabetes", "Type 2 Diabetes"),
    ],
)
def test_normalize_disease_name(raw, expected):
    assert normalize_disease_name(raw) == expected


def test_normalize_disease_name_leaves_full_possessive_names_alone():
    # only the bare name gets "'s disease" appended
    assert normalize_disease_name("alzheimer's disease") == "Alzheimer's Disease"


def test_normalize_query_from_string():
    query = normalize_query("asthma")

    assert isinstance(query, DiseaseQuery)
    assert query.disease == "Asthma"
    assert query.filters == QueryFilters()


def test_normalize_query_keeps_filters():
    filters = QueryFilters(exclude_pediatric=True, min_year=2015)
    query = normalize_query(DiseaseQuery(disease="crohn", filters=filters))

    assert query.disease == "Crohn's disease"
    assert query.filters == filters


@pytest.mark.parametrize("query", [None, "", "   ", DiseaseQuery(disease="\t")])
def test_normalize_query_rejects_missing_disease(query):
    with pytest.raises(MissingQueryError):
        normalize_query(query)
