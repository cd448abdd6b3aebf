"""Unit tests for services/coverage_aggregator."""

import pytest

from blindspot_scout.models.coverage import Dimension, PaperSignals, empty_counts
from blindspot_scout.services.coverage_aggregator import aggregate, sum_counts, to_percent


def _signals(paper_id: str, **matched: list[str]) -> PaperSignals:
    """PaperSignals with the given buckets set to 1; other dimensions unspecified."""
    values = {}
    for dimension in Dimension:
        counts = empty_counts(dimension)
        for name in matched.get(dimension.value, ["not_specified"]):
            counts[name] = 1
        values[dimension.value] = counts
    return PaperSignals(paper_id=paper_id, **values)


@pytest.mark.parametrize(
    "count, total, expected",
    [
        (0, 10, 0),
        (1, 10, 10),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds up
        (1, 200, 1),  # 0.5 rounds up
        (1, 201, 0),
        (3, 3, 100),
    ],
)
def test_to_percent_rounds_half_up(count, total, expected):
    assert to_percent(count, total) == expected


def test_sum_counts_totals_each_bucket():
    signals = [
        _signals("a", gender=["male", "female"]),
        _signals("b", gender=["female"]),
        _signals("c"),
    ]
    assert sum_counts(signals, Dimension.GENDER) == {
        "male": 1,
        "female": 2,
        "not_specified": 1,
    }


def test_aggregate_empty_returns_degenerate_coverage():
    coverage = aggregate([])

    assert coverage.total_papers == 0
    for dimension in Dimension:
        assert coverage.for_dimension(dimension)["not_specified"] == 100


def test_aggregate_percentages():
    signals = [
        _signals("a", age=["18-65", "65-75"], geography=["Asia"]),
        _signals("b", age=["18-65"]),
        _signals("c", age=["0-18"], pregnancy=["pregnant"]),
        _signals("d"),
    ]
    coverage = aggregate(signals)

    assert coverage.total_papers == 4
    assert coverage.age == {
        "0-18": 25,
        "18-65": 50,
        "65-75": 25,
        ">75": 0,
        "not_specified": 25,
    }
    assert coverage.pregnancy == {"pregnant": 25, "not_pregnant": 0, "not_specified": 75}
    assert coverage.geography["Asia"] == 25
    assert coverage.geography["not_specified"] == 75


def test_aggregate_does_not_normalize_multi_bucket_matches():
    signals = [_signals("a", gender=["male", "female"])]
    coverage = aggregate(signals)

    assert coverage.gender == {"male": 100, "female": 100, "not_specified": 0}
    assert sum(coverage.gender.values()) == 200


def test_aggregate_every_bucket_present_and_in_range():
    coverage = aggregate([_signals(str(i)) for i in range(7)])

    for dimension in Dimension:
        percentages = coverage.for_dimension(dimension)
        assert set(percentages) == set(empty_counts(dimension))
        assert all(0 <= value <= 100 for value in percentages.values())


def test_aggregate_rounding_of_thirds():
    signals = [
        _signals("a", age=["0-18"]),
        _signals("b", age=["18-65"]),
        _signals("c", age=["18-65"]),
    ]
    coverage = aggregate(signals)

    assert coverage.age["0-18"] == 33
    assert coverage.age["18-65"] == 67


def test_aggregate_single_paper_one_bucket_per_dimension():
    signals = [
        _signals(
            "a",
            age=["65-75"],
            gender=["female"],
            pregnancy=["pregnant"],
            geography=["Europe"],
        )
    ]
    coverage = aggregate(signals)

    assert coverage.age == {"0-18": 0, "18-65": 0, "65-75": 100, ">75": 0, "not_specified": 0}
    assert coverage.gender == {"male": 0, "female": 100, "not_specified": 0}
    assert coverage.pregnancy["pregnant"] == 100
    assert coverage.geography["Europe"] == 100
    assert coverage.geography["not_specified"] == 0
