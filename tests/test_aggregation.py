import pandas as pd
import pytest

from sales_dashboard.analysis.aggregation import (
    group_products,
    group_records,
    measure_total,
    rank_buckets,
    records_to_frame,
    safe_percentage,
    top_n,
    with_cumulative_percentages,
    with_percentages
)
from sales_dashboard.data.models.aggregates import AggregateBucket

from conftest import make_record


def test_records_to_frame_defaults_missing_values(sample_frame: pd.DataFrame) -> None:
    legacy = sample_frame[sample_frame["id"] == "5"].iloc[0]

    assert legacy["quantity_sold"] == 0
    assert legacy["profit_value"] == 0
    assert legacy["value_sold"] == 0
    assert legacy["value"] == 100
    assert legacy["product_code"] == ""


def test_value_prefers_value_sold_over_total() -> None:
    frame = records_to_frame([
        make_record("1", value_sold=50, total=999),
        make_record("2"),
    ])

    assert frame["value"].tolist() == [50.0, 0.0]


def test_group_records_keeps_first_seen_order(sample_frame: pd.DataFrame) -> None:
    buckets = group_records(sample_frame, "store")

    assert [bucket.key for bucket in buckets] == ["Centro", "Norte", "Sul"]
    assert [bucket.value for bucket in buckets] == [800.0, 600.0, 100.0]
    assert [bucket.count for bucket in buckets] == [2, 2, 1]


def test_group_records_counts_distinct_values(sample_frame: pd.DataFrame) -> None:
    buckets = group_records(sample_frame, "store", distinct=["session"])

    assert {bucket.key: bucket.distinct_count("session") for bucket in buckets} == {
        "Centro": 2,
        "Norte": 2,
        "Sul": 1,
    }


def test_group_records_keeps_empty_keys_unless_required(sample_frame: pd.DataFrame) -> None:
    by_code = group_records(sample_frame, "product_code")
    products = group_products(sample_frame)

    assert "" in [bucket.key for bucket in by_code]
    assert [bucket.key for bucket in products] == ["P1", "P2", "P3"]
    assert products[0].label == "Geladeira Frost"
    assert products[0].quantity == 3


def test_product_without_description_is_labelled_na() -> None:
    frame = records_to_frame([make_record("1", product_code="X", value_sold=10)])

    assert group_products(frame)[0].label == "N/A"


def test_group_records_by_several_fields(sample_frame: pd.DataFrame) -> None:
    buckets = group_records(sample_frame, ["month", "store"])

    assert buckets[0].key == ("Janeiro", "Centro")
    assert len(buckets) == 5


def test_group_records_on_empty_frame() -> None:
    assert group_records(records_to_frame([]), "store") == []
    assert measure_total(records_to_frame([])) == 0.0


def test_grouping_does_not_modify_the_frame(sample_frame: pd.DataFrame) -> None:
    before = sample_frame.copy()

    group_products(sample_frame)
    group_records(sample_frame, ["month", "year"], distinct=["store"])

    pd.testing.assert_frame_equal(sample_frame, before)


def test_percentages_and_cumulative_for_example_stores(store_frame: pd.DataFrame) -> None:
    buckets = with_cumulative_percentages(
        with_percentages(rank_buckets(group_records(store_frame, "store")))
    )

    assert [bucket.percentage for bucket in buckets] == pytest.approx([60, 30, 10])
    assert [bucket.cumulative_percentage for bucket in buckets] == pytest.approx([60, 90, 100])


def test_percentages_sum_to_one_hundred(sample_frame: pd.DataFrame) -> None:
    for dimension in ["store", "session", "month", "group"]:
        buckets = with_percentages(group_records(sample_frame, dimension))
        assert sum(bucket.percentage for bucket in buckets) == pytest.approx(100)


def test_cumulative_percentage_is_non_decreasing(sample_frame: pd.DataFrame) -> None:
    buckets = with_cumulative_percentages(
        with_percentages(rank_buckets(group_records(sample_frame, "session")))
    )
    cumulative = [bucket.cumulative_percentage for bucket in buckets]

    assert cumulative == sorted(cumulative)
    assert cumulative[-1] == pytest.approx(100)


def test_zero_total_gives_zero_percentages() -> None:
    buckets = with_percentages([AggregateBucket(key="a"), AggregateBucket(key="b")])

    assert [bucket.percentage for bucket in buckets] == [0.0, 0.0]
    assert safe_percentage(10, 0) == 0.0


def test_top_n_is_stable_for_ties() -> None:
    buckets = [
        AggregateBucket(key="first", value=10),
        AggregateBucket(key="big", value=50),
        AggregateBucket(key="second", value=10),
        AggregateBucket(key="third", value=10),
    ]

    assert [bucket.key for bucket in top_n(buckets, 3)] == ["big", "first", "second"]
    assert [bucket.key for bucket in top_n(buckets, 3)] == ["big", "first", "second"]
    assert top_n(buckets, 0) == []


def test_top_n_by_other_measure(sample_frame: pd.DataFrame) -> None:
    leaders = top_n(group_products(sample_frame), 1, measure="quantity")

    assert leaders[0].key == "P2"


def test_unknown_measure_is_rejected() -> None:
    with pytest.raises(ValueError):
        rank_buckets([], measure="margin")
