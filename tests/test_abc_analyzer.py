import pandas as pd
import pytest

from sales_dashboard.analysis.abc import ABCAnalyzer, categorize, classify_abc, summarize_categories
from sales_dashboard.analysis.aggregation import group_products, records_to_frame
from sales_dashboard.data.models.aggregates import AggregateBucket

from conftest import make_record


def test_example_stores_are_classified_a_b_c(store_frame: pd.DataFrame) -> None:
    products = classify_abc(group_products(store_frame))

    assert [product.key for product in products] == ["A", "B", "C"]
    assert [product.category for product in products] == ["A", "B", "C"]
    assert [product.cumulative_percentage for product in products] == pytest.approx([60, 90, 100])


def test_item_crossing_the_a_threshold_is_category_b() -> None:
    buckets = [
        AggregateBucket(key="big", value=70),
        AggregateBucket(key="crossing", value=20),
        AggregateBucket(key="small", value=10),
    ]

    products = classify_abc(buckets)

    # "crossing" has most of its share below 80% but ends at 90% cumulative
    assert products[1].cumulative_percentage == pytest.approx(90)
    assert products[1].category == "B"


def test_boundaries_are_inclusive() -> None:
    assert categorize(80) == "A"
    assert categorize(80.01) == "B"
    assert categorize(95) == "B"
    assert categorize(95.01) == "C"


def test_categories_follow_sort_order() -> None:
    buckets = [AggregateBucket(key=f"p{i}", value=value) for i, value in enumerate(
        [5, 300, 40, 1, 120, 80, 15, 2, 60, 9, 30, 3]
    )]

    categories = [product.category for product in classify_abc(buckets)]

    assert categories == sorted(categories)
    assert categories[0] == "A"
    assert categories[-1] == "C"


def test_equal_values_keep_input_order() -> None:
    buckets = [
        AggregateBucket(key="x", value=10),
        AggregateBucket(key="y", value=10),
        AggregateBucket(key="z", value=10),
    ]

    assert [product.key for product in classify_abc(buckets)] == ["x", "y", "z"]


def test_summary_covers_every_category(store_frame: pd.DataFrame) -> None:
    frame = store_frame[store_frame["store"] == "A"]

    summary = summarize_categories(classify_abc(group_products(frame)))

    assert set(summary) == {"A", "B", "C"}
    # A single product holds 100% and lands in C
    assert summary["C"].count == 1
    assert summary["C"].percentage == pytest.approx(100)
    assert summary["A"].count == 0
    assert summary["A"].percentage == 0


def test_analyzer_report(sample_frame: pd.DataFrame) -> None:
    report = ABCAnalyzer().analyze(sample_frame)

    assert [product.key for product in report.products] == ["P1", "P2", "P3"]
    assert [product.category for product in report.products] == ["A", "B", "C"]
    assert report.total_value == 1400
    assert report.summary["A"].value == 900
    assert sum(entry.percentage for entry in report.summary.values()) == pytest.approx(100)


def test_analyzer_limits_table_rows() -> None:
    frame = records_to_frame([
        make_record(str(i), product_code=f"P{i}", value_sold=100 - i) for i in range(30)
    ])

    report = ABCAnalyzer().analyze(frame)

    assert len(report.products) == 30
    assert len(report.top_products) == 20
    assert len(ABCAnalyzer(limit=5).analyze(frame).top_products) == 5


def test_analyzer_on_empty_frame() -> None:
    report = ABCAnalyzer().analyze(records_to_frame([]))

    assert report.products == []
    assert report.summary["A"].count == 0


def test_invalid_thresholds_are_rejected() -> None:
    with pytest.raises(ValueError):
        ABCAnalyzer(a_threshold=96, b_threshold=95)


def test_classified_products_can_be_reclassified_by_quantity(sample_frame: pd.DataFrame) -> None:
    by_value = classify_abc(group_products(sample_frame))

    by_quantity = classify_abc(by_value, measure="quantity")

    assert [product.key for product in by_quantity] == ["P2", "P3", "P1"]
    assert [product.cumulative_percentage for product in by_quantity] == pytest.approx(
        [58.824, 82.353, 100], abs=1e-3
    )
    assert [product.category for product in by_quantity] == ["A", "B", "C"]
