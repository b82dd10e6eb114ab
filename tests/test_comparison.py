import pandas as pd
import pytest

from sales_dashboard.analysis.comparison import ComparisonAnalyzer, calculate_period_metrics, percentage_change
from sales_dashboard.analysis.aggregation import records_to_frame


@pytest.mark.parametrize("current, previous, expected", [
    (0, 0, 0),
    (50, 0, 100),
    (150, 100, 50),
    (600, 900, -33.333),
])
def test_percentage_change(current, previous, expected) -> None:
    assert percentage_change(current, previous) == pytest.approx(expected, abs=1e-3)


def test_two_month_comparison(sample_frame: pd.DataFrame) -> None:
    result = ComparisonAnalyzer().compare(sample_frame, "month", ["Janeiro", "Fevereiro"])

    assert result.valid
    january, february = result.metrics

    assert january.total_value == 900
    assert january.total_quantity == 12
    assert january.total_profit == 210
    assert january.record_count == 2
    assert january.unique_sessions == 2
    assert january.unique_stores == 2
    assert january.average_per_store == pytest.approx(450)

    assert february.total_value == 600
    assert february.total_quantity == 5
    assert february.record_count == 3
    assert february.unique_stores == 3
    assert february.average_per_store == pytest.approx(200)

    changes = result.changes[("Janeiro", "Fevereiro")]
    assert changes["total_value"] == pytest.approx(-33.333, abs=1e-3)
    assert changes["record_count"] == pytest.approx(50)
    assert changes["average_per_store"] == pytest.approx(-55.556, abs=1e-3)


def test_two_way_chart_is_ordered_by_combined_value(sample_frame: pd.DataFrame) -> None:
    result = ComparisonAnalyzer().compare(sample_frame, "month", ["Janeiro", "Fevereiro"])

    chart = result.chart_data
    assert chart.columns.tolist() == ["session", "Janeiro", "Fevereiro"]
    assert chart["session"].tolist() == ["Eletro", "Moda", "Casa"]
    assert chart["Janeiro"].tolist() == [600, 300, 0]
    assert chart["Fevereiro"].tolist() == [300, 100, 200]


def test_three_way_comparison(sample_frame: pd.DataFrame) -> None:
    result = ComparisonAnalyzer().compare(sample_frame, "store", ["Centro", "Norte", "Sul"])

    assert [metrics.total_value for metrics in result.metrics] == [800, 600, 100]
    assert list(result.changes) == [("Centro", "Norte"), ("Norte", "Sul")]

    chart = result.chart_data
    assert chart["session"].tolist() == ["Eletro", "Casa", "Moda"]
    assert chart["Centro"].tolist() == [600, 200, 0]
    assert chart["Norte"].tolist() == [300, 0, 300]
    assert chart["Sul"].tolist() == [0, 0, 100]


def test_value_without_records_compares_as_zero(sample_frame: pd.DataFrame) -> None:
    result = ComparisonAnalyzer().compare(sample_frame, "month", ["Janeiro", "Março"])

    assert result.valid
    assert result.metrics[1].total_value == 0
    assert result.metrics[1].average_per_store == 0
    assert result.changes[("Janeiro", "Março")]["total_value"] == pytest.approx(-100)


@pytest.mark.parametrize("values", [
    ["Janeiro"],
    ["Janeiro", "Janeiro", "Fevereiro"],
    ["Janeiro", ""],
    ["Janeiro", "   "],
    ["Janeiro", "Fevereiro", "Março", "Abril"],
])
def test_invalid_selection_is_reported(sample_frame: pd.DataFrame, values) -> None:
    result = ComparisonAnalyzer().compare(sample_frame, "month", values)

    assert not result.valid
    assert result.message
    assert result.metrics == []
    assert result.chart_data.empty


def test_unknown_dimension_is_rejected(sample_frame: pd.DataFrame) -> None:
    with pytest.raises(ValueError):
        ComparisonAnalyzer().compare(sample_frame, "region", ["North", "South"])


def test_analyze_uses_keyword_arguments(sample_frame: pd.DataFrame) -> None:
    result = ComparisonAnalyzer().analyze(sample_frame, dimension="session", values=["Eletro", "Moda"])

    assert [metrics.label for metrics in result.metrics] == ["Eletro", "Moda"]
    assert [metrics.total_value for metrics in result.metrics] == [900, 400]


def test_period_metrics_of_empty_frame() -> None:
    metrics = calculate_period_metrics(records_to_frame([]), "Janeiro")

    assert metrics.label == "Janeiro"
    assert metrics.record_count == 0
    assert metrics.average_per_store == 0
