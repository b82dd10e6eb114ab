import pandas as pd
import pytest

from sales_dashboard.analysis.filtering import apply_filters, unique_values
from sales_dashboard.data.models.sales import FilterState


def test_empty_filter_matches_everything(sample_frame: pd.DataFrame) -> None:
    assert len(apply_filters(sample_frame, FilterState())) == 5


def test_filters_combine_with_and(sample_frame: pd.DataFrame) -> None:
    by_session = apply_filters(sample_frame, FilterState(session="Eletro"))
    by_both = apply_filters(sample_frame, FilterState(session="Eletro", store="Norte"))

    assert by_session["id"].tolist() == ["1", "3"]
    assert by_both["id"].tolist() == ["3"]


def test_product_filter_matches_code_or_description(sample_frame: pd.DataFrame) -> None:
    by_description = apply_filters(sample_frame, FilterState(product="camisa"))
    by_code = apply_filters(sample_frame, FilterState(product="p1"))

    assert by_description["id"].tolist() == ["2"]
    assert by_code["id"].tolist() == ["1", "3"]


def test_filtering_is_idempotent(sample_frame: pd.DataFrame) -> None:
    filter_state = FilterState(month="Fevereiro", product="p")

    once = apply_filters(sample_frame, filter_state)
    twice = apply_filters(once, filter_state)

    pd.testing.assert_frame_equal(once, twice)
    assert once["id"].tolist() == ["3", "4"]


def test_filtering_leaves_source_untouched(sample_frame: pd.DataFrame) -> None:
    apply_filters(sample_frame, FilterState(store="Sul"))

    assert len(sample_frame) == 5


def test_sentinels_become_unfiltered() -> None:
    filter_state = FilterState.from_selections({
        "month": "ALL",
        "session": "todos",
        "group": "",
        "store": "Centro",
        "product": "  ",
    })

    assert filter_state.active_filters() == {"store": "Centro"}


def test_unknown_filter_dimension_is_rejected() -> None:
    with pytest.raises(ValueError):
        FilterState.from_selections({"region": "South"})


def test_unique_values_in_first_seen_order(sample_frame: pd.DataFrame) -> None:
    assert unique_values(sample_frame, "month") == ["Janeiro", "Fevereiro"]
    assert unique_values(sample_frame, "product") == ["P1", "P2", "P3"]


def test_product_search_ignores_surrounding_whitespace(sample_frame: pd.DataFrame) -> None:
    filter_state = FilterState.from_selections({"product": " camisa ", "store": "Norte "})

    assert filter_state.active_filters() == {"product": "camisa", "store": "Norte"}
    assert apply_filters(sample_frame, filter_state)["id"].tolist() == ["2"]
