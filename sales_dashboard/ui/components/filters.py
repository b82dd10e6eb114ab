"""
Filter components for Streamlit UI.
"""
from typing import List, Optional, Tuple
import streamlit as st
import pandas as pd
from sales_dashboard.config.app_config import COMPARISON_SIZES, DIMENSION_COLUMNS, FILTER_ALL_LABEL
from sales_dashboard.data.models.sales import FilterState
from sales_dashboard.analysis.filtering import unique_values

DIMENSION_LABELS = {
    "month": "Month",
    "session": "Session",
    "group": "Group",
    "subgroup": "Subgroup",
    "store": "Store",
    "product": "Product"
}


def create_dimension_filter(dimension: str, options: List[str]) -> str:
    """
    Create a select box for one dimension, with an "ALL" option first.
    
    Args:
        dimension (str): Dimension name
        options (List[str]): Values present in the data
    
    Returns:
        str: Selected value ("ALL" when unfiltered)
    """
    return st.sidebar.selectbox(
        DIMENSION_LABELS[dimension],
        options=[FILTER_ALL_LABEL] + [option for option in options if option],
        key=f"filter_{dimension}"
    )


def create_product_search() -> str:
    """
    Create the free-text product search box.
    
    Returns:
        str: Search text (empty when unfiltered)
    """
    return st.sidebar.text_input(
        "Product code or description",
        value="",
        key="filter_product"
    )


def create_clear_data_button() -> bool:
    """
    Create the button that deletes every stored record.
    
    Returns:
        bool: True if the button was clicked
    """
    return st.sidebar.button("Clear all data", type="secondary")


def create_all_filters(sales_data: Optional[pd.DataFrame] = None) -> FilterState:
    """
    Create all filter widgets and return the filter state.
    
    Args:
        sales_data (Optional[pd.DataFrame]): Full sales frame for populating options
    
    Returns:
        FilterState: Active filters ("ALL" selections become unfiltered)
    """
    st.sidebar.header("Filters")
    
    selections = {}
    for dimension in DIMENSION_COLUMNS:
        if dimension == "product":
            continue
        options = unique_values(sales_data, dimension) if sales_data is not None else []
        selections[dimension] = create_dimension_filter(dimension, options)
    
    selections["product"] = create_product_search()
    
    return FilterState.from_selections(selections)


def create_comparison_controls(sales_data: pd.DataFrame) -> Tuple[str, List[str]]:
    """
    Create the comparison dimension picker and one picker per compared value.
    
    Args:
        sales_data (pd.DataFrame): Sales frame for populating options
    
    Returns:
        Tuple[str, List[str]]: Selected dimension and values (blank when unset)
    """
    col1, col2 = st.columns(2)
    dimension = col1.selectbox(
        "Compare by",
        options=list(DIMENSION_COLUMNS),
        format_func=lambda name: DIMENSION_LABELS[name]
    )
    size = col2.radio("Number of values", options=list(COMPARISON_SIZES), horizontal=True)
    
    options = [""] + unique_values(sales_data, dimension)
    columns = st.columns(size)
    values = [
        column.selectbox(f"Value {index + 1}", options=options, key=f"compare_{dimension}_{index}")
        for index, column in enumerate(columns)
    ]
    
    return dimension, values
