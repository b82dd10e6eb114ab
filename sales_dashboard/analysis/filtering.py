"""
Filtering of the sales frame by the active dashboard filters.
"""
from typing import List

import pandas as pd

from sales_dashboard.data.models.sales import FilterState
from sales_dashboard.utils.validation import validate_dimension


def build_filter_mask(frame: pd.DataFrame, filter_state: FilterState) -> pd.Series:
    """
    Build the boolean mask for a filter state.
    
    Categorical dimensions match exactly; ``product`` matches code or
    description as a case-insensitive substring. Filters combine with AND.
    
    Args:
        frame (pd.DataFrame): Normalized sales frame
        filter_state (FilterState): Active filters
    
    Returns:
        pd.Series: True for records that pass every filter
    """
    mask = pd.Series(True, index=frame.index)
    
    for dimension, value in filter_state.active_filters().items():
        if dimension == "product":
            needle = value.lower()
            code_match = frame["product_code"].str.lower().str.contains(needle, regex=False)
            description_match = frame["product_description"].str.lower().str.contains(needle, regex=False)
            mask &= code_match | description_match
        else:
            mask &= frame[validate_dimension(dimension)] == value
    
    return mask


def apply_filters(frame: pd.DataFrame, filter_state: FilterState) -> pd.DataFrame:
    """
    Return the records of ``frame`` that pass the filters.
    
    An empty filter state returns every record.
    """
    if filter_state is None or filter_state.is_empty():
        return frame
    return frame[build_filter_mask(frame, filter_state)]


def unique_values(frame: pd.DataFrame, dimension: str) -> List[str]:
    """
    List the distinct values of a dimension in first-seen order.
    
    Product codes skip empty values, as those records have no product.
    """
    column = validate_dimension(dimension)
    values = frame[column]
    if dimension == "product":
        values = values[values != ""]
    return values.drop_duplicates().tolist()
