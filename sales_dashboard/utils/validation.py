"""
Validation utilities for the sales dashboard.
"""
from typing import Any, List, Optional
import pandas as pd

from sales_dashboard.config.app_config import DIMENSION_COLUMNS, FILTER_ALL_SENTINELS, MEASURE_COLUMNS


def normalize_filter_value(value: Any) -> Optional[str]:
    """
    Translate a UI selection into a filter value.
    
    Sentinel selections such as "ALL" or "todos" (and blank values) mean
    "no filter" and become None. Other values are stripped of surrounding
    whitespace.
    
    Args:
        value (Any): The selected value
    
    Returns:
        Optional[str]: The filter value, or None when the dimension is unfiltered
    """
    if value is None:
        return None
    
    text = str(value).strip()
    if text.lower() in FILTER_ALL_SENTINELS:
        return None
    
    return text


def validate_dimension(dimension: str) -> str:
    """
    Check that a dimension name is known.
    
    Args:
        dimension (str): Dimension name (month, session, group, subgroup, store, product)
    
    Returns:
        str: The frame column holding the dimension
    
    Raises:
        ValueError: If the dimension is unknown
    """
    if dimension not in DIMENSION_COLUMNS:
        raise ValueError(
            f"Unknown dimension: {dimension}. Expected one of: {', '.join(DIMENSION_COLUMNS)}"
        )
    return DIMENSION_COLUMNS[dimension]


def validate_measure(measure: str) -> str:
    """
    Check that a measure name is known.
    
    Args:
        measure (str): Measure name (value, quantity, profit)
    
    Returns:
        str: The frame column holding the measure
    
    Raises:
        ValueError: If the measure is unknown
    """
    if measure not in MEASURE_COLUMNS:
        raise ValueError(
            f"Unknown measure: {measure}. Expected one of: {', '.join(MEASURE_COLUMNS)}"
        )
    return MEASURE_COLUMNS[measure]


def validate_limit(limit: Any, default: int) -> int:
    """
    Validate and convert a top-N limit.
    
    Args:
        limit (Any): The limit to validate
        default (int): Value used when conversion fails
        
    Returns:
        int: The validated limit (never negative)
    """
    try:
        return max(0, int(limit))
    except (ValueError, TypeError):
        return default


def validate_dataframe(df: pd.DataFrame, required_columns: List[str]) -> bool:
    """
    Validate that a DataFrame contains the required columns.
    
    Args:
        df (pd.DataFrame): The DataFrame to validate
        required_columns (List[str]): List of required column names
        
    Returns:
        bool: True if all required columns exist, False otherwise
    """
    if df is None:
        return False
    
    missing_columns = [col for col in required_columns if col not in df.columns]
    return len(missing_columns) == 0
