"""
Date helper utilities for the sales dashboard.
"""
from datetime import datetime
from typing import Tuple

from sales_dashboard.config.app_config import MONTH_ORDER, MONTH_ALIASES


def month_index(month: str) -> int:
    """
    Get the calendar position (0-11) of a month name.
    
    Portuguese names (as stored by the upload form) and English names are
    both recognised, case-insensitively. Unknown names sort after December.
    
    Args:
        month (str): Month name
    
    Returns:
        int: Zero-based month index, or 12 for unknown names
    """
    if not month:
        return len(MONTH_ORDER)
    
    name = month.strip().lower()
    for index, known in enumerate(MONTH_ORDER):
        if known.lower() == name:
            return index
    
    return MONTH_ALIASES.get(name, len(MONTH_ORDER))


def month_sort_key(month: str, year: str = "") -> Tuple[str, int, str]:
    """
    Build a sort key that orders (month, year) pairs chronologically.
    
    Args:
        month (str): Month name
        year (str): Year as stored on the record (may be empty)
    
    Returns:
        Tuple[str, int, str]: Sort key
    """
    return (year or "", month_index(month), month or "")


def get_timestamp_str() -> str:
    """
    Get a timestamp string for filenames.
    
    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
