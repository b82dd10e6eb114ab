"""
Utility package for the sales dashboard.
"""
from sales_dashboard.utils.validation import (
    normalize_filter_value,
    validate_dimension,
    validate_measure,
    validate_limit,
    validate_dataframe
)
from sales_dashboard.utils.date_helpers import (
    month_index,
    month_sort_key,
    get_timestamp_str
)
from sales_dashboard.utils.logging_config import setup_logging, get_logger
