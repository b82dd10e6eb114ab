"""
Series for the dashboard charts.
"""
from typing import List, Sequence, Tuple
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import group_records, rank_buckets, top_n, with_percentages
from sales_dashboard.config.app_config import PIE_CHART_LIMIT
from sales_dashboard.data.models.aggregates import AggregateBucket, ChartReport
from sales_dashboard.utils.date_helpers import month_index
from sales_dashboard.utils.validation import validate_dimension, validate_measure

DEFAULT_BREAKDOWNS: List[Tuple[str, str]] = [
    ("session", "value"),
    ("store", "value"),
    ("group", "profit"),
    ("product", "quantity")
]


def share_breakdown(
    frame: pd.DataFrame,
    dimension: str,
    measure: str = "value",
    limit: int = PIE_CHART_LIMIT
) -> List[AggregateBucket]:
    """
    Largest slices of a measure by dimension, for pie charts.
    
    Percentages are relative to the slices shown, not to the full total.
    
    Args:
        frame (pd.DataFrame): Sales frame
        dimension (str): Dimension to slice by
        measure (str): Measure to size slices by
        limit (int): Maximum number of slices
    
    Returns:
        List[AggregateBucket]: Slices, largest first
    """
    column = validate_dimension(dimension)
    validate_measure(measure)
    buckets = group_records(frame, column, require_non_empty=(dimension == "product"))
    return with_percentages(top_n(buckets, limit, measure), measure)


class ChartAnalyzer(BaseAnalyzer):
    """
    Analyzer for monthly, session and breakdown charts.
    """
    
    default_limit = PIE_CHART_LIMIT
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> ChartReport:
        """
        Build the chart series.
        
        Args:
            sales_data (pd.DataFrame): The (filtered) sales frame
            **kwargs: Additional arguments, including:
                breakdowns (Sequence[Tuple[str, str]]): (dimension, measure) pie charts to build
        
        Returns:
            ChartReport: The chart series
        """
        breakdowns: Sequence[Tuple[str, str]] = kwargs.get("breakdowns", DEFAULT_BREAKDOWNS)
        frame = self.prepare_data(sales_data)
        
        monthly_sales = group_records(frame, "month")
        monthly_sales.sort(key=lambda bucket: month_index(bucket.key))
        
        return ChartReport(
            monthly_sales=monthly_sales,
            session_sales=rank_buckets(group_records(frame, "session")),
            breakdowns={
                (dimension, measure): share_breakdown(frame, dimension, measure, self.limit)
                for dimension, measure in breakdowns
            }
        )
