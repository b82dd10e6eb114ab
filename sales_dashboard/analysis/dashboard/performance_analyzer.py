"""
Store, session, monthly and group performance.
"""
from dataclasses import replace
from typing import List
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import (
    group_records,
    measure_total,
    rank_buckets,
    safe_percentage,
    top_n,
    with_percentages
)
from sales_dashboard.analysis.comparison import percentage_change
from sales_dashboard.config.app_config import SESSION_PERFORMANCE_LIMIT, STORE_PERFORMANCE_LIMIT
from sales_dashboard.data.models.aggregates import AggregateBucket, PerformanceReport
from sales_dashboard.utils.date_helpers import month_sort_key


def monthly_trend(frame: pd.DataFrame) -> List[AggregateBucket]:
    """
    Group records by month and year, in calendar order.
    
    Bucket keys read "<month> <year>" (just the month when the year is empty).
    """
    buckets = group_records(frame, ["month", "year"])
    buckets.sort(key=lambda bucket: month_sort_key(bucket.key[0], bucket.key[1]))
    return [replace(bucket, key=" ".join(part for part in bucket.key if part)) for bucket in buckets]


def growth_trend(trend: List[AggregateBucket]) -> float:
    """Change from the first to the last period, 0 with fewer than two periods."""
    if len(trend) < 2:
        return 0.0
    return percentage_change(trend[-1].value, trend[0].value)


class PerformanceAnalyzer(BaseAnalyzer):
    """
    Analyzer for the advanced performance view.
    """
    
    def __init__(
        self,
        limit=None,
        store_limit: int = STORE_PERFORMANCE_LIMIT,
        session_limit: int = SESSION_PERFORMANCE_LIMIT
    ):
        super().__init__(limit)
        self.store_limit = store_limit
        self.session_limit = session_limit
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> PerformanceReport:
        """
        Compute the performance view.
        
        Store rows carry the number of sessions they sold in, and their
        percentage is relative to the leading store. Session rows carry the
        number of stores they sold in, and their percentage is of the total.
        
        Args:
            sales_data (pd.DataFrame): The (filtered) sales frame
            **kwargs: Unused
        
        Returns:
            PerformanceReport: The performance view
        """
        frame = self.prepare_data(sales_data)
        if frame.empty:
            return PerformanceReport()
        
        total_value = measure_total(frame, "value")
        
        stores = rank_buckets(group_records(frame, "store", distinct=["session"]))
        leader_value = stores[0].value if stores else 0.0
        store_performance = with_percentages(stores[:self.store_limit], total=leader_value)
        
        sessions = group_records(frame, "session", distinct=["store"])
        session_performance = with_percentages(top_n(sessions, self.session_limit), total=total_value)
        
        trend = monthly_trend(frame)
        
        groups = with_percentages(group_records(frame, "group"), total=total_value)
        
        return PerformanceReport(
            store_performance=store_performance,
            session_performance=session_performance,
            monthly_trend=trend,
            growth_trend=growth_trend(trend),
            group_diversity=rank_buckets(groups),
            diversity_score=len(groups),
            total_value=total_value
        )
