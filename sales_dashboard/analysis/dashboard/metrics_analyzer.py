"""
Headline metrics for the dashboard cards.
"""
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import (
    distinct_count,
    group_products,
    group_records,
    measure_total,
    safe_percentage,
    top_n
)
from sales_dashboard.data.models.aggregates import DashboardSummary


class MetricsAnalyzer(BaseAnalyzer):
    """
    Analyzer for totals, distinct counts, margin and leading product/store.
    """
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> DashboardSummary:
        """
        Compute the dashboard summary.
        
        Args:
            sales_data (pd.DataFrame): The (filtered) sales frame
            **kwargs: Unused
        
        Returns:
            DashboardSummary: Headline metrics; all zero for an empty frame
        """
        frame = self.prepare_data(sales_data)
        if frame.empty:
            return DashboardSummary()
        
        total_value = measure_total(frame, "value")
        total_profit = measure_total(frame, "profit")
        
        leaders = top_n(group_products(frame), 1)
        top_product = leaders[0] if leaders else None
        
        leaders = top_n(group_records(frame, "store"), 1)
        top_store = leaders[0] if leaders else None
        
        return DashboardSummary(
            total_value=total_value,
            total_profit=total_profit,
            total_quantity=measure_total(frame, "quantity"),
            record_count=len(frame),
            unique_products=distinct_count(frame, "product_code", skip_empty=True),
            unique_stores=distinct_count(frame, "store"),
            unique_sessions=distinct_count(frame, "session"),
            profit_margin=safe_percentage(total_profit, total_value),
            top_product=top_product,
            top_product_share=safe_percentage(top_product.value, total_value) if top_product else 0.0,
            top_store=top_store,
            top_store_share=safe_percentage(top_store.value, total_value) if top_store else 0.0
        )
