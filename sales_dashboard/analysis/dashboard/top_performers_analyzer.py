"""
Top stores, sessions and products by value.
"""
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import group_products, group_records, top_n
from sales_dashboard.config.app_config import TOP_PERFORMERS_LIMIT
from sales_dashboard.data.models.aggregates import TopPerformersReport


class TopPerformersAnalyzer(BaseAnalyzer):
    """
    Analyzer for the top performers ranking.
    """
    
    default_limit = TOP_PERFORMERS_LIMIT
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> TopPerformersReport:
        """
        Rank stores, sessions and products.
        
        Args:
            sales_data (pd.DataFrame): The (filtered) sales frame
            **kwargs: Additional arguments, including:
                measure (str): Measure to rank by (default: value)
        
        Returns:
            TopPerformersReport: The leading entries of each ranking
        """
        measure = kwargs.get("measure", "value")
        frame = self.prepare_data(sales_data)
        
        return TopPerformersReport(
            stores=top_n(group_records(frame, "store"), self.limit, measure),
            sessions=top_n(group_records(frame, "session"), self.limit, measure),
            products=top_n(group_products(frame), self.limit, measure)
        )
