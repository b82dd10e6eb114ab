"""
Two- and three-way comparisons along one dimension.
"""
from typing import Dict, List, Optional, Sequence
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import distinct_count, measure_total
from sales_dashboard.config.app_config import COMPARISON_METRICS, COMPARISON_SIZES, VALUE_COLUMN
from sales_dashboard.data.models.aggregates import ComparisonResult, PeriodMetrics
from sales_dashboard.utils.validation import validate_dimension
from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


def percentage_change(current: float, previous: float) -> float:
    """
    Percentage change from ``previous`` to ``current``.
    
    Growth from nothing reports 100; nothing to nothing reports 0.
    
    Args:
        current (float): Later value
        previous (float): Earlier value
    
    Returns:
        float: The change in percent
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return (current - previous) / previous * 100


def calculate_period_metrics(frame: pd.DataFrame, label: str) -> PeriodMetrics:
    """
    Compute the totals for one side of a comparison.
    
    Args:
        frame (pd.DataFrame): Records of this side
        label (str): The dimension value the records were selected by
    
    Returns:
        PeriodMetrics: Totals, distinct counts and average per store
    """
    total_value = measure_total(frame, "value")
    unique_stores = distinct_count(frame, "store")
    
    return PeriodMetrics(
        label=label,
        total_value=total_value,
        total_quantity=measure_total(frame, "quantity"),
        total_profit=measure_total(frame, "profit"),
        record_count=len(frame),
        unique_sessions=distinct_count(frame, "session"),
        unique_stores=unique_stores,
        average_per_store=total_value / unique_stores if unique_stores else 0.0
    )


def validate_selection(values: Sequence[Optional[str]]) -> Optional[str]:
    """
    Check a comparison selection.
    
    Returns:
        Optional[str]: Guidance message when the selection cannot be compared, else None
    """
    if len(values) not in COMPARISON_SIZES:
        return f"Select {' or '.join(str(size) for size in COMPARISON_SIZES)} values to compare."
    if any(not value or not str(value).strip() for value in values):
        return f"Select all {len(values)} values to compare."
    if len(set(values)) != len(values):
        return f"Select {len(values)} different values to compare."
    return None


class ComparisonAnalyzer(BaseAnalyzer):
    """
    Analyzer comparing subsets of records selected along one dimension.
    """
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> ComparisonResult:
        """
        Run a comparison.
        
        Args:
            sales_data (pd.DataFrame): The sales frame
            **kwargs: Additional arguments, including:
                dimension (str): Dimension to compare along (default: month)
                values (Sequence[str]): The 2 or 3 values to compare
        
        Returns:
            ComparisonResult: The comparison
        """
        return self.compare(
            sales_data,
            kwargs.get("dimension", "month"),
            kwargs.get("values", [])
        )
    
    def compare(
        self,
        sales_data: pd.DataFrame,
        dimension: str,
        values: Sequence[str]
    ) -> ComparisonResult:
        """
        Compare 2 or 3 distinct values of a dimension.
        
        Invalid selections are reported through ``valid``/``message`` on the
        result rather than raised.
        
        Args:
            sales_data (pd.DataFrame): The sales frame
            dimension (str): month, session, group, subgroup, store or product
            values (Sequence[str]): Values to compare, in display order
        
        Returns:
            ComparisonResult: Metrics per value, changes between consecutive values and chart rows
        """
        column = validate_dimension(dimension)
        values = list(values)
        
        message = validate_selection(values)
        if message:
            logger.info(f"Comparison by {dimension} not run: {message}")
            return ComparisonResult(dimension=dimension, values=values, valid=False, message=message)
        
        frame = self.prepare_data(sales_data)
        subsets = [frame[frame[column] == value] for value in values]
        metrics = [calculate_period_metrics(subset, value) for subset, value in zip(subsets, values)]
        
        changes = {}
        for previous, current in zip(metrics, metrics[1:]):
            changes[(previous.label, current.label)] = self._metric_changes(current, previous)
        
        chart_data = self._build_chart_data(subsets, values)
        
        logger.debug(f"Compared {dimension} values: {', '.join(values)}")
        
        return ComparisonResult(
            dimension=dimension,
            values=values,
            metrics=metrics,
            changes=changes,
            chart_data=chart_data
        )
    
    def _metric_changes(self, current: PeriodMetrics, previous: PeriodMetrics) -> Dict[str, float]:
        return {
            name: percentage_change(getattr(current, name), getattr(previous, name))
            for name in COMPARISON_METRICS
        }
    
    def _build_chart_data(self, subsets: List[pd.DataFrame], values: List[str]) -> pd.DataFrame:
        """
        Build value-per-session rows for the comparison chart.
        
        Sessions are the union over all subsets, in first-seen order; a
        session missing from a subset shows 0. Two-way charts are ordered by
        the combined value, largest first.
        """
        session_totals = [
            subset.groupby("session", sort=False)[VALUE_COLUMN].sum() for subset in subsets
        ]
        
        sessions = dict.fromkeys(
            session for totals in session_totals for session in totals.index
        )

        rows = []
        for session in sessions:
            row = {"session": session}
            for value, totals in zip(values, session_totals):
                row[value] = float(totals.get(session, 0.0))
            rows.append(row)

        if len(values) == 2:
            rows.sort(key=lambda row: sum(row[value] for value in values), reverse=True)

        return pd.DataFrame(rows, columns=["session"] + values)
