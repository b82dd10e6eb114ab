"""
Period and dimension comparison package.
"""
from sales_dashboard.analysis.comparison.comparison_analyzer import (
    ComparisonAnalyzer,
    calculate_period_metrics,
    percentage_change
)
