"""
ABC classification package.
"""
from sales_dashboard.analysis.abc.abc_analyzer import (
    ABCAnalyzer,
    categorize,
    classify_abc,
    summarize_categories
)
