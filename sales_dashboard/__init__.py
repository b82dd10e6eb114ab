"""
Sales Dashboard package.

This package aggregates sales records into the metrics, rankings, ABC
classification and comparisons shown on the sales dashboard.
"""
from sales_dashboard.main import SalesDashboardApp, run_report

__version__ = "1.0.0"
