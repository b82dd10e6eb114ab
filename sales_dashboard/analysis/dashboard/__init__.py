"""
Dashboard view analyzers.
"""
from sales_dashboard.analysis.dashboard.metrics_analyzer import MetricsAnalyzer
from sales_dashboard.analysis.dashboard.top_performers_analyzer import TopPerformersAnalyzer
from sales_dashboard.analysis.dashboard.performance_analyzer import PerformanceAnalyzer
from sales_dashboard.analysis.dashboard.chart_analyzer import ChartAnalyzer
