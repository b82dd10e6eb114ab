"""
Factory for creating dashboard analyzers.
"""
from typing import Dict, Type, Optional
from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.abc import ABCAnalyzer
from sales_dashboard.analysis.comparison import ComparisonAnalyzer
from sales_dashboard.analysis.dashboard import (
    ChartAnalyzer,
    MetricsAnalyzer,
    PerformanceAnalyzer,
    TopPerformersAnalyzer
)
from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


class AnalyzerFactory:
    """
    Factory for creating the analyzer behind each dashboard view.
    """
    
    def __init__(self, limits: Optional[Dict[str, int]] = None):
        """
        Initialize the analyzer factory.
        
        Args:
            limits (Optional[Dict[str, int]]): Ranking limit overrides by view name
        """
        self.limits = limits or {}
        
        # Register analyzers
        self._analyzers: Dict[str, Type[BaseAnalyzer]] = {
            'metrics': MetricsAnalyzer,
            'top_performers': TopPerformersAnalyzer,
            'performance': PerformanceAnalyzer,
            'charts': ChartAnalyzer,
            'abc': ABCAnalyzer,
            'comparison': ComparisonAnalyzer
        }
    
    def get_analyzer(self, view: str) -> Optional[BaseAnalyzer]:
        """
        Get an analyzer for the specified view.
        
        Args:
            view (str): The view name ('metrics', 'top_performers', 'performance', 'charts', 'abc', 'comparison')
        
        Returns:
            Optional[BaseAnalyzer]: An analyzer instance for the view, or None if not found
        """
        if view not in self._analyzers:
            logger.warning(f"Unknown analyzer view: {view}")
            return None
        
        analyzer_class = self._analyzers[view]
        return analyzer_class(limit=self.limits.get(view))
    
    def get_all_analyzers(self) -> Dict[str, BaseAnalyzer]:
        """
        Get analyzers for all registered views.
        
        Returns:
            Dict[str, BaseAnalyzer]: Dictionary mapping view names to analyzer instances
        """
        return {view: self.get_analyzer(view) for view in self._analyzers}
