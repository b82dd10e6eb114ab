"""
Base analyzer for dashboard views.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional
import pandas as pd

from sales_dashboard.analysis.aggregation import FRAME_COLUMNS, normalize_frame
from sales_dashboard.utils.validation import validate_dataframe, validate_limit
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class BaseAnalyzer(ABC):
    """
    Base class for analyzers that derive one dashboard view from the sales frame.
    """
    
    default_limit: int = 0
    
    def __init__(self, limit: Optional[int] = None):
        """
        Initialize the base analyzer.
        
        Args:
            limit (Optional[int]): Ranking limit for the view (uses the view default if None)
        """
        self.limit = validate_limit(limit, self.default_limit) if limit is not None else self.default_limit
    
    def prepare_data(self, sales_data: pd.DataFrame) -> pd.DataFrame:
        """
        Make sure the frame carries every normalized sales column.
        
        Args:
            sales_data (pd.DataFrame): Sales frame, normalized or raw
        
        Returns:
            pd.DataFrame: Normalized sales frame
        """
        if validate_dataframe(sales_data, FRAME_COLUMNS):
            return sales_data
        
        logger.debug("Normalizing raw sales frame before analysis.")
        return normalize_frame(sales_data)
    
    @abstractmethod
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> Any:
        """
        Analyze the sales frame.
        
        Args:
            sales_data (pd.DataFrame): The (filtered) sales frame
            **kwargs: Additional arguments
        
        Returns:
            Any: The report for this view
        """
        pass
