"""
Aggregate and report models derived from sales records.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


@dataclass
class AggregateBucket:
    """
    Records sharing a grouping key, with summed measures and counts.
    """
    key: Any  # str, or tuple when grouped by several fields
    value: float = 0.0
    quantity: float = 0.0
    profit: float = 0.0
    count: int = 0
    distinct_counts: Dict[str, int] = field(default_factory=dict)
    label: Optional[str] = None
    percentage: float = 0.0
    cumulative_percentage: float = 0.0
    
    def measure(self, name: str) -> float:
        """Get a summed measure (value, quantity or profit) by name."""
        return getattr(self, name)
    
    def distinct_count(self, field_name: str) -> int:
        return self.distinct_counts.get(field_name, 0)


@dataclass
class ClassifiedProduct(AggregateBucket):
    """
    A product bucket with its ABC category.
    """
    category: str = "C"


@dataclass
class CategorySummary:
    """
    Totals for one ABC category.
    """
    category: str
    count: int = 0
    value: float = 0.0
    percentage: float = 0.0


@dataclass
class ABCReport:
    """
    Result of ABC classification.
    """
    products: List[ClassifiedProduct] = field(default_factory=list)
    summary: Dict[str, CategorySummary] = field(default_factory=dict)
    total_value: float = 0.0
    top_products: List[ClassifiedProduct] = field(default_factory=list)


@dataclass
class DashboardSummary:
    """
    Headline metrics shown on the dashboard cards.
    """
    total_value: float = 0.0
    total_profit: float = 0.0
    total_quantity: float = 0.0
    record_count: int = 0
    unique_products: int = 0
    unique_stores: int = 0
    unique_sessions: int = 0
    profit_margin: float = 0.0
    top_product: Optional[AggregateBucket] = None
    top_product_share: float = 0.0
    top_store: Optional[AggregateBucket] = None
    top_store_share: float = 0.0


@dataclass
class TopPerformersReport:
    """
    Leading stores, sessions and products by value.
    """
    stores: List[AggregateBucket] = field(default_factory=list)
    sessions: List[AggregateBucket] = field(default_factory=list)
    products: List[AggregateBucket] = field(default_factory=list)


@dataclass
class PerformanceReport:
    """
    Store, session, monthly and group performance.
    """
    store_performance: List[AggregateBucket] = field(default_factory=list)
    session_performance: List[AggregateBucket] = field(default_factory=list)
    monthly_trend: List[AggregateBucket] = field(default_factory=list)
    growth_trend: float = 0.0
    group_diversity: List[AggregateBucket] = field(default_factory=list)
    diversity_score: int = 0
    total_value: float = 0.0


@dataclass
class ChartReport:
    """
    Series feeding the dashboard charts.
    """
    monthly_sales: List[AggregateBucket] = field(default_factory=list)
    session_sales: List[AggregateBucket] = field(default_factory=list)
    breakdowns: Dict[Tuple[str, str], List[AggregateBucket]] = field(default_factory=dict)


@dataclass
class PeriodMetrics:
    """
    Totals for one side of a comparison.
    """
    label: str
    total_value: float = 0.0
    total_quantity: float = 0.0
    total_profit: float = 0.0
    record_count: int = 0
    unique_sessions: int = 0
    unique_stores: int = 0
    average_per_store: float = 0.0


@dataclass
class ComparisonResult:
    """
    Two- or three-way comparison along one dimension.
    
    When ``valid`` is False, ``message`` explains what the user must change
    and no metrics are computed.
    """
    dimension: str
    values: List[str]
    valid: bool = True
    message: Optional[str] = None
    metrics: List[PeriodMetrics] = field(default_factory=list)
    changes: Dict[Tuple[str, str], Dict[str, float]] = field(default_factory=dict)
    chart_data: pd.DataFrame = field(default_factory=pd.DataFrame)
