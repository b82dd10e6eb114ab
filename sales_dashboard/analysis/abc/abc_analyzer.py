"""
ABC classification of products by cumulative share of value.
"""
from dataclasses import fields
from typing import Dict, List, Sequence
import pandas as pd

from sales_dashboard.analysis.base_analyzer import BaseAnalyzer
from sales_dashboard.analysis.aggregation import (
    bucket_total,
    group_products,
    rank_buckets,
    safe_percentage,
    with_cumulative_percentages,
    with_percentages
)
from sales_dashboard.config.app_config import (
    ABC_A_THRESHOLD,
    ABC_B_THRESHOLD,
    ABC_CATEGORIES,
    ABC_TABLE_LIMIT
)
from sales_dashboard.data.models.aggregates import (
    ABCReport,
    AggregateBucket,
    CategorySummary,
    ClassifiedProduct
)
from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


def categorize(
    cumulative_percentage: float,
    a_threshold: float = ABC_A_THRESHOLD,
    b_threshold: float = ABC_B_THRESHOLD
) -> str:
    """
    Map a cumulative percentage to its ABC category.
    
    Args:
        cumulative_percentage (float): Running share of value, including the item itself
        a_threshold (float): Upper bound (inclusive) for category A
        b_threshold (float): Upper bound (inclusive) for category B
    
    Returns:
        str: "A", "B" or "C"
    """
    if cumulative_percentage <= a_threshold:
        return "A"
    if cumulative_percentage <= b_threshold:
        return "B"
    return "C"


def classify_abc(
    buckets: Sequence[AggregateBucket],
    measure: str = "value",
    a_threshold: float = ABC_A_THRESHOLD,
    b_threshold: float = ABC_B_THRESHOLD
) -> List[ClassifiedProduct]:
    """
    Classify buckets into A/B/C bands by cumulative contribution.
    
    Buckets are ranked by descending measure (equal measures keep their input
    order). Each bucket is categorized by the cumulative percentage after its
    own share is added, so the item that crosses the A threshold lands in B.
    
    Args:
        buckets (Sequence[AggregateBucket]): Product buckets
        measure (str): Measure to rank and share by
        a_threshold (float): Upper bound (inclusive) for category A
        b_threshold (float): Upper bound (inclusive) for category B
    
    Returns:
        List[ClassifiedProduct]: Classified products, highest measure first
    """
    ranked = with_cumulative_percentages(
        with_percentages(rank_buckets(buckets, measure), measure)
    )
    
    # Bucket fields only; an existing category is recomputed
    bucket_fields = [field_info.name for field_info in fields(AggregateBucket)]

    return [
        ClassifiedProduct(
            **{name: getattr(bucket, name) for name in bucket_fields},
            category=categorize(bucket.cumulative_percentage, a_threshold, b_threshold)
        )
        for bucket in ranked
    ]


def summarize_categories(
    products: Sequence[ClassifiedProduct],
    measure: str = "value"
) -> Dict[str, CategorySummary]:
    """
    Count products and sum their measure per category.
    
    Every category is present in the result, even when empty.
    """
    total = bucket_total(products, measure)
    summary = {category: CategorySummary(category=category) for category in ABC_CATEGORIES}
    
    for product in products:
        entry = summary[product.category]
        entry.count += 1
        entry.value += product.measure(measure)
    
    for entry in summary.values():
        entry.percentage = safe_percentage(entry.value, total)
    
    return summary


class ABCAnalyzer(BaseAnalyzer):
    """
    Analyzer for the ABC classification view.
    """
    
    default_limit = ABC_TABLE_LIMIT
    
    def __init__(
        self,
        limit=None,
        a_threshold: float = ABC_A_THRESHOLD,
        b_threshold: float = ABC_B_THRESHOLD
    ):
        super().__init__(limit)
        if not 0 <= a_threshold <= b_threshold <= 100:
            raise ValueError(
                f"ABC thresholds must satisfy 0 <= A <= B <= 100, got A={a_threshold}, B={b_threshold}"
            )
        self.a_threshold = a_threshold
        self.b_threshold = b_threshold
    
    def analyze(self, sales_data: pd.DataFrame, **kwargs) -> ABCReport:
        """
        Classify every product of the frame.
        
        Args:
            sales_data (pd.DataFrame): The sales frame
            **kwargs: Additional arguments, including:
                measure (str): Measure to classify by (default: value)
        
        Returns:
            ABCReport: Classified products and category summary
        """
        measure = kwargs.get("measure", "value")
        frame = self.prepare_data(sales_data)
        
        products = classify_abc(
            group_products(frame),
            measure=measure,
            a_threshold=self.a_threshold,
            b_threshold=self.b_threshold
        )
        summary = summarize_categories(products, measure)
        
        counts = ", ".join(f"{cat}={entry.count}" for cat, entry in summary.items())
        logger.debug(f"Classified {len(products)} products: {counts}")
        
        return ABCReport(
            products=products,
            summary=summary,
            total_value=bucket_total(products, measure),
            top_products=products[:self.limit]
        )
