"""
Base exporter interface for dashboard reports.
"""
from abc import ABC, abstractmethod
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional, Sequence
import pandas as pd

from sales_dashboard.data.models.aggregates import AggregateBucket, ClassifiedProduct


def buckets_to_frame(
    buckets: Sequence[AggregateBucket],
    key_names: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Tabulate buckets, one row per bucket.
    
    Args:
        buckets (Sequence[AggregateBucket]): Buckets to tabulate
        key_names (Optional[List[str]]): Column names for the key parts (default: "key")
    
    Returns:
        pd.DataFrame: The table; empty when there are no buckets
    """
    if not buckets:
        return pd.DataFrame()
    
    data = []
    for bucket in buckets:
        parts = bucket.key if isinstance(bucket.key, tuple) else (bucket.key,)
        names = key_names or (["key"] if len(parts) == 1 else [f"key_{i}" for i in range(len(parts))])
        
        row = dict(zip(names, parts))
        if bucket.label is not None:
            row['label'] = bucket.label
        row['value'] = round(bucket.value, 2)
        row['quantity'] = bucket.quantity
        row['profit'] = round(bucket.profit, 2)
        row['count'] = bucket.count
        for field_name, count in bucket.distinct_counts.items():
            row[f'distinct_{field_name}'] = count
        row['percentage'] = round(bucket.percentage, 2)
        if isinstance(bucket, ClassifiedProduct):
            row['cumulative_percentage'] = round(bucket.cumulative_percentage, 2)
            row['category'] = bucket.category
        
        data.append(row)
    
    return pd.DataFrame(data)


class BaseExporter(ABC):
    """
    Abstract base class for exporters that write dashboard reports.
    """
    
    @abstractmethod
    def export(self, reports: Dict[str, Any], output_dir: str) -> str:
        """
        Export reports to a specified format.
        
        Args:
            reports (Dict[str, Any]): Reports by view name
            output_dir (str): Base directory for output files
        
        Returns:
            str: Path to the exported data
        """
        pass
    
    def prepare_dataframe(
        self,
        buckets: Sequence[AggregateBucket],
        key_names: Optional[List[str]] = None
    ) -> pd.DataFrame:
        """
        Prepare a DataFrame from a sequence of buckets.
        """
        return buckets_to_frame(buckets, key_names)
    
    def prepare_records(self, items: Sequence[Any]) -> pd.DataFrame:
        """
        Prepare a DataFrame from flat dataclass instances (summaries, metrics).
        """
        rows = []
        for item in items:
            if not is_dataclass(item):
                continue
            row = asdict(item)
            # Nested buckets are exported by their key only
            for name, value in list(row.items()):
                if isinstance(value, dict) and 'key' in value:
                    row[name] = value['key']
            rows.append(row)
        return pd.DataFrame(rows)
