"""
Sales data models.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from sales_dashboard.config.app_config import NUMERIC_COLUMNS
from sales_dashboard.utils.validation import normalize_filter_value


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class SalesRecord:
    """
    Represents one row of sales data.
    """
    id: str
    month: Optional[str] = None
    year: Optional[str] = None
    session: Optional[str] = None
    group: Optional[str] = None
    subgroup: Optional[str] = None
    store: Optional[str] = None
    product_code: Optional[str] = None
    product_description: Optional[str] = None
    quantity_sold: Optional[float] = None
    value_sold: Optional[float] = None
    profit_value: Optional[float] = None
    total: Optional[float] = None  # Legacy measure, used when value_sold is absent
    date: Optional[str] = None
    
    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SalesRecord":
        """
        Build a record from a storage row.
        
        Column names are matched case-insensitively, and the storage name
        GROUP_NAME maps to ``group``. NaN and None both mean "absent".
        
        Args:
            row (Mapping[str, Any]): Row from a DataFrame, CSV reader or dict
        
        Returns:
            SalesRecord: The record
        """
        normalized = {}
        for key, value in row.items():
            name = str(key).lower()
            if name == "group_name":
                name = "group"
            normalized[name] = None if _is_missing(value) else value
        
        values: Dict[str, Any] = {}
        for field_info in fields(cls):
            value = normalized.get(field_info.name)
            if value is None:
                continue
            if field_info.name in NUMERIC_COLUMNS:
                values[field_info.name] = float(value)
            else:
                # Years come back from numeric columns as 2024.0
                if isinstance(value, float) and value.is_integer():
                    value = int(value)
                values[field_info.name] = str(value)
        
        if "id" not in values:
            raise ValueError(f"Sales row has no id: {dict(row)}")
        
        return cls(**values)
    
    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a plain dictionary."""
        return {field_info.name: getattr(self, field_info.name) for field_info in fields(self)}


@dataclass
class FilterState:
    """
    Active dashboard filters. None means the dimension is unfiltered.
    """
    month: Optional[str] = None
    session: Optional[str] = None
    group: Optional[str] = None
    subgroup: Optional[str] = None
    store: Optional[str] = None
    product: Optional[str] = None  # Free text, matched against code and description
    
    @classmethod
    def from_selections(cls, selections: Mapping[str, Any]) -> "FilterState":
        """
        Build a filter state from UI selections, dropping "ALL"-style sentinels.
        
        Args:
            selections (Mapping[str, Any]): Dimension name to selected value
        
        Returns:
            FilterState: The filter state
        """
        known = {field_info.name for field_info in fields(cls)}
        unknown = set(selections) - known
        if unknown:
            raise ValueError(f"Unknown filter dimensions: {', '.join(sorted(unknown))}")
        
        return cls(**{name: normalize_filter_value(value) for name, value in selections.items()})
    
    def active_filters(self) -> Dict[str, str]:
        """Return only the dimensions that carry a filter value."""
        return {
            field_info.name: getattr(self, field_info.name)
            for field_info in fields(self)
            if getattr(self, field_info.name) is not None
        }
    
    def is_empty(self) -> bool:
        return not self.active_filters()
