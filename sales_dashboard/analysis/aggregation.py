"""
Grouping, reduction and percentage operations over the sales record frame.

Every function here is pure: inputs are never modified, and new buckets are
built on every call from whatever frame the caller passes in.
"""
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from sales_dashboard.config.app_config import (
    CATEGORICAL_COLUMNS,
    MEASURE_COLUMNS,
    MISSING_DESCRIPTION,
    NUMERIC_COLUMNS,
    SALES_COLUMNS,
    VALUE_COLUMN
)
from sales_dashboard.data.models.aggregates import AggregateBucket
from sales_dashboard.data.models.sales import SalesRecord
from sales_dashboard.utils.validation import validate_measure


FRAME_COLUMNS = SALES_COLUMNS + [VALUE_COLUMN]


def records_to_frame(records: Iterable[SalesRecord]) -> pd.DataFrame:
    """
    Convert sales records into the normalized working frame.
    
    Args:
        records (Iterable[SalesRecord]): Loaded sales records
    
    Returns:
        pd.DataFrame: Normalized frame (see ``normalize_frame``)
    """
    rows = [record.to_dict() for record in records]
    return normalize_frame(pd.DataFrame(rows, columns=SALES_COLUMNS))


def normalize_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize a raw sales frame.
    
    Categorical fields become strings with "" for missing values, numeric
    fields default to 0, and the ``value`` column holds ``value_sold`` or,
    when a record has none, its legacy ``total``.
    
    Args:
        frame (pd.DataFrame): Raw frame with (a subset of) the sales columns
    
    Returns:
        pd.DataFrame: A new frame with every sales column plus ``value``
    """
    frame = frame.copy()
    
    for column in SALES_COLUMNS:
        if column not in frame.columns:
            frame[column] = None
    
    for column in CATEGORICAL_COLUMNS:
        present = frame[column].notna()
        frame[column] = frame[column].astype(object).where(present, "").astype(str)
    
    for column in NUMERIC_COLUMNS:
        frame[column] = pd.to_numeric(frame[column], errors="coerce").astype(float)
    
    frame[VALUE_COLUMN] = frame["value_sold"].fillna(frame["total"]).fillna(0.0)
    for column in NUMERIC_COLUMNS:
        frame[column] = frame[column].fillna(0.0)
    
    return frame[FRAME_COLUMNS].reset_index(drop=True)


def group_records(
    frame: pd.DataFrame,
    keys: Union[str, Sequence[str]],
    distinct: Sequence[str] = (),
    require_non_empty: bool = False,
    label_field: Optional[str] = None
) -> List[AggregateBucket]:
    """
    Group records by one or more fields and reduce each group to a bucket.
    
    Buckets come back in first-seen key order. Records with an empty key are
    grouped under "" unless ``require_non_empty`` is set, in which case they
    are left out of this aggregation.
    
    Args:
        frame (pd.DataFrame): Normalized sales frame
        keys (Union[str, Sequence[str]]): Grouping column(s)
        distinct (Sequence[str]): Columns whose distinct values are counted per bucket
        require_non_empty (bool): Exclude records whose key is empty
        label_field (Optional[str]): Column whose first value labels the bucket
    
    Returns:
        List[AggregateBucket]: One bucket per distinct key
    """
    key_columns = [keys] if isinstance(keys, str) else list(keys)
    
    if require_non_empty:
        frame = frame[(frame[key_columns] != "").all(axis=1)]
    
    if frame.empty:
        return []
    
    by = key_columns[0] if len(key_columns) == 1 else key_columns
    grouped = frame.groupby(by, sort=False)
    
    sums = grouped[list(MEASURE_COLUMNS.values())].sum()
    sizes = grouped.size()
    distinct_values = {name: grouped[name].nunique() for name in distinct}
    labels = grouped[label_field].first() if label_field else None
    
    buckets = []
    for key, row in sums.iterrows():
        label = None
        if labels is not None:
            label = labels.loc[key] or MISSING_DESCRIPTION
        
        buckets.append(
            AggregateBucket(
                key=key,
                value=float(row[MEASURE_COLUMNS["value"]]),
                quantity=float(row[MEASURE_COLUMNS["quantity"]]),
                profit=float(row[MEASURE_COLUMNS["profit"]]),
                count=int(sizes.loc[key]),
                distinct_counts={
                    name: int(counts.loc[key]) for name, counts in distinct_values.items()
                },
                label=label
            )
        )
    
    return buckets


def group_products(frame: pd.DataFrame) -> List[AggregateBucket]:
    """
    Group records by product code, labelled with the product description.
    
    Records without a product code are excluded.
    """
    return group_records(
        frame,
        "product_code",
        require_non_empty=True,
        label_field="product_description"
    )


def measure_total(frame: pd.DataFrame, measure: str = "value") -> float:
    """Sum a measure over every record of the frame."""
    column = validate_measure(measure)
    return float(frame[column].sum()) if not frame.empty else 0.0


def distinct_count(frame: pd.DataFrame, column: str, skip_empty: bool = False) -> int:
    """Count distinct values of a column, optionally ignoring empty strings."""
    values = frame[column]
    if skip_empty:
        values = values[values != ""]
    return int(values.nunique())


def safe_percentage(part: float, total: float) -> float:
    """
    Express ``part`` as a percentage of ``total``.
    
    Returns 0 when the total is 0 so that no NaN or infinity reaches the views.
    """
    if not total:
        return 0.0
    return part / total * 100


def bucket_total(buckets: Iterable[AggregateBucket], measure: str = "value") -> float:
    return float(sum(bucket.measure(measure) for bucket in buckets))


def with_percentages(
    buckets: Sequence[AggregateBucket],
    measure: str = "value",
    total: Optional[float] = None
) -> List[AggregateBucket]:
    """
    Set each bucket's percentage of the total.
    
    Args:
        buckets (Sequence[AggregateBucket]): Buckets to annotate
        measure (str): Measure to compare (value, quantity, profit)
        total (Optional[float]): Denominator; defaults to the sum over ``buckets``
    
    Returns:
        List[AggregateBucket]: New buckets, same order
    """
    validate_measure(measure)
    if total is None:
        total = bucket_total(buckets, measure)
    
    return [
        replace(bucket, percentage=safe_percentage(bucket.measure(measure), total))
        for bucket in buckets
    ]


def with_cumulative_percentages(buckets: Sequence[AggregateBucket]) -> List[AggregateBucket]:
    """
    Set the running sum of percentages, in the order given.
    
    Callers pass buckets sorted by descending measure so that the running sum
    ends at 100 over a complete bucket set.
    """
    running = np.cumsum([bucket.percentage for bucket in buckets])
    return [
        replace(bucket, cumulative_percentage=float(cumulative))
        for bucket, cumulative in zip(buckets, running)
    ]


def rank_buckets(buckets: Iterable[AggregateBucket], measure: str = "value") -> List[AggregateBucket]:
    """
    Sort buckets by descending measure.
    
    The sort is stable: buckets with equal measures keep their input order.
    """
    validate_measure(measure)
    return sorted(buckets, key=lambda bucket: bucket.measure(measure), reverse=True)


def top_n(buckets: Iterable[AggregateBucket], n: int, measure: str = "value") -> List[AggregateBucket]:
    """Return the ``n`` buckets with the largest measure."""
    return rank_buckets(buckets, measure)[:max(0, n)]
