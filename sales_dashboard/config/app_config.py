"""
Application-wide configuration settings for the sales dashboard.
"""
import os
from typing import Dict, List

# Data source: "snowflake" or a path to a CSV export
DEFAULT_DATA_SOURCE = os.environ.get("SALES_DASHBOARD_SOURCE", "snowflake")

# Record layout
CATEGORICAL_COLUMNS: List[str] = [
    "id",
    "month",
    "year",
    "session",
    "group",
    "subgroup",
    "store",
    "product_code",
    "product_description",
    "date"
]
NUMERIC_COLUMNS: List[str] = ["quantity_sold", "value_sold", "profit_value", "total"]
SALES_COLUMNS: List[str] = CATEGORICAL_COLUMNS + NUMERIC_COLUMNS

# Derived column: value_sold, falling back to the legacy total
VALUE_COLUMN = "value"

# Measure name -> frame column
MEASURE_COLUMNS: Dict[str, str] = {
    "value": VALUE_COLUMN,
    "quantity": "quantity_sold",
    "profit": "profit_value"
}

# Dimension name -> frame column
DIMENSION_COLUMNS: Dict[str, str] = {
    "month": "month",
    "session": "session",
    "group": "group",
    "subgroup": "subgroup",
    "store": "store",
    "product": "product_code"
}

# Selections that mean "no filter"
FILTER_ALL_SENTINELS = {"", "all", "todos"}
FILTER_ALL_LABEL = "ALL"

# ABC classification thresholds (cumulative percentage)
ABC_A_THRESHOLD = float(os.environ.get("SALES_DASHBOARD_ABC_A", "80"))
ABC_B_THRESHOLD = float(os.environ.get("SALES_DASHBOARD_ABC_B", "95"))
ABC_CATEGORIES = ["A", "B", "C"]
MISSING_DESCRIPTION = "N/A"

# Ranking limits
TOP_PERFORMERS_LIMIT = 5
STORE_PERFORMANCE_LIMIT = 6
SESSION_PERFORMANCE_LIMIT = 5
PIE_CHART_LIMIT = 8
RECENT_RECORDS_LIMIT = 10
ABC_TABLE_LIMIT = 20

# Comparison
COMPARISON_SIZES = (2, 3)
COMPARISON_METRICS: List[str] = [
    "total_value",
    "total_quantity",
    "total_profit",
    "record_count",
    "unique_sessions",
    "unique_stores",
    "average_per_store"
]

# Dashboard views run by the application
ANALYSIS_VIEWS = ["metrics", "top_performers", "performance", "charts", "abc"]

# Calendar order used by the monthly charts
MONTH_ORDER: List[str] = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro"
]
MONTH_ALIASES: Dict[str, int] = {
    name: index
    for index, names in enumerate([
        ("january", "jan"), ("february", "feb", "fev"), ("march", "mar", "marco"),
        ("april", "apr", "abr"), ("may", "mai"), ("june", "jun"),
        ("july", "jul"), ("august", "aug", "ago"), ("september", "sep", "set"),
        ("october", "oct", "out"), ("november", "nov"), ("december", "dec", "dez")
    ])
    for name in names
}

# Visualization settings
DEFAULT_CHART_HEIGHT = 400
