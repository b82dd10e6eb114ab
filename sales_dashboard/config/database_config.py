"""
Database configuration settings for the sales dashboard.
"""
import os
from typing import Dict, Any
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def get_snowflake_config() -> Dict[str, Any]:
    """
    Get Snowflake configuration from environment variables or defaults.
    
    Returns:
        Dict[str, Any]: Snowflake configuration dictionary
    """
    default_config = {
        "account": "",
        "user": "",
        "authenticator": "externalbrowser",  # SSO flow
        "warehouse": "",
        "database": "ANALYTICS",
        "schema": "DASHBOARD"
    }
    
    config = {}
    for key in default_config:
        env_key = f"SNOWFLAKE_{key.upper()}"
        config[key] = os.environ.get(env_key, default_config[key])
    
    password = os.environ.get("SNOWFLAKE_PASSWORD")
    if password:
        config["password"] = password
        config.pop("authenticator")
    
    logger.debug(f"Using Snowflake config with account: {config['account']}, user: {config['user']}")
    
    return config


SALES_TABLE = os.environ.get("SALES_DASHBOARD_TABLE", "SALES_RECORDS")

# Storage column layout (upper case, as Snowflake reports it)
SALES_TABLE_COLUMNS = [
    "ID",
    "MONTH",
    "YEAR",
    "SESSION",
    "GROUP_NAME",
    "SUBGROUP",
    "STORE",
    "PRODUCT_CODE",
    "PRODUCT_DESCRIPTION",
    "QUANTITY_SOLD",
    "VALUE_SOLD",
    "PROFIT_VALUE",
    "TOTAL",
    "DATE"
]


SELECT_SALES_QUERY_TEMPLATE = """
SELECT
    {columns}
FROM
    {table}
ORDER BY
    DATE
"""

DELETE_SALES_QUERY_TEMPLATE = """
DELETE FROM {table}
"""


def build_select_query(table: str = SALES_TABLE) -> str:
    """Render the query that loads every sales record."""
    return SELECT_SALES_QUERY_TEMPLATE.format(
        columns=",\n    ".join(SALES_TABLE_COLUMNS),
        table=table
    )


def build_delete_query(table: str = SALES_TABLE) -> str:
    """Render the statement that removes every sales record."""
    return DELETE_SALES_QUERY_TEMPLATE.format(table=table)
