"""
Snowflake database connector implementation.
"""
import pandas as pd
from typing import Dict, Any, Optional
from snowflake.snowpark import Session
from sales_dashboard.data.connectors.base_connector import BaseConnector
from sales_dashboard.config.database_config import get_snowflake_config
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class SnowflakeConnector(BaseConnector):
    """
    Connector for Snowflake database.
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Snowflake connector.
        
        Args:
            config (Optional[Dict[str, Any]]): Snowflake connection configuration.
                                              If None, read from SNOWFLAKE_* environment variables
        """
        self.config = config if config is not None else get_snowflake_config()
        self.session = None
    
    def connect(self) -> Session:
        """
        Establish a connection to Snowflake.
        
        Returns:
            Session: The Snowflake session object
        """
        if self.session is None:
            try:
                self.session = Session.builder.configs(self.config).create()
                logger.info("Snowflake connection established.")
            except Exception as e:
                logger.error(f"Error connecting to Snowflake: {str(e)}")
                raise
        
        return self.session
    
    def disconnect(self) -> None:
        """
        Close the Snowflake connection.
        """
        try:
            if self.session is not None:
                self.session.close()
                logger.info("Snowflake connection closed.")
                self.session = None
        except Exception as e:
            logger.error(f"Error closing Snowflake connection: {str(e)}")
            raise
    
    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a SQL query on Snowflake and return the results as a DataFrame.
        
        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Positional bind values, in placeholder order
            
        Returns:
            pd.DataFrame: The query results as a pandas DataFrame
        """
        session = self.connect()
        
        try:
            logger.debug(f"Executing query: {query.strip()[:200]}...")
            if params:
                snow_df = session.sql(query, params=list(params.values()))
            else:
                snow_df = session.sql(query)
            return snow_df.to_pandas()
        except Exception as e:
            logger.error(f"Error executing query: {str(e)}")
            raise
    
    def execute_statement(self, statement: str) -> None:
        """
        Execute a SQL statement on Snowflake.
        
        Args:
            statement (str): The SQL statement to execute
        """
        session = self.connect()
        
        try:
            logger.debug(f"Executing statement: {statement.strip()[:200]}")
            session.sql(statement).collect()
        except Exception as e:
            logger.error(f"Error executing statement: {str(e)}")
            raise
    
    def write_dataframe(self, df: pd.DataFrame, table: str) -> int:
        """
        Append a DataFrame to a Snowflake table.
        
        Args:
            df (pd.DataFrame): Rows to write
            table (str): Target table name
        
        Returns:
            int: Number of rows written
        """
        session = self.connect()
        
        try:
            session.write_pandas(df, table, auto_create_table=False, overwrite=False)
            logger.info(f"Wrote {len(df)} rows to {table}.")
            return len(df)
        except Exception as e:
            logger.error(f"Error writing to {table}: {str(e)}")
            raise
