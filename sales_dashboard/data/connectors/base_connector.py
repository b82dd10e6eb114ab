"""
Base database connector interface.
"""
from abc import ABC, abstractmethod
import pandas as pd
from typing import Dict, Any, Optional


class BaseConnector(ABC):
    """
    Abstract base class for database connections.
    """
    
    @abstractmethod
    def connect(self) -> Any:
        """
        Establish a connection to the database.
        
        Returns:
            Any: The database connection/session object
        """
        pass
    
    @abstractmethod
    def disconnect(self) -> None:
        """
        Close the database connection.
        """
        pass
    
    @abstractmethod
    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a SQL query and return the results as a DataFrame.
        
        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Parameters to bind to the query
            
        Returns:
            pd.DataFrame: The query results as a pandas DataFrame
        """
        pass
    
    @abstractmethod
    def execute_statement(self, statement: str) -> None:
        """
        Execute a SQL statement that returns no rows (DELETE, TRUNCATE).
        
        Args:
            statement (str): The SQL statement to execute
        """
        pass
    
    @abstractmethod
    def write_dataframe(self, df: pd.DataFrame, table: str) -> int:
        """
        Append the rows of a DataFrame to a table.
        
        Args:
            df (pd.DataFrame): Rows to write, columns named as in the table
            table (str): Target table name
        
        Returns:
            int: Number of rows written
        """
        pass
    
    def __enter__(self):
        """
        Context manager entry point.
        
        Returns:
            BaseConnector: The connector instance
        """
        self.connect()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Context manager exit point.
        """
        self.disconnect()
