"""
Sales repository for accessing sales data stored in Snowflake.
"""
from typing import List, Sequence
import pandas as pd
from sales_dashboard.data.repositories.base_repository import BaseRepository, RepositoryError
from sales_dashboard.data.models.sales import SalesRecord
from sales_dashboard.data.connectors.base_connector import BaseConnector
from sales_dashboard.analysis.aggregation import records_to_frame
from sales_dashboard.config.database_config import (
    SALES_TABLE,
    SALES_TABLE_COLUMNS,
    build_delete_query,
    build_select_query
)
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class SalesRepository(BaseRepository[SalesRecord]):
    """
    Repository for sales records in a database table.
    """
    
    def __init__(self, connector: BaseConnector, table: str = SALES_TABLE):
        """
        Initialize the sales repository.
        
        Args:
            connector (BaseConnector): The database connector to use
            table (str): Name of the sales table
        """
        self.connector = connector
        self.table = table
    
    def fetch_all(self) -> List[SalesRecord]:
        """
        Get all sales records.
        
        Returns:
            List[SalesRecord]: A list of SalesRecord objects
        
        Raises:
            RepositoryError: If the query fails (connectivity, authentication, missing table)
        """
        logger.info(f"Fetching sales records from {self.table}...")
        try:
            df = self.connector.execute_query(build_select_query(self.table))
        except Exception as e:
            logger.error(f"Error fetching sales records: {str(e)}")
            raise RepositoryError(f"Could not load sales records: {str(e)}") from e

        try:
            records = [SalesRecord.from_row(row) for _, row in df.iterrows()]
        except (ValueError, TypeError) as e:
            logger.error(f"Invalid sales row in {self.table}: {str(e)}")
            raise RepositoryError(f"Invalid sales data in {self.table}: {str(e)}") from e

        logger.info(f"Retrieved {len(records)} sales records.")
        return records
    
    def get_raw_data(self) -> pd.DataFrame:
        """
        Get all sales records as a normalized DataFrame.
        
        Returns:
            pd.DataFrame: The sales data
        """
        return records_to_frame(self.fetch_all())
    
    def delete_all(self) -> bool:
        """
        Delete every sales record.
        
        Returns:
            bool: True if the table was cleared
        """
        try:
            self.connector.execute_statement(build_delete_query(self.table))
        except Exception as e:
            logger.error(f"Error deleting sales records: {str(e)}")
            return False
        
        logger.info(f"Deleted all sales records from {self.table}.")
        return True
    
    def insert_records(self, records: Sequence[SalesRecord]) -> int:
        """
        Insert sales records.
        
        Args:
            records (Sequence[SalesRecord]): Records to insert
        
        Returns:
            int: Number of records inserted
        """
        if not records:
            return 0
        
        df = pd.DataFrame([record.to_dict() for record in records])
        df = df.rename(columns={"group": "group_name"})
        df.columns = [column.upper() for column in df.columns]
        
        return self.connector.write_dataframe(df[SALES_TABLE_COLUMNS], self.table)
