"""
In-memory sales repository, optionally seeded from a CSV export.
"""
from typing import Iterable, List, Optional, Sequence
import pandas as pd
from sales_dashboard.data.repositories.base_repository import BaseRepository, RepositoryError
from sales_dashboard.data.models.sales import SalesRecord
from sales_dashboard.analysis.aggregation import records_to_frame
from sales_dashboard.config.app_config import CATEGORICAL_COLUMNS
from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


class InMemorySalesRepository(BaseRepository[SalesRecord]):
    """
    Repository keeping sales records in a Python list.
    """
    
    def __init__(self, records: Optional[Iterable[SalesRecord]] = None):
        self._records: List[SalesRecord] = list(records or [])
    
    @classmethod
    def from_csv(cls, path: str) -> "InMemorySalesRepository":
        """
        Load records from a CSV export.
        
        Column names may be upper or lower case; categorical columns are read
        as text so codes such as "007" keep their leading zeros.
        
        Args:
            path (str): Path to the CSV file
        
        Returns:
            InMemorySalesRepository: Repository holding the file's records
        
        Raises:
            RepositoryError: If the file cannot be read
        """
        text_columns = CATEGORICAL_COLUMNS + ["group_name"]
        dtypes = {name: str for column in text_columns for name in (column, column.upper())}
        try:
            df = pd.read_csv(path, dtype=dtypes)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            logger.error(f"Error reading sales CSV {path}: {str(e)}")
            raise RepositoryError(f"Could not read {path}: {str(e)}") from e
        
        try:
            records = [SalesRecord.from_row(row) for _, row in df.iterrows()]
        except (ValueError, TypeError) as e:
            logger.error(f"Invalid sales row in {path}: {str(e)}")
            raise RepositoryError(f"Invalid sales data in {path}: {str(e)}") from e

        logger.info(f"Loaded {len(records)} sales records from {path}.")
        return cls(records)
    
    def fetch_all(self) -> List[SalesRecord]:
        return list(self._records)
    
    def get_raw_data(self) -> pd.DataFrame:
        return records_to_frame(self._records)
    
    def delete_all(self) -> bool:
        self._records = []
        return True
    
    def insert_records(self, records: Sequence[SalesRecord]) -> int:
        self._records.extend(records)
        return len(records)
