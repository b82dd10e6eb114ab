"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import List, Generic, Sequence, TypeVar
import pandas as pd
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class RepositoryError(Exception):
    """
    Raised when records cannot be read from the backing store.
    """


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    
    The dashboard treats the store as the owner of the records: it reads the
    whole collection and replaces it wholesale, never editing records in place.
    """
    
    @abstractmethod
    def fetch_all(self) -> List[T]:
        """
        Get every stored entity.
        
        Returns:
            List[T]: A list of entity objects
        
        Raises:
            RepositoryError: If the store cannot be read
        """
        pass
    
    @abstractmethod
    def delete_all(self) -> bool:
        """
        Remove every stored entity.
        
        Returns:
            bool: True on success, False if the store reported a failure
        """
        pass
    
    @abstractmethod
    def insert_records(self, records: Sequence[T]) -> int:
        """
        Append entities to the store.
        
        Args:
            records (Sequence[T]): Entities to insert
        
        Returns:
            int: Number of entities inserted
        """
        pass
    
    @abstractmethod
    def get_raw_data(self) -> pd.DataFrame:
        """
        Get every stored entity as a normalized DataFrame.
        
        Returns:
            pd.DataFrame: The data as a pandas DataFrame
        """
        pass
    
    def replace_all(self, records: Sequence[T]) -> int:
        """
        Replace the stored collection with ``records``.
        
        Args:
            records (Sequence[T]): The new collection
        
        Returns:
            int: Number of entities inserted
        
        Raises:
            RepositoryError: If the existing collection could not be removed
        """
        if not self.delete_all():
            raise RepositoryError("Could not clear existing records before replacing them")
        
        count = self.insert_records(records)
        logger.info(f"Replaced stored records with {count} new records.")
        return count
