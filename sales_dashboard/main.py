"""
Main entry point for the sales dashboard application.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence
import pandas as pd

from sales_dashboard.config.app_config import ANALYSIS_VIEWS, DEFAULT_DATA_SOURCE
from sales_dashboard.data.models.aggregates import ComparisonResult
from sales_dashboard.data.models.sales import FilterState, SalesRecord
from sales_dashboard.data.repositories.base_repository import BaseRepository, RepositoryError
from sales_dashboard.data.repositories.memory_repository import InMemorySalesRepository
from sales_dashboard.analysis.aggregation import records_to_frame
from sales_dashboard.analysis.analyzer_factory import AnalyzerFactory
from sales_dashboard.analysis.filtering import apply_filters
from sales_dashboard.analysis.exporters.csv_exporter import CSVExporter
from sales_dashboard.utils.date_helpers import get_timestamp_str
from sales_dashboard.utils.logging_config import setup_logging


def create_repository(source: str = DEFAULT_DATA_SOURCE) -> BaseRepository[SalesRecord]:
    """
    Create the repository for a data source.
    
    Args:
        source (str): "snowflake", or the path of a CSV export
    
    Returns:
        BaseRepository[SalesRecord]: The repository
    """
    if source == "snowflake":
        # Imported here so CSV sources work without Snowflake credentials
        from sales_dashboard.data.connectors.snowflake_connector import SnowflakeConnector
        from sales_dashboard.data.repositories.sales_repository import SalesRepository
        
        return SalesRepository(SnowflakeConnector())
    
    return InMemorySalesRepository.from_csv(source)


class SalesDashboardApp:
    """
    Main application class for the sales dashboard.
    
    Holds the loaded records and the active filters. Every view is
    recomputed from scratch from the filtered frame when asked for.
    """
    
    def __init__(
        self,
        repository: BaseRepository[SalesRecord],
        analyzer_factory: Optional[AnalyzerFactory] = None,
        log_level=logging.INFO
    ):
        """
        Initialize the application.
        
        Args:
            repository (BaseRepository[SalesRecord]): Source of sales records
            analyzer_factory (Optional[AnalyzerFactory]): Factory for view analyzers
            log_level: Logging level
        """
        self.logger = setup_logging(log_level=log_level)
        
        self.repository = repository
        self.analyzer_factory = analyzer_factory or AnalyzerFactory()
        
        self.records_frame = records_to_frame([])
        self.filter_state = FilterState()
        self.notifications: List[str] = []
    
    def load_records(self) -> bool:
        """
        Load every record from the repository, replacing the current data.
        
        On failure the previously loaded data is kept and a notification is
        recorded for the user.
        
        Returns:
            bool: True if the records were loaded
        """
        try:
            records = self.repository.fetch_all()
        except RepositoryError as e:
            self.logger.error(f"Error loading sales records: {str(e)}")
            self.notifications.append(f"Could not load sales data: {str(e)}")
            return False
        
        self.records_frame = records_to_frame(records)
        self.logger.info(f"Loaded {len(self.records_frame)} sales records.")
        return True
    
    def clear_records(self) -> bool:
        """
        Delete every stored record and reload.
        
        Returns:
            bool: True if the store was cleared
        """
        if not self.repository.delete_all():
            self.notifications.append("Could not delete the stored sales data.")
            return False
        
        self.load_records()
        return True
    
    def set_filters(self, filter_state: FilterState) -> None:
        self.filter_state = filter_state or FilterState()
    
    @property
    def filtered_frame(self) -> pd.DataFrame:
        """Records passing the active filters."""
        return apply_filters(self.records_frame, self.filter_state)
    
    def run_analysis(self, views: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """
        Run the dashboard views over the filtered records.
        
        Args:
            views (Optional[Sequence[str]]): Views to run (default: all dashboard views)
        
        Returns:
            Dict[str, Any]: Report per view
        """
        frame = self.filtered_frame
        self.logger.info(f"Running analysis over {len(frame)} of {len(self.records_frame)} records.")
        
        results = {}
        for view in views or ANALYSIS_VIEWS:
            analyzer = self.analyzer_factory.get_analyzer(view)
            if analyzer:
                results[view] = analyzer.analyze(frame)
            else:
                self.logger.warning(f"No analyzer found for view: {view}")
        
        return results
    
    def compare(self, dimension: str, values: Sequence[str]) -> ComparisonResult:
        """
        Compare 2 or 3 values of a dimension within the filtered records.
        
        Args:
            dimension (str): Dimension to compare along
            values (Sequence[str]): Values to compare
        
        Returns:
            ComparisonResult: The comparison; invalid selections carry a message
        """
        analyzer = self.analyzer_factory.get_analyzer("comparison")
        result = analyzer.analyze(self.filtered_frame, dimension=dimension, values=values)
        if not result.valid:
            self.notifications.append(result.message)
        return result
    
    def export(self, reports: Dict[str, Any], output_dir: Optional[str] = None) -> str:
        """
        Write reports to CSV files.
        
        Args:
            reports (Dict[str, Any]): Reports by view name
            output_dir (Optional[str]): Output directory (default: timestamped)
        
        Returns:
            str: Path to the output directory
        """
        output_dir = output_dir or f"sales_dashboard_{get_timestamp_str()}"
        return CSVExporter().export(reports, output_dir)


def run_report(
    source: str = DEFAULT_DATA_SOURCE,
    filter_state: Optional[FilterState] = None,
    comparison_dimension: Optional[str] = None,
    comparison_values: Optional[Sequence[str]] = None,
    output_dir: Optional[str] = None,
    log_level: int = logging.INFO
) -> Dict[str, Any]:
    """
    Load records, run every dashboard view and export the results.
    
    Args:
        source (str): "snowflake" or the path of a CSV export
        filter_state (Optional[FilterState]): Filters to apply
        comparison_dimension (Optional[str]): Dimension to compare along
        comparison_values (Optional[Sequence[str]]): Values to compare
        output_dir (Optional[str]): Output directory for results
        log_level (int): Logging level
    
    Returns:
        Dict[str, Any]: Reports by view name, plus "output_dir" and "notifications"
    """
    app = SalesDashboardApp(create_repository(source), log_level=log_level)
    app.load_records()
    app.set_filters(filter_state)
    
    reports = app.run_analysis()
    if comparison_dimension:
        reports["comparison"] = app.compare(comparison_dimension, comparison_values or [])
    
    path = app.export(reports, output_dir)
    
    return dict(reports, output_dir=path, notifications=list(app.notifications))


if __name__ == "__main__":
    results = run_report()
    print(f"Report complete. Results saved in {results['output_dir']}")
