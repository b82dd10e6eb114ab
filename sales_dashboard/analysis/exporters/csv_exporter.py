"""
CSV exporter for dashboard reports.
"""
from typing import Any, Dict
import os
import pandas as pd

from sales_dashboard.analysis.exporters.base_exporter import BaseExporter
from sales_dashboard.data.models.aggregates import (
    ABCReport,
    ChartReport,
    ComparisonResult,
    DashboardSummary,
    PerformanceReport,
    TopPerformersReport
)
from sales_dashboard.utils.logging_config import get_logger

logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Exporter for dashboard reports to CSV files.
    """
    
    def export(self, reports: Dict[str, Any], output_dir: str) -> str:
        """
        Export reports to CSV files, one or more per view.
        
        Args:
            reports (Dict[str, Any]): Reports by view name
            output_dir (str): Output directory
        
        Returns:
            str: Path to the output directory
        """
        os.makedirs(output_dir, exist_ok=True)
        
        tables: Dict[str, pd.DataFrame] = {}
        for view, report in reports.items():
            tables.update(self._tables_for(view, report))
        
        for name, df in tables.items():
            if df.empty:
                logger.debug(f"Skipping empty table {name}")
                continue
            output_path = os.path.join(output_dir, f"{name}.csv")
            df.to_csv(output_path, index=False)
            logger.info(f"Exported {name} to {output_path}")
        
        return output_dir
    
    def _tables_for(self, view: str, report: Any) -> Dict[str, pd.DataFrame]:
        if isinstance(report, DashboardSummary):
            return {"summary": self.prepare_records([report])}
        
        if isinstance(report, TopPerformersReport):
            return {
                "top_stores": self.prepare_dataframe(report.stores, ["store"]),
                "top_sessions": self.prepare_dataframe(report.sessions, ["session"]),
                "top_products": self.prepare_dataframe(report.products, ["product_code"])
            }
        
        if isinstance(report, PerformanceReport):
            return {
                "store_performance": self.prepare_dataframe(report.store_performance, ["store"]),
                "session_performance": self.prepare_dataframe(report.session_performance, ["session"]),
                "monthly_trend": self.prepare_dataframe(report.monthly_trend, ["period"]),
                "group_diversity": self.prepare_dataframe(report.group_diversity, ["group"])
            }
        
        if isinstance(report, ChartReport):
            tables = {
                "monthly_sales": self.prepare_dataframe(report.monthly_sales, ["month"]),
                "session_sales": self.prepare_dataframe(report.session_sales, ["session"])
            }
            for (dimension, measure), slices in report.breakdowns.items():
                tables[f"breakdown_{dimension}_{measure}"] = self.prepare_dataframe(slices, [dimension])
            return tables
        
        if isinstance(report, ABCReport):
            return {
                "abc_products": self.prepare_dataframe(report.products, ["product_code"]),
                "abc_summary": self.prepare_records(list(report.summary.values()))
            }
        
        if isinstance(report, ComparisonResult):
            return self._comparison_tables(report)
        
        logger.warning(f"No CSV layout for view {view}")
        return {}
    
    def _comparison_tables(self, result: ComparisonResult) -> Dict[str, pd.DataFrame]:
        """
        Tabulate a comparison: metrics per value, changes per pair and chart rows.
        """
        if not result.valid:
            return {}
        
        metrics_df = self.prepare_records(result.metrics)
        metrics_df.insert(0, "dimension", result.dimension)
        
        change_rows = []
        for (previous, current), changes in result.changes.items():
            row = {"from": previous, "to": current}
            row.update({name: round(change, 2) for name, change in changes.items()})
            change_rows.append(row)
        
        return {
            "comparison_metrics": metrics_df,
            "comparison_changes": pd.DataFrame(change_rows),
            "comparison_chart": result.chart_data
        }
