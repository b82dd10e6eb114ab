"""
Command-line interface for the sales dashboard reports.
"""
import argparse
import logging
import sys
from typing import List, Optional
from sales_dashboard.main import run_report
from sales_dashboard.data.models.sales import FilterState
from sales_dashboard.config.app_config import DEFAULT_DATA_SOURCE, DIMENSION_COLUMNS


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Sales Dashboard - Aggregate sales records into dashboard reports"
    )
    
    parser.add_argument(
        "--source",
        type=str,
        default=DEFAULT_DATA_SOURCE,
        help=f"'snowflake' or the path of a CSV export (default: {DEFAULT_DATA_SOURCE})"
    )
    
    for dimension in DIMENSION_COLUMNS:
        help_text = (
            "Product code or description text to match (case-insensitive)"
            if dimension == "product"
            else f"Only include records with this {dimension}"
        )
        parser.add_argument(f"--{dimension}", type=str, help=help_text)
    
    parser.add_argument(
        "--compare-by",
        type=str,
        choices=list(DIMENSION_COLUMNS),
        help="Dimension to compare along"
    )
    
    parser.add_argument(
        "--compare",
        type=str,
        help="Comma-separated list of 2 or 3 values to compare"
    )
    
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Output directory for results (default: auto-generated based on timestamp)"
    )
    
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    
    return parser.parse_args(args)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    
    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)
    
    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)
    
    log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
    
    filter_state = FilterState.from_selections(
        {dimension: getattr(parsed_args, dimension) for dimension in DIMENSION_COLUMNS}
    )
    
    comparison_values = None
    if parsed_args.compare:
        comparison_values = [value.strip() for value in parsed_args.compare.split(',')]
    
    if comparison_values and not parsed_args.compare_by:
        print("Error: --compare requires --compare-by.")
        return 1
    
    try:
        results = run_report(
            source=parsed_args.source,
            filter_state=filter_state,
            comparison_dimension=parsed_args.compare_by,
            comparison_values=comparison_values,
            output_dir=parsed_args.output_dir,
            log_level=log_level
        )
        
        for notification in results["notifications"]:
            print(f"Note: {notification}")
        
        print(f"\nSales dashboard report complete. Results saved in {results['output_dir']}")
        return 0
    
    except Exception as e:
        print(f"\nError during report: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
