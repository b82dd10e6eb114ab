#!/usr/bin/env python3
"""
CLI entry point for the Sales Dashboard.
"""
import sys
from sales_dashboard.cli.dashboard_cli import main

if __name__ == "__main__":
    sys.exit(main())
