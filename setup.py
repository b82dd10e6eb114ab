#!/usr/bin/env python3
"""
Setup script for the Sales Dashboard.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="sales-dashboard",
    version="1.0.0",
    author="Sales Analytics Team",
    description="Aggregation engine and dashboard for tabular sales records",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
        "snowflake-snowpark-python",
        "streamlit",
        "plotly",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "sales-dashboard-cli=sales_dashboard.cli.dashboard_cli:main",
        ],
    },
)
