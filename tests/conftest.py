import os
import tempfile

# Keep log files out of the working tree
os.environ.setdefault("SALES_DASHBOARD_LOG_DIR", tempfile.mkdtemp(prefix="sales_dashboard_logs_"))

import pytest

from sales_dashboard.analysis.aggregation import records_to_frame
from sales_dashboard.data.models.sales import SalesRecord


def make_record(record_id: str, **values) -> SalesRecord:
    return SalesRecord(id=record_id, **values)


@pytest.fixture
def sample_records() -> list:
    return [
        make_record(
            "1", month="Janeiro", year="2024", session="Eletro", group="Premium",
            subgroup="A", store="Centro", product_code="P1",
            product_description="Geladeira Frost", quantity_sold=2, value_sold=600,
            profit_value=120, date="2024-01-10"
        ),
        make_record(
            "2", month="Janeiro", year="2024", session="Moda", group="Standard",
            subgroup="B", store="Norte", product_code="P2",
            product_description="Camisa Azul", quantity_sold=10, value_sold=300,
            profit_value=90, date="2024-01-15"
        ),
        make_record(
            "3", month="Fevereiro", year="2024", session="Eletro", group="Premium",
            subgroup="A", store="Norte", product_code="P1",
            product_description="Geladeira Frost", quantity_sold=1, value_sold=300,
            profit_value=60, date="2024-02-03"
        ),
        make_record(
            "4", month="Fevereiro", year="2024", session="Casa", group="Basico",
            subgroup="C", store="Centro", product_code="P3",
            product_description="Mesa", quantity_sold=4, value_sold=200,
            profit_value=20, date="2024-02-20"
        ),
        # Legacy row: no product, value only in total
        make_record(
            "5", month="Fevereiro", year="2024", session="Moda", group="Standard",
            subgroup="B", store="Sul", total=100, date="2024-02-25"
        ),
    ]


@pytest.fixture
def sample_frame(sample_records):
    return records_to_frame(sample_records)


@pytest.fixture
def store_frame():
    return records_to_frame([
        make_record("a", store="A", product_code="A", value_sold=600),
        make_record("b", store="B", product_code="B", value_sold=300),
        make_record("c", store="C", product_code="C", value_sold=100),
    ])
