import os
from typing import List, Sequence

import pandas as pd
import pytest

from sales_dashboard.cli.dashboard_cli import main
from sales_dashboard.data.models.sales import FilterState, SalesRecord
from sales_dashboard.data.repositories.base_repository import BaseRepository, RepositoryError
from sales_dashboard.data.repositories.memory_repository import InMemorySalesRepository
from sales_dashboard.main import SalesDashboardApp

from conftest import make_record

CSV_TEXT = (
    "id,month,year,session,group,subgroup,store,product_code,product_description,"
    "quantity_sold,value_sold,profit_value,total,date\n"
    "1,Janeiro,2024,Eletro,Premium,A,Centro,P1,Geladeira Frost,2,600,120,,2024-01-10\n"
    "2,Janeiro,2024,Moda,Standard,B,Norte,P2,Camisa Azul,10,300,90,,2024-01-15\n"
    "3,Fevereiro,2024,Eletro,Premium,A,Norte,P1,Geladeira Frost,1,300,60,,2024-02-03\n"
    "4,Fevereiro,2024,Casa,Basico,C,Centro,P3,Mesa,4,200,20,,2024-02-20\n"
)


class FlakyRepository(BaseRepository[SalesRecord]):
    """Serves records on the first read and fails afterwards."""

    def __init__(self, records: List[SalesRecord]):
        self.records = records
        self.reads = 0

    def fetch_all(self) -> List[SalesRecord]:
        self.reads += 1
        if self.reads > 1:
            raise RepositoryError("connection lost")
        return list(self.records)

    def delete_all(self) -> bool:
        return False

    def insert_records(self, records: Sequence[SalesRecord]) -> int:
        return 0

    def get_raw_data(self) -> pd.DataFrame:
        return pd.DataFrame()


@pytest.fixture
def csv_source(tmp_path) -> str:
    path = tmp_path / "sales.csv"
    path.write_text(CSV_TEXT)
    return str(path)


def test_failed_load_keeps_previous_data(sample_records) -> None:
    app = SalesDashboardApp(FlakyRepository(sample_records))

    assert app.load_records()
    assert not app.load_records()
    assert len(app.records_frame) == 5
    assert app.notifications == ["Could not load sales data: connection lost"]


def test_failed_first_load_leaves_empty_dashboard() -> None:
    repository = FlakyRepository([])
    repository.reads = 1
    app = SalesDashboardApp(repository)

    assert not app.load_records()
    summary = app.run_analysis(["metrics"])["metrics"]
    assert summary.total_value == 0
    assert summary.record_count == 0


def test_failed_clear_is_reported(sample_records) -> None:
    app = SalesDashboardApp(FlakyRepository(sample_records))

    assert not app.clear_records()
    assert app.notifications == ["Could not delete the stored sales data."]


def test_clear_records_empties_the_dashboard(sample_records) -> None:
    app = SalesDashboardApp(InMemorySalesRepository(sample_records))
    app.load_records()

    assert app.clear_records()
    assert app.records_frame.empty


def test_filters_apply_to_every_view(sample_records) -> None:
    app = SalesDashboardApp(InMemorySalesRepository(sample_records))
    app.load_records()
    app.set_filters(FilterState(session="Eletro"))

    reports = app.run_analysis()

    assert reports["metrics"].total_value == 900
    assert [store.key for store in reports["top_performers"].stores] == ["Centro", "Norte"]
    assert [product.key for product in reports["abc"].products] == ["P1"]


def test_invalid_comparison_adds_notification(sample_records) -> None:
    app = SalesDashboardApp(InMemorySalesRepository(sample_records))
    app.load_records()

    result = app.compare("month", ["Janeiro", "Janeiro"])

    assert not result.valid
    assert app.notifications == [result.message]


def test_export_writes_a_file_per_table(sample_records, tmp_path) -> None:
    app = SalesDashboardApp(InMemorySalesRepository(sample_records))
    app.load_records()
    reports = app.run_analysis()
    reports["comparison"] = app.compare("month", ["Janeiro", "Fevereiro"])

    output_dir = app.export(reports, str(tmp_path / "out"))

    files = set(os.listdir(output_dir))
    for name in ["summary", "top_stores", "store_performance", "monthly_trend",
                 "breakdown_store_value", "abc_products", "abc_summary",
                 "comparison_metrics", "comparison_changes", "comparison_chart"]:
        assert f"{name}.csv" in files

    abc_products = pd.read_csv(os.path.join(output_dir, "abc_products.csv"))
    assert abc_products["category"].tolist() == ["A", "B", "C"]

    summary = pd.read_csv(os.path.join(output_dir, "summary.csv"))
    assert summary.loc[0, "total_value"] == 1500
    assert summary.loc[0, "top_product"] == "P1"


def test_cli_report(csv_source, tmp_path, capsys) -> None:
    output_dir = tmp_path / "report"

    exit_code = main([
        "--source", csv_source,
        "--output-dir", str(output_dir),
        "--compare-by", "month",
        "--compare", "Janeiro, Fevereiro",
    ])

    assert exit_code == 0
    assert (output_dir / "summary.csv").exists()
    assert (output_dir / "abc_products.csv").exists()
    assert (output_dir / "comparison_metrics.csv").exists()
    assert "Results saved in" in capsys.readouterr().out


def test_cli_filters(csv_source, tmp_path) -> None:
    output_dir = tmp_path / "report"

    assert main(["--source", csv_source, "--output-dir", str(output_dir), "--store", "Norte"]) == 0

    summary = pd.read_csv(output_dir / "summary.csv")
    assert summary.loc[0, "record_count"] == 2


def test_cli_reports_invalid_comparison(csv_source, tmp_path, capsys) -> None:
    exit_code = main([
        "--source", csv_source,
        "--output-dir", str(tmp_path / "report"),
        "--compare-by", "store",
        "--compare", "Centro",
    ])

    assert exit_code == 0
    assert "Note: Select 2 or 3 values to compare." in capsys.readouterr().out


def test_cli_compare_requires_dimension(csv_source) -> None:
    assert main(["--source", csv_source, "--compare", "Janeiro,Fevereiro"]) == 1


def test_cli_missing_source(tmp_path) -> None:
    assert main(["--source", str(tmp_path / "missing.csv"), "--output-dir", str(tmp_path / "out")]) == 1
