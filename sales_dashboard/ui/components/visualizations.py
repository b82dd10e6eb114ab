"""
Visualization components for the sales dashboard.
"""
from typing import List, Optional
import pandas as pd
import plotly.graph_objects as go
import plotly.express as px
import streamlit as st

from sales_dashboard.config.app_config import ABC_CATEGORIES, DEFAULT_CHART_HEIGHT, RECENT_RECORDS_LIMIT
from sales_dashboard.data.models.aggregates import (
    ABCReport,
    AggregateBucket,
    ChartReport,
    ComparisonResult,
    DashboardSummary,
    PerformanceReport,
    TopPerformersReport
)
from sales_dashboard.analysis.exporters.base_exporter import buckets_to_frame

CATEGORY_COLORS = {"A": "#2e7d32", "B": "#f9a825", "C": "#9e9e9e"}


def format_currency(value: float) -> str:
    return f"R$ {value:,.2f}"


def create_metrics(summary: DashboardSummary) -> None:
    """
    Display the headline metrics as Streamlit metrics.
    
    Args:
        summary (DashboardSummary): Dashboard summary
    """
    col1, col2, col3, col4 = st.container().columns(4)
    
    col1.metric("Total Sales", format_currency(summary.total_value),
                help=f"Margin: {summary.profit_margin:.1f}%")
    col2.metric("Total Profit", format_currency(summary.total_profit))
    col3.metric("Units Sold", f"{summary.total_quantity:,.0f}")
    col4.metric("Products", f"{summary.unique_products:,}",
                help=f"{summary.unique_stores} stores, {summary.unique_sessions} sessions")
    
    col1, col2 = st.columns(2)
    if summary.top_product:
        col1.write(f"**Top product:** {summary.top_product.key} - {summary.top_product.label}")
        col1.progress(min(summary.top_product_share / 100, 1.0),
                      text=f"{summary.top_product_share:.1f}% of total sales")
    if summary.top_store:
        col2.write(f"**Top store:** {summary.top_store.key}")
        col2.progress(min(summary.top_store_share / 100, 1.0),
                      text=f"{summary.top_store_share:.1f}% of total sales")


def create_bucket_bar_chart(buckets: List[AggregateBucket], title: str, x_title: str) -> go.Figure:
    """
    Create a bar chart of bucket values.
    
    Args:
        buckets (List[AggregateBucket]): Buckets in display order
        title (str): Chart title
        x_title (str): Axis title for the bucket keys
    
    Returns:
        go.Figure: Plotly figure
    """
    fig = go.Figure(
        go.Bar(x=[str(bucket.key) for bucket in buckets], y=[bucket.value for bucket in buckets])
    )
    fig.update_layout(title=title, xaxis_title=x_title, yaxis_title="Sales", height=DEFAULT_CHART_HEIGHT)
    return fig


def create_charts(report: ChartReport) -> None:
    """
    Display the monthly and session charts and the share breakdowns.
    
    Args:
        report (ChartReport): Chart series
    """
    col1, col2 = st.columns(2)
    
    monthly = go.Figure(
        go.Scatter(
            x=[bucket.key for bucket in report.monthly_sales],
            y=[bucket.value for bucket in report.monthly_sales],
            mode='lines+markers'
        )
    )
    monthly.update_layout(title="Sales by Month", xaxis_title="Month", yaxis_title="Sales",
                          height=DEFAULT_CHART_HEIGHT)
    col1.plotly_chart(monthly, use_container_width=True)
    
    col2.plotly_chart(
        create_bucket_bar_chart(report.session_sales, "Sales by Session", "Session"),
        use_container_width=True
    )
    
    columns = st.columns(2)
    for index, ((dimension, measure), slices) in enumerate(report.breakdowns.items()):
        if not slices:
            continue
        fig = px.pie(
            names=[str(bucket.key) for bucket in slices],
            values=[bucket.measure(measure) for bucket in slices],
            title=f"{measure.capitalize()} by {dimension}"
        )
        columns[index % 2].plotly_chart(fig, use_container_width=True)


def create_top_performers(report: TopPerformersReport) -> None:
    """
    Display the top stores, sessions and products.
    
    Args:
        report (TopPerformersReport): Rankings
    """
    col1, col2, col3 = st.columns(3)
    for column, title, buckets in [
        (col1, "Top Stores", report.stores),
        (col2, "Top Sessions", report.sessions),
        (col3, "Top Products", report.products)
    ]:
        column.write(f"#### {title}")
        for rank, bucket in enumerate(buckets, start=1):
            name = f"{bucket.key} - {bucket.label}" if bucket.label else bucket.key
            column.write(f"{rank}. {name}: {format_currency(bucket.value)}")


def create_performance(report: PerformanceReport) -> None:
    """
    Display store and session performance, growth and group diversity.
    
    Args:
        report (PerformanceReport): Performance view
    """
    col1, col2 = st.columns(2)
    
    col1.write("#### Store Performance")
    for bucket in report.store_performance:
        col1.write(f"{bucket.key} ({bucket.distinct_count('session')} sessions): "
                   f"{format_currency(bucket.value)}")
        col1.progress(min(bucket.percentage / 100, 1.0))
    
    col2.write("#### Session Performance")
    for bucket in report.session_performance:
        col2.write(f"{bucket.key} ({bucket.distinct_count('store')} stores): "
                   f"{format_currency(bucket.value)} - {bucket.percentage:.1f}% of total")
    
    col1, col2 = st.columns(2)
    if len(report.monthly_trend) > 1:
        period = f"{report.monthly_trend[0].key} vs {report.monthly_trend[-1].key}"
    else:
        period = "Current period"
    col1.metric("Growth Trend", f"{report.growth_trend:+.1f}%", help=period)
    col2.metric("Group Diversity", report.diversity_score)
    
    st.dataframe(buckets_to_frame(report.group_diversity, ["group"]), use_container_width=True)


def create_abc_section(report: ABCReport) -> None:
    """
    Display the ABC category cards and the product table.
    
    Args:
        report (ABCReport): ABC classification
    """
    columns = st.columns(len(ABC_CATEGORIES))
    for column, category in zip(columns, ABC_CATEGORIES):
        entry = report.summary.get(category)
        if entry is None:
            continue
        column.metric(
            f"Category {category}",
            f"{entry.count} products",
            help=f"{format_currency(entry.value)} ({entry.percentage:.1f}% of sales)"
        )
    
    table = buckets_to_frame(report.top_products, ["product_code"])
    if table.empty:
        st.info("No products with a product code in the selected data.")
        return
    
    st.dataframe(
        table.style.apply(
            lambda row: [f"color: {CATEGORY_COLORS.get(row['category'], '')}"] * len(row),
            axis=1
        ),
        use_container_width=True
    )


def create_comparison_section(result: ComparisonResult) -> None:
    """
    Display comparison metrics, changes and the grouped bar chart.
    
    Args:
        result (ComparisonResult): Comparison
    """
    if not result.valid:
        st.warning(result.message)
        return
    
    metrics_df = pd.DataFrame([vars(metrics) for metrics in result.metrics]).set_index("label")
    st.dataframe(metrics_df.T, use_container_width=True)
    
    for (previous, current), changes in result.changes.items():
        st.write(f"#### {previous} → {current}")
        columns = st.columns(4)
        for column, name in zip(columns, ["total_value", "unique_sessions", "unique_stores", "average_per_store"]):
            column.metric(name.replace("_", " ").capitalize(), f"{changes[name]:+.1f}%")
    
    if not result.chart_data.empty:
        fig = go.Figure()
        for value in result.values:
            fig.add_trace(go.Bar(name=value, x=result.chart_data["session"], y=result.chart_data[value]))
        fig.update_layout(barmode="group", title="Sales by Session", xaxis_title="Session",
                          yaxis_title="Sales", legend_title=result.dimension.capitalize(),
                          height=DEFAULT_CHART_HEIGHT)
        st.plotly_chart(fig, use_container_width=True)


def create_records_table(filtered_data: pd.DataFrame, limit: Optional[int] = RECENT_RECORDS_LIMIT) -> None:
    """
    Display the most recent records.
    
    Args:
        filtered_data (pd.DataFrame): Filtered sales frame
        limit (Optional[int]): Maximum rows to show
    """
    st.write("#### Recent Records")
    if filtered_data.empty:
        st.info("No records match the selected filters.")
        return
    
    recent = filtered_data.sort_values("date", ascending=False, kind="stable").head(limit)
    st.dataframe(recent.drop(columns=["id"]), use_container_width=True, hide_index=True)
