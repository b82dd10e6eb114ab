"""
Streamlit web interface for the Sales Dashboard.
"""
import streamlit as st
import traceback
import sys
import os

# Add the parent directory to the path so we can import the package
# This is only needed when running the script directly
parent_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from sales_dashboard.main import create_repository
from sales_dashboard.config.app_config import DEFAULT_DATA_SOURCE
from sales_dashboard.data.repositories.base_repository import RepositoryError
from sales_dashboard.ui.session import get_session_app
from sales_dashboard.ui.components.filters import (
    create_all_filters,
    create_clear_data_button,
    create_comparison_controls
)
from sales_dashboard.ui.components.visualizations import (
    create_abc_section,
    create_charts,
    create_comparison_section,
    create_metrics,
    create_performance,
    create_records_table,
    create_top_performers
)


# Set page configuration
st.set_page_config(
    page_title="Sales Dashboard",
    page_icon="📊",
    layout="wide"
)

st.title("Sales Dashboard")
st.markdown("Sales totals, rankings, ABC classification and period comparisons.")


@st.cache_resource
def initialize_repository(source: str):
    """Create the repository (and its connection) once per source, shared by all sessions."""
    return create_repository(source)


app = None
with st.spinner("Loading sales data..."):
    try:
        app = get_session_app(st.session_state, initialize_repository(DEFAULT_DATA_SOURCE))
    except RepositoryError as e:
        st.error(f"Error loading initial data: {str(e)}")
        st.error(f"Detailed error: {traceback.format_exc()}")

if app is not None:
    # Show and reset notifications from the last action
    for notification in app.notifications:
        st.error(notification)
    app.notifications.clear()
    
    app.set_filters(create_all_filters(app.records_frame))
    
    if create_clear_data_button():
        if app.clear_records():
            st.success("All sales data deleted.")
        st.rerun()
    
    if app.records_frame.empty:
        st.info("No sales data loaded yet.")
    else:
        reports = app.run_analysis()
        
        overview_tab, abc_tab, comparison_tab = st.tabs(["Overview", "ABC Analysis", "Comparison"])
        
        with overview_tab:
            create_metrics(reports["metrics"])
            create_charts(reports["charts"])
            create_top_performers(reports["top_performers"])
            create_performance(reports["performance"])
            create_records_table(app.filtered_frame)
        
        with abc_tab:
            create_abc_section(reports["abc"])
        
        with comparison_tab:
            dimension, values = create_comparison_controls(app.filtered_frame)
            create_comparison_section(app.compare(dimension, values))
            app.notifications.clear()
