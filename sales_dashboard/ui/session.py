"""
Per-browser-session application state for the Streamlit UI.
"""
from typing import Any, MutableMapping

from sales_dashboard.data.models.sales import SalesRecord
from sales_dashboard.data.repositories.base_repository import BaseRepository
from sales_dashboard.main import SalesDashboardApp

SESSION_APP_KEY = "app"


def get_session_app(
    session_state: MutableMapping[str, Any],
    repository: BaseRepository[SalesRecord]
) -> SalesDashboardApp:
    """
    Get this session's application, creating and loading it on first use.
    
    The repository may be shared by every session; the application holds
    the session's filters, loaded records and notifications and is never shared.
    
    Args:
        session_state (MutableMapping[str, Any]): ``st.session_state`` or any mapping
        repository (BaseRepository[SalesRecord]): Source of sales records
    
    Returns:
        SalesDashboardApp: The session's application
    """
    app = session_state.get(SESSION_APP_KEY)
    if app is None:
        app = SalesDashboardApp(repository)
        app.load_records()
        session_state[SESSION_APP_KEY] = app
    return app
