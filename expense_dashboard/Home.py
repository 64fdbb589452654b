"""Main entry point for the Streamlit multi-page app.

The home page shows a month picker.  Pages in the pages/ directory appear
automatically in the sidebar.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from expense_dashboard.selection import MONTHS
from expense_dashboard.session import (
    DASHBOARD_PAGE,
    TRANSACTIONS_PAGE,
    get_selection,
    open_page,
    render_shared_sidebar,
)
from expense_dashboard.ui import ExpenseUI

MONTH_GRID_COLUMNS = 4


def main() -> None:
    """Render the month picker."""
    ExpenseUI().setup_page_config(page_title="ExpenseInsight", page_icon="💰")
    render_shared_sidebar()
    selection = get_selection()

    st.title("Financial Overview")
    st.markdown("Select a month to view detailed insights or browse all your records.")

    for row_start in range(0, len(MONTHS), MONTH_GRID_COLUMNS):
        columns = st.columns(MONTH_GRID_COLUMNS)
        for offset, column in enumerate(columns):
            index = row_start + offset
            if column.button(f"📅 {MONTHS[index]}", key=f"month_{index}", use_container_width=True):
                selection.select_month(index)
                open_page(DASHBOARD_PAGE)

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("🕘 View All Transactions", use_container_width=True):
            selection.select_all_time()
            open_page(TRANSACTIONS_PAGE)
    with col2:
        if st.button("📊 Quick Dashboard (Current Month)", type="primary", use_container_width=True):
            selection.select_current_month()
            open_page(DASHBOARD_PAGE)


if __name__ == "__main__":
    main()
