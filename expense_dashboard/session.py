"""Session-owned state and the shared sidebar for the multi-page dashboard.

The expense store and the window selection live in ``st.session_state`` so
that every page of a browser session sees the same objects.  Pages call
:func:`render_shared_sidebar` first and work from the dictionary it returns.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import streamlit as st

from .config import configure_logging
from .models import ExpenseDraft, InvalidExpenseError
from .selection import MONTHS, SelectionContext
from .sorting import SortConfig, toggle_sort
from .storage import ExpenseStore

logger = logging.getLogger(__name__)

STORE_STATE_KEY = 'expense_store'
SELECTION_STATE_KEY = 'expense_selection'
SORT_STATE_PREFIX = 'expense_sort'
ALL_TIME_LABEL = 'All Time'

DASHBOARD_PAGE = 'pages/1_📊_Dashboard.py'
TRANSACTIONS_PAGE = 'pages/2_🧾_Transactions.py'
HOME_PAGE = 'Home.py'


def get_store() -> ExpenseStore:
    """Return the session's expense store, loading it on first use."""
    store = st.session_state.get(STORE_STATE_KEY)
    if store is None:
        store = ExpenseStore()
        store.load()
        st.session_state[STORE_STATE_KEY] = store
    return store


def get_selection() -> SelectionContext:
    selection = st.session_state.get(SELECTION_STATE_KEY)
    if selection is None:
        selection = SelectionContext()
        st.session_state[SELECTION_STATE_KEY] = selection
    return selection


def get_sort(table_key: str) -> Optional[SortConfig]:
    return st.session_state.get(f'{SORT_STATE_PREFIX}_{table_key}')


def click_sort_header(table_key: str, field: str) -> SortConfig:
    """Apply a header click to the table's sort state and return the new sort."""
    config = toggle_sort(get_sort(table_key), field)
    st.session_state[f'{SORT_STATE_PREFIX}_{table_key}'] = config
    return config


def submit_expense(draft: ExpenseDraft) -> Optional[str]:
    """Add a drafted expense to the session store.

    Returns:
        An error message for the form, or None on success.
    """
    try:
        get_store().add(draft)
    except InvalidExpenseError as e:
        return str(e)
    except OSError as e:
        logger.error("Could not save expense: %s", e)
        return f"Could not save expense: {e}"
    return None


def window_options() -> list:
    return [ALL_TIME_LABEL] + MONTHS


def apply_window_choice(choice: str) -> SelectionContext:
    selection = get_selection()
    if choice == ALL_TIME_LABEL:
        selection.select_all_time()
    else:
        selection.select_month(MONTHS.index(choice))
    return selection


def open_page(page: str) -> None:
    """Navigate to another page of the app."""
    st.switch_page(page)


def _pending_delete_key(table_key: str) -> str:
    return f'{table_key}_pending_delete'


def request_delete(table_key: str, record_id: str) -> None:
    """Mark a record as awaiting delete confirmation in one table."""
    st.session_state[_pending_delete_key(table_key)] = record_id


def pending_delete(table_key: str) -> Optional[str]:
    return st.session_state.get(_pending_delete_key(table_key))


def clear_pending_delete(table_key: str) -> None:
    st.session_state[_pending_delete_key(table_key)] = None


def render_shared_sidebar() -> Dict[str, Any]:
    """Render shared sidebar elements available on all pages.

    Returns:
        Dict with keys: 'store', 'selection', 'all_records', 'view'
    """
    # ui imports this module at top level.
    from .ui import ExpenseUI

    configure_logging()
    ui = ExpenseUI()
    store = get_store()
    selection = get_selection()

    st.sidebar.title("💰 ExpenseInsight")

    options = window_options()
    current = selection.label
    choice = st.sidebar.selectbox(
        "Viewing",
        options=options,
        index=options.index(current),
        help="Pick a month (across all years) or all-time activity",
    )
    if choice != current:
        apply_window_choice(choice)

    st.sidebar.subheader("➕ New Expense")
    with st.sidebar:
        draft = ui.render_expense_form()
    if draft is not None:
        error = submit_expense(draft)
        if error:
            st.sidebar.error(error)
        else:
            st.sidebar.success(f"Added '{draft.description.strip()}'")

    all_records = store.records
    return {
        'store': store,
        'selection': selection,
        'all_records': all_records,
        'view': selection.active_view(all_records),
    }
