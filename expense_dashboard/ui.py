"""Expense Dashboard UI components and layout.

This module contains the Streamlit rendering helpers shared by the pages:
KPI cards, the new-expense form, the chart grid and the transaction table
with search, category filter, sortable headers and confirmed deletion.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import streamlit as st
from streamlit.errors import StreamlitAPIException

from . import aggregation as agg
from . import visualization as viz
from .constants import category_label, payment_label
from .filters import ALL_CATEGORIES, apply_filters
from .formatting import format_currency, format_display_date
from .models import CATEGORIES, PAYMENT_MODES, ExpenseDraft, ExpenseRecord
from .selection import SelectionContext
from .session import (
    clear_pending_delete,
    click_sort_header,
    get_sort,
    pending_delete,
    request_delete,
)
from .sorting import ASC, TABLE_SORT_LABELS, sort_records
from .storage import ExpenseStore


class ExpenseUI:
    """UI components for the expense dashboard."""

    def __init__(self, *, configure_page: bool = False):
        """Initialize the Expense UI.

        Args:
            configure_page: When True, call ``setup_page_config`` immediately.
        """
        if configure_page:
            self.setup_page_config()

    def setup_page_config(self, page_title: str = "ExpenseInsight", page_icon: str = "💰") -> None:
        """Configure Streamlit page settings."""
        try:
            st.set_page_config(
                page_title=page_title,
                page_icon=page_icon,
                layout="wide",
                initial_sidebar_state="expanded",
            )
        except StreamlitAPIException:
            # Already configured by an earlier call in this run.
            pass

    def render_page_header(self, title: str, selection: SelectionContext) -> None:
        prefix = '' if selection.is_all_time else f"{selection.label} "
        st.header(f"{prefix}{title}")
        st.caption(selection.description)

    def render_kpi_cards(self, stats: agg.DashboardStats, selection: SelectionContext) -> None:
        """Render total spending, daily average and top category."""
        col1, col2, col3 = st.columns(3)

        with col1:
            st.metric(
                label=f"📈 Total Spending · {selection.label}",
                value=format_currency(stats.view_total),
                help="Sum of expenses in the selected window",
            )

        with col2:
            st.metric(
                label="🗓️ Daily Average · Since Start",
                value=format_currency(stats.daily_average),
                help="Lifetime spending divided by days since the first expense",
            )

        with col3:
            st.metric(
                label="🥧 Biggest Spend · Top Category",
                value=stats.top_category,
                help="Category with the largest total in the selected window",
            )

    def render_expense_form(self) -> Optional[ExpenseDraft]:
        """Render the new-expense form.

        Returns:
            The submitted draft (not yet validated), or None if not submitted.
        """
        with st.form("new_expense", clear_on_submit=True):
            description = st.text_input("Description", placeholder="e.g. Lunch at Cafe")
            amount = st.text_input("Amount (₹)", placeholder="0.00")
            category = st.selectbox(
                "Category",
                options=CATEGORIES,
                format_func=category_label,
            )
            payment_mode = st.selectbox(
                "Payment Mode",
                options=PAYMENT_MODES,
                format_func=payment_label,
            )
            expense_date = st.date_input("Date", value=date.today())
            notes = st.text_input("Notes (Optional)", placeholder="Add extra details...")
            submitted = st.form_submit_button("➕ Add Expense", use_container_width=True)

        if not submitted:
            return None
        return ExpenseDraft(
            description=description,
            amount=amount,
            category=category.value,
            payment_mode=payment_mode.value,
            date=expense_date.isoformat(),
            notes=notes,
        )

    def render_charts(self, view: Sequence[ExpenseRecord]) -> None:
        """Render the 2x2 chart grid for the active view."""
        category_totals = agg.category_totals(view)

        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(viz.create_trend_chart(agg.daily_trend(view)), use_container_width=True)
        with col2:
            st.plotly_chart(viz.create_category_pie_chart(category_totals), use_container_width=True)

        col3, col4 = st.columns([2, 1])
        with col3:
            st.plotly_chart(viz.create_spending_bar_chart(category_totals), use_container_width=True)
        with col4:
            st.plotly_chart(
                viz.create_payment_mode_chart(agg.payment_mode_totals(view)),
                use_container_width=True,
            )

    def render_table_controls(self, table_key: str) -> tuple:
        """Render the search box and category filter.

        Returns:
            ``(search_term, category_filter)``
        """
        col1, col2 = st.columns(2)
        with col1:
            search_term = st.text_input(
                "🔍 Search expenses",
                key=f"{table_key}_search",
                placeholder="Description or notes...",
            )
        with col2:
            category_filter = st.selectbox(
                "Category",
                options=[ALL_CATEGORIES] + [category.value for category in CATEGORIES],
                format_func=lambda value: "All Categories" if value == ALL_CATEGORIES else value,
                key=f"{table_key}_category",
            )
        return search_term, category_filter

    def render_expense_table(
        self,
        records: Sequence[ExpenseRecord],
        store: ExpenseStore,
        *,
        table_key: str,
        show_controls: bool = True,
    ) -> None:
        """Render a transaction table with sortable headers and delete buttons."""
        search_term, category_filter = ('', ALL_CATEGORIES)
        if show_controls:
            search_term, category_filter = self.render_table_controls(table_key)

        sort = get_sort(table_key)
        rows = sort_records(apply_filters(records, search_term, category_filter), sort)

        widths = [2, 4, 3, 2, 2, 1]
        header = st.columns(widths)
        for column, field in zip((header[0], header[1], header[4]), TABLE_SORT_LABELS):
            arrow = '↕'
            if sort is not None and sort.key == field:
                arrow = '↑' if sort.direction == ASC else '↓'
            if column.button(f"{TABLE_SORT_LABELS[field]} {arrow}", key=f"{table_key}_sort_{field}"):
                click_sort_header(table_key, field)
                st.rerun()
        header[2].markdown("**Category**")
        header[3].markdown("**Payment**")
        header[5].markdown("**Action**")

        self._render_delete_confirmation(store, table_key)

        if not rows:
            st.info("No expenses found matching your filters.")
            return

        for record in rows:
            cols = st.columns(widths)
            cols[0].write(format_display_date(record.date))
            if record.notes:
                cols[1].markdown(f"**{record.description}**  \n{record.notes}")
            else:
                cols[1].markdown(f"**{record.description}**")
            cols[2].write(category_label(record.category))
            cols[3].write(payment_label(record.payment_mode))
            cols[4].write(format_currency(record.amount))
            if cols[5].button("🗑️", key=f"{table_key}_delete_{record.id}", help="Delete expense"):
                request_delete(table_key, record.id)
                st.rerun()

    def _render_delete_confirmation(self, store: ExpenseStore, table_key: str) -> None:
        pending = pending_delete(table_key)
        if not pending:
            return
        record = store.get(pending)
        if record is None:
            clear_pending_delete(table_key)
            return
        st.warning(f"⚠️ Are you sure you want to delete '{record.description}'?")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("✅ Confirm", key=f"{table_key}_confirm_delete"):
                try:
                    store.remove(record.id)
                except OSError as e:
                    st.error(f"Could not delete expense: {e}")
                    return
                clear_pending_delete(table_key)
                st.rerun()
        with col2:
            if st.button("❌ Cancel", key=f"{table_key}_cancel_delete"):
                clear_pending_delete(table_key)
                st.rerun()
