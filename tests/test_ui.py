from unittest import mock

import pytest

from expense_dashboard import session, ui
from expense_dashboard.models import ExpenseDraft
from expense_dashboard.storage import ExpenseStore


def _columns(spec):
    count = spec if isinstance(spec, int) else len(spec)
    cols = [mock.MagicMock() for _ in range(count)]
    for col in cols:
        col.button.return_value = False
    return cols


@pytest.fixture
def fake_st(monkeypatch):
    state = {}
    monkeypatch.setattr(session, 'st', mock.MagicMock(session_state=state))
    st_mock = mock.MagicMock()
    st_mock.columns.side_effect = _columns
    st_mock.button.return_value = False
    monkeypatch.setattr(ui, 'st', st_mock)
    return st_mock


def test_pending_delete_is_shown_when_no_rows_match(fake_st, tmp_path):
    store = ExpenseStore(tmp_path / 'expenses.json')
    record = store.add(ExpenseDraft(description='Coffee', amount='150', date='2025-01-05'))
    session.request_delete('history', record.id)

    ui.ExpenseUI().render_expense_table([], store, table_key='history', show_controls=False)

    fake_st.warning.assert_called_once()
    assert 'Coffee' in fake_st.warning.call_args[0][0]
    fake_st.info.assert_called_once()


def test_pending_delete_does_not_leak_to_other_tables(fake_st, tmp_path):
    store = ExpenseStore(tmp_path / 'expenses.json')
    record = store.add(ExpenseDraft(description='Coffee', amount='150', date='2025-01-05'))
    session.request_delete('history', record.id)

    ui.ExpenseUI().render_expense_table(store.records, store, table_key='recent', show_controls=False)

    fake_st.warning.assert_not_called()


def test_confirming_removes_the_record(fake_st, tmp_path):
    store = ExpenseStore(tmp_path / 'expenses.json')
    record = store.add(ExpenseDraft(description='Coffee', amount='150', date='2025-01-05'))
    session.request_delete('history', record.id)
    fake_st.button.side_effect = lambda label, key=None: key == 'history_confirm_delete'

    ui.ExpenseUI().render_expense_table(store.records, store, table_key='history', show_controls=False)

    assert len(store) == 0
    assert session.pending_delete('history') is None
    fake_st.rerun.assert_called_once()
