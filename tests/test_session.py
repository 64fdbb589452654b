import types

import pytest

from expense_dashboard import session
from expense_dashboard import storage as storage_mod
from expense_dashboard.models import ExpenseDraft
from expense_dashboard.sorting import ASC, DESC, SortConfig


@pytest.fixture
def fake_st(monkeypatch, tmp_path):
    state = {}
    monkeypatch.setattr(session, 'st', types.SimpleNamespace(session_state=state))
    monkeypatch.setattr(storage_mod, 'STORAGE_PATH', tmp_path / 'expenses.json')
    return state


def test_store_is_created_once_per_session(fake_st, tmp_path):
    store = session.get_store()
    assert session.get_store() is store
    assert fake_st[session.STORE_STATE_KEY] is store
    assert store.path == tmp_path / 'expenses.json'


def test_submit_expense_adds_to_session_store(fake_st):
    error = session.submit_expense(ExpenseDraft(description='Coffee', amount='150', date='2025-01-05'))
    assert error is None
    assert [record.description for record in session.get_store()] == ['Coffee']


def test_submit_expense_reports_validation_errors(fake_st):
    error = session.submit_expense(ExpenseDraft(description='Coffee', amount='-5'))
    assert 'non-negative' in error
    assert len(session.get_store()) == 0


def test_window_choice_updates_selection(fake_st):
    selection = session.apply_window_choice('March')
    assert selection.month_index == 2
    assert session.get_selection() is selection
    session.apply_window_choice(session.ALL_TIME_LABEL)
    assert selection.is_all_time
    assert session.window_options()[0] == session.ALL_TIME_LABEL
    assert len(session.window_options()) == 13


def test_sort_header_clicks_are_tracked_per_table(fake_st):
    assert session.get_sort('history') is None
    assert session.click_sort_header('history', 'amount') == SortConfig('amount', ASC)
    assert session.click_sort_header('history', 'amount') == SortConfig('amount', DESC)
    assert session.click_sort_header('history', 'date') == SortConfig('date', ASC)
    assert session.get_sort('recent') is None


def test_open_page_switches_page(monkeypatch):
    called = {}
    st_mock = types.SimpleNamespace(switch_page=lambda page: called.setdefault('page', page))
    monkeypatch.setattr(session, 'st', st_mock)
    session.open_page(session.DASHBOARD_PAGE)
    assert called['page'] == session.DASHBOARD_PAGE


def test_pending_delete_is_scoped_to_its_table(fake_st):
    session.request_delete('history', 'abc')
    assert session.pending_delete('history') == 'abc'
    assert session.pending_delete('recent') is None


def test_pending_delete_survives_until_cleared(fake_st):
    session.request_delete('history', 'abc')
    session.click_sort_header('history', 'amount')
    assert session.pending_delete('history') == 'abc'
    session.clear_pending_delete('history')
    assert session.pending_delete('history') is None
