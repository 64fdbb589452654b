from datetime import date

import pytest

from expense_dashboard.models import ExpenseDraft
from expense_dashboard.selection import ALL_TIME, SelectionContext, filter_by_month


def _records():
    rows = [
        ('Coffee', '150', 'Food & Dining', '2025-01-05'),
        ('Bus', '50', 'Travel & Transportation', '2025-01-06'),
        ('Old lunch', '80', 'Food & Dining', '2024-01-10'),
        ('Movie', '300', 'Entertainment', '2025-03-02'),
    ]
    return [
        ExpenseDraft(description=desc, amount=amount, category=category, date=day).to_record(now=index)
        for index, (desc, amount, category, day) in enumerate(rows)
    ]


def test_all_time_returns_every_record():
    records = _records()
    selection = SelectionContext()
    assert selection.is_all_time
    assert selection.active_view(records) == records


def test_month_selection_ignores_year():
    records = _records()
    selection = SelectionContext()
    selection.select_month(0)
    january = selection.active_view(records)
    assert [record.description for record in january] == ['Coffee', 'Bus', 'Old lunch']


def test_month_without_records_is_empty():
    assert filter_by_month(_records(), 6) == []


def test_labels_follow_the_window():
    selection = SelectionContext(2)
    assert selection.label == 'March'
    assert selection.description == 'Viewing records for March'
    selection.select_all_time()
    assert selection.month_index is ALL_TIME
    assert selection.label == 'All Time'
    assert selection.description == 'Viewing all-time financial activity'


def test_select_current_month():
    selection = SelectionContext()
    selection.select_current_month(today=date(2025, 11, 3))
    assert selection.month_index == 10


@pytest.mark.parametrize('index', [-1, 12, True, 1.5])
def test_invalid_month_index_is_rejected(index):
    with pytest.raises(ValueError):
        SelectionContext().select_month(index)
