"""Search and category filtering for the transaction table."""

from __future__ import annotations

from typing import List, Sequence, Union

from .models import Category, ExpenseRecord

ALL_CATEGORIES = 'All'


def matches_search(record: ExpenseRecord, search_term: str) -> bool:
    """Case-insensitive substring match against description or notes."""
    term = (search_term or '').lower()
    if not term:
        return True
    return term in record.description.lower() or term in (record.notes or '').lower()


def matches_category(record: ExpenseRecord, category_filter: Union[str, Category]) -> bool:
    if category_filter == ALL_CATEGORIES:
        return True
    return record.category == Category.parse(category_filter)


def apply_filters(
    records: Sequence[ExpenseRecord],
    search_term: str = '',
    category_filter: Union[str, Category] = ALL_CATEGORIES,
) -> List[ExpenseRecord]:
    """Narrow ``records`` by search text and category, preserving order."""
    if category_filter != ALL_CATEGORIES:
        category_filter = Category.parse(category_filter)
    return [
        record for record in records
        if matches_search(record, search_term) and matches_category(record, category_filter)
    ]
