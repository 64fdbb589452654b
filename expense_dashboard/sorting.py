"""Sorting for the transaction table.

Without an explicit sort the table shows the most recently added expense
first.  Clicking a column header sorts ascending; clicking the same header
again flips to descending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .models import ExpenseRecord

ASC = 'asc'
DESC = 'desc'

_FIELD_GETTERS: Dict[str, Callable[[ExpenseRecord], Any]] = {
    'date': lambda record: record.date,
    'description': lambda record: record.description,
    'amount': lambda record: record.amount,
    'category': lambda record: record.category.value,
    'payment_mode': lambda record: record.payment_mode.value,
    'notes': lambda record: record.notes or '',
    'created_at': lambda record: record.created_at,
}
SORTABLE_FIELDS = tuple(_FIELD_GETTERS)

# Columns whose headers are clickable in the table.
TABLE_SORT_LABELS = {
    'date': 'Date',
    'description': 'Description',
    'amount': 'Amount',
}


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: str = ASC

    def __post_init__(self) -> None:
        if self.key not in _FIELD_GETTERS:
            raise ValueError(f"Unsupported sort key: {self.key!r}")
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Sort direction must be 'asc' or 'desc', got {self.direction!r}")


def toggle_sort(current: Optional[SortConfig], key: str) -> SortConfig:
    """Return the sort that results from clicking ``key``'s header."""
    if current is not None and current.key == key and current.direction == ASC:
        return SortConfig(key, DESC)
    return SortConfig(key, ASC)


def sort_records(records: Sequence[ExpenseRecord], config: Optional[SortConfig] = None) -> List[ExpenseRecord]:
    """Order records by ``config``, or newest-created first when unset.

    The sort is stable in both directions: records with equal values keep
    their relative input order.
    """
    if config is None:
        return sorted(records, key=lambda record: record.created_at, reverse=True)
    getter = _FIELD_GETTERS[config.key]
    return sorted(records, key=getter, reverse=config.direction == DESC)
