"""Month/all-time window selection over the expense collection."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from .models import ExpenseRecord

MONTHS = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

# Window value meaning "no month selected".
ALL_TIME = None


def filter_by_month(records: Sequence[ExpenseRecord], month_index: Optional[int]) -> List[ExpenseRecord]:
    """Return records whose date falls in the given month of any year.

    ``month_index`` is zero based (0 is January).  ``None`` keeps every record.
    """
    if month_index is ALL_TIME:
        return list(records)
    return [record for record in records if record.date.month - 1 == month_index]


class SelectionContext:
    """Tracks which window the user is viewing."""

    def __init__(self, month_index: Optional[int] = ALL_TIME):
        self.month_index: Optional[int] = ALL_TIME
        if month_index is not ALL_TIME:
            self.select_month(month_index)

    @property
    def is_all_time(self) -> bool:
        return self.month_index is ALL_TIME

    def select_month(self, month_index: int) -> None:
        if isinstance(month_index, bool) or not isinstance(month_index, int) or not 0 <= month_index <= 11:
            raise ValueError(f"Month index must be between 0 and 11, got {month_index!r}")
        self.month_index = month_index

    def select_all_time(self) -> None:
        self.month_index = ALL_TIME

    def select_current_month(self, today: Optional[date] = None) -> None:
        self.select_month((today or date.today()).month - 1)

    @property
    def label(self) -> str:
        return 'All Time' if self.is_all_time else MONTHS[self.month_index]

    @property
    def description(self) -> str:
        if self.is_all_time:
            return 'Viewing all-time financial activity'
        return f'Viewing records for {MONTHS[self.month_index]}'

    def active_view(self, records: Sequence[ExpenseRecord]) -> List[ExpenseRecord]:
        return filter_by_month(records, self.month_index)
