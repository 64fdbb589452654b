"""Summary statistics and chart aggregations for expense records.

Every function here is pure: it accepts a sequence of
:class:`~expense_dashboard.models.ExpenseRecord` objects (usually the active
view) and returns a freshly computed pandas object or scalar.  Nothing is
cached, so callers simply re-invoke them whenever the records or the window
change.  All functions accept an empty sequence and return zeros, an empty
series or the ``NO_DATA`` sentinel rather than raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from .config import TREND_WINDOW_DAYS
from .models import ExpenseRecord

NO_DATA = 'N/A'

FRAME_COLUMNS = [
    'id', 'description', 'amount', 'category', 'payment_mode', 'date', 'notes', 'created_at',
]


@dataclass(frozen=True)
class DashboardStats:
    total: float
    view_total: float
    daily_average: float
    top_category: str


def records_to_frame(records: Sequence[ExpenseRecord]) -> pd.DataFrame:
    """Convert records into a DataFrame with one row per expense.

    Enumerations are stored as their display values and ``date`` as a
    datetime64 column so the frame can be grouped and plotted directly.
    """
    rows = [
        {
            'id': record.id,
            'description': record.description,
            'amount': float(record.amount),
            'category': record.category.value,
            'payment_mode': record.payment_mode.value,
            'date': record.date,
            'notes': record.notes or '',
            'created_at': record.created_at,
        }
        for record in records
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df['amount'] = pd.to_numeric(df['amount'], errors='coerce').fillna(0.0).astype(float)
    df['date'] = pd.to_datetime(df['date']).astype('datetime64[ns]')
    return df


def _grouped_totals(records: Sequence[ExpenseRecord], column: str) -> pd.Series:
    df = records_to_frame(records)
    if df.empty:
        return pd.Series(dtype=float, name='amount')
    # sort=False keeps groups in first-seen order
    return df.groupby(column, sort=False)['amount'].sum()


def category_totals(records: Sequence[ExpenseRecord]) -> pd.Series:
    """Sum amounts per category, largest first.

    Categories with equal totals stay in the order they were first seen.
    Categories with no records are omitted.
    """
    totals = _grouped_totals(records, 'category')
    return totals.sort_values(ascending=False, kind='stable')


def payment_mode_totals(records: Sequence[ExpenseRecord]) -> pd.Series:
    """Sum amounts per payment mode in first-seen order (unsorted)."""
    return _grouped_totals(records, 'payment_mode')


def grand_total(records: Sequence[ExpenseRecord]) -> float:
    """Lifetime total over every stored record."""
    if not records:
        return 0.0
    return float(records_to_frame(records)['amount'].sum())


def view_total(view_records: Sequence[ExpenseRecord]) -> float:
    """Total over the currently active window."""
    return grand_total(view_records)


def days_since_earliest(records: Sequence[ExpenseRecord], now: Optional[datetime] = None) -> int:
    """Whole days (rounded up, at least one) between the earliest date and ``now``."""
    if not records:
        return 1
    earliest = pd.Timestamp(min(record.date for record in records))
    current = pd.Timestamp(now if now is not None else datetime.now())
    elapsed = abs(current - earliest) / pd.Timedelta(days=1)
    return max(1, int(np.ceil(elapsed)))


def daily_average(records: Sequence[ExpenseRecord], now: Optional[datetime] = None) -> float:
    """Average spend per day since the first recorded expense.

    Always computed over the full history, never a filtered view.
    """
    if not records:
        return 0.0
    return grand_total(records) / days_since_earliest(records, now)


def top_category(view_records: Sequence[ExpenseRecord]) -> str:
    totals = category_totals(view_records)
    if totals.empty:
        return NO_DATA
    return str(totals.index[0])


def daily_trend(
    records: Sequence[ExpenseRecord],
    today: Optional[Union[date, datetime]] = None,
    days: int = TREND_WINDOW_DAYS,
) -> pd.Series:
    """Daily totals for the last ``days`` calendar days ending today.

    The series always has exactly ``days`` buckets, oldest first.  Records
    dated outside the window are ignored.
    """
    end = pd.Timestamp(today if today is not None else date.today()).normalize()
    window = pd.date_range(end=end, periods=days, freq='D', name='date', unit='ns')
    df = records_to_frame(records)
    if df.empty:
        totals = pd.Series(dtype=float)
    else:
        totals = df.groupby('date')['amount'].sum()
    trend = totals.reindex(window, fill_value=0.0).astype(float)
    trend.index.name = 'date'
    trend.name = 'amount'
    return trend


def compute_stats(
    all_records: Sequence[ExpenseRecord],
    view_records: Sequence[ExpenseRecord],
    now: Optional[datetime] = None,
) -> DashboardStats:
    """Compute the KPI card values for the dashboard header."""
    return DashboardStats(
        total=grand_total(all_records),
        view_total=view_total(view_records),
        daily_average=daily_average(all_records, now),
        top_category=top_category(view_records),
    )
