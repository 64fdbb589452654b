"""Formatting utilities for currency and date display."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

import pandas as pd

from .config import CURRENCY_SYMBOL


def _group_indian(whole: str) -> str:
    """Insert separators using Indian digit grouping (last three, then pairs)."""
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ','.join(pairs + [tail])


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with Indian digit grouping and two decimals.

    Args:
        amount: The amount to format
        include_sign: Whether to include the rupee sign

    Returns:
        Formatted currency string (e.g., "₹1,23,456.78" or "1,23,456.78")

    Example:
        >>> format_currency(1234567.5)
        '₹12,34,567.50'
        >>> format_currency(150, include_sign=False)
        '150.00'
    """
    negative = amount < 0
    whole, fraction = f"{abs(amount):.2f}".split('.')
    formatted = f"{_group_indian(whole)}.{fraction}"
    if include_sign:
        formatted = f"{CURRENCY_SYMBOL}{formatted}"
    return f"-{formatted}" if negative else formatted


def _as_date(value: Union[str, date, datetime, pd.Timestamp]) -> date:
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def format_display_date(value: Union[str, date, datetime, pd.Timestamp]) -> str:
    """Format a date for the transaction table, e.g. ``5 Jan 2025``."""
    day = _as_date(value)
    return f"{day.day} {day.strftime('%b')} {day.year}"


def format_short_date(value: Union[str, date, datetime, pd.Timestamp]) -> str:
    """Format a date for chart axes, e.g. ``5 Jan``."""
    day = _as_date(value)
    return f"{day.day} {day.strftime('%b')}"
