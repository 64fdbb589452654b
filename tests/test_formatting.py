from datetime import date

import pandas as pd

from expense_dashboard.formatting import format_currency, format_display_date, format_short_date


def test_format_currency_uses_indian_grouping():
    assert format_currency(0) == '₹0.00'
    assert format_currency(150) == '₹150.00'
    assert format_currency(1234.5) == '₹1,234.50'
    assert format_currency(100000) == '₹1,00,000.00'
    assert format_currency(1234567.891) == '₹12,34,567.89'
    assert format_currency(-2500) == '-₹2,500.00'


def test_format_currency_without_sign():
    assert format_currency(123456, include_sign=False) == '1,23,456.00'


def test_date_formats():
    assert format_display_date(date(2025, 1, 5)) == '5 Jan 2025'
    assert format_display_date('2024-12-31') == '31 Dec 2024'
    assert format_short_date(pd.Timestamp('2025-03-09')) == '9 Mar'
