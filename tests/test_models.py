"""Unit tests for expense_dashboard.models."""

from __future__ import annotations

from datetime import date

import pytest

from expense_dashboard.models import (
    CATEGORIES,
    PAYMENT_MODES,
    Category,
    ExpenseDraft,
    ExpenseRecord,
    InvalidExpenseError,
    PaymentMode,
)


def _draft(**overrides) -> ExpenseDraft:
    values = {
        'description': '  Lunch at Cafe ',
        'amount': '250.50',
        'category': 'Food & Dining',
        'payment_mode': 'UPI',
        'date': '2025-01-05',
        'notes': '',
    }
    values.update(overrides)
    return ExpenseDraft(**values)


def test_enumerations_are_closed() -> None:
    assert len(CATEGORIES) == 9
    assert [mode.value for mode in PAYMENT_MODES] == ['Cash', 'UPI', 'Card', 'Bank Transfer']
    assert Category('Utilities & Bills') is Category.UTILITIES_AND_BILLS
    with pytest.raises(InvalidExpenseError):
        Category.parse('Rent')
    with pytest.raises(InvalidExpenseError):
        PaymentMode.parse('Cheque')


def test_draft_to_record_assigns_id_and_created_at() -> None:
    record = _draft().to_record(now=1736035200000)
    assert record.description == 'Lunch at Cafe'
    assert record.amount == 250.5
    assert record.category is Category.FOOD_AND_DINING
    assert record.payment_mode is PaymentMode.UPI
    assert record.date == date(2025, 1, 5)
    assert record.notes is None
    assert record.created_at == 1736035200000
    assert record.id


def test_each_draft_gets_a_unique_id() -> None:
    first = _draft().to_record()
    second = _draft().to_record()
    assert first.id != second.id
    assert first.created_at > 0


@pytest.mark.parametrize(
    "overrides",
    [
        {'description': '   '},
        {'amount': ''},
        {'amount': 'abc'},
        {'amount': '-1'},
        {'amount': 'nan'},
        {'amount': 'inf'},
        {'category': 'Rent'},
        {'payment_mode': 'Cheque'},
        {'date': '2025-02-30'},
    ],
)
def test_invalid_drafts_are_rejected(overrides) -> None:
    with pytest.raises(InvalidExpenseError):
        _draft(**overrides).to_record()


def test_zero_amount_is_allowed() -> None:
    assert _draft(amount='0').to_record().amount == 0.0


def test_record_serializes_with_persisted_field_names() -> None:
    record = _draft(notes='with friends').to_record(now=42)
    payload = record.to_dict()
    assert payload == {
        'id': record.id,
        'description': 'Lunch at Cafe',
        'amount': 250.5,
        'category': 'Food & Dining',
        'paymentMode': 'UPI',
        'date': '2025-01-05',
        'notes': 'with friends',
        'createdAt': 42,
    }
    assert ExpenseRecord.from_dict(payload) == record


def test_notes_are_omitted_when_absent() -> None:
    payload = _draft().to_record().to_dict()
    assert 'notes' not in payload


def test_from_dict_rejects_malformed_entries() -> None:
    good = _draft().to_record().to_dict()
    for broken in (
        {k: v for k, v in good.items() if k != 'id'},
        dict(good, amount=-5),
        dict(good, category='Food'),
        dict(good, date='yesterday'),
        dict(good, createdAt=float('nan')),
        dict(good, createdAt='soon'),
    ):
        with pytest.raises(InvalidExpenseError):
            ExpenseRecord.from_dict(broken)
    with pytest.raises(InvalidExpenseError):
        ExpenseRecord.from_dict(['not', 'a', 'dict'])
