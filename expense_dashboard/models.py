"""Expense records, drafts and the closed category/payment enumerations."""

from __future__ import annotations

import math
import time
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Union


class InvalidExpenseError(ValueError):
    """Raised when a draft or persisted entry does not describe a valid expense."""


class Category(str, Enum):
    FOOD_AND_DINING = 'Food & Dining'
    GROCERIES = 'Groceries'
    TRAVEL_AND_TRANSPORTATION = 'Travel & Transportation'
    ENTERTAINMENT = 'Entertainment'
    UTILITIES_AND_BILLS = 'Utilities & Bills'
    SHOPPING = 'Shopping'
    HEALTH_AND_MEDICAL = 'Health & Medical'
    EDUCATION = 'Education'
    MISCELLANEOUS = 'Miscellaneous'

    @classmethod
    def parse(cls, value: Union[str, 'Category']) -> 'Category':
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidExpenseError(f"Unknown category: {value!r}") from exc


class PaymentMode(str, Enum):
    CASH = 'Cash'
    UPI = 'UPI'
    CARD = 'Card'
    BANK_TRANSFER = 'Bank Transfer'

    @classmethod
    def parse(cls, value: Union[str, 'PaymentMode']) -> 'PaymentMode':
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidExpenseError(f"Unknown payment mode: {value!r}") from exc


CATEGORIES = list(Category)
PAYMENT_MODES = list(PaymentMode)


def parse_amount(value: Any) -> float:
    """Parse a user supplied amount into a finite, non-negative float."""
    if isinstance(value, bool):
        raise InvalidExpenseError(f"Invalid amount: {value!r}")
    text = str(value).strip() if value is not None else ''
    if not text:
        raise InvalidExpenseError("Amount is required")
    try:
        amount = float(text)
    except ValueError as exc:
        raise InvalidExpenseError(f"Invalid amount: {value!r}") from exc
    if not math.isfinite(amount) or amount < 0:
        raise InvalidExpenseError(f"Amount must be a non-negative number, got {value!r}")
    return amount


def parse_date(value: Union[str, date]) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string (or pass through a date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidExpenseError(f"Invalid date: {value!r}") from exc


def current_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ExpenseRecord:
    """A single spending entry. Records are never mutated after creation."""

    id: str
    description: str
    amount: float
    category: Category
    payment_mode: PaymentMode
    date: date
    notes: Optional[str] = None
    created_at: int = 0

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'id': self.id,
            'description': self.description,
            'amount': self.amount,
            'category': self.category.value,
            'paymentMode': self.payment_mode.value,
            'date': self.date.isoformat(),
            'createdAt': self.created_at,
        }
        if self.notes is not None:
            payload['notes'] = self.notes
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExpenseRecord':
        if not isinstance(data, dict):
            raise InvalidExpenseError(f"Expected an object, got {type(data).__name__}")
        try:
            record_id = data['id']
            description = data['description']
            created_at = data.get('createdAt', 0)
        except KeyError as exc:
            raise InvalidExpenseError(f"Missing field {exc.args[0]!r}") from exc
        if not isinstance(record_id, str) or not record_id:
            raise InvalidExpenseError(f"Invalid id: {record_id!r}")
        if not isinstance(description, str) or not description.strip():
            raise InvalidExpenseError("Description cannot be empty")
        if (
            isinstance(created_at, bool)
            or not isinstance(created_at, (int, float))
            or not math.isfinite(created_at)
        ):
            raise InvalidExpenseError(f"Invalid createdAt: {created_at!r}")
        notes = data.get('notes')
        if notes is not None and not isinstance(notes, str):
            raise InvalidExpenseError(f"Invalid notes: {notes!r}")
        return cls(
            id=record_id,
            description=description,
            amount=parse_amount(data.get('amount')),
            category=Category.parse(data.get('category')),
            payment_mode=PaymentMode.parse(data.get('paymentMode')),
            date=parse_date(data.get('date', '')),
            notes=notes,
            created_at=int(created_at),
        )


@dataclass
class ExpenseDraft:
    """Raw values collected by the expense form, prior to validation."""

    description: str
    amount: str
    category: str = Category.FOOD_AND_DINING.value
    payment_mode: str = PaymentMode.CASH.value
    date: str = field(default_factory=lambda: date.today().isoformat())
    notes: str = ''

    def to_record(self, now: Optional[int] = None) -> ExpenseRecord:
        """Validate the draft and build a new record with a fresh id.

        Args:
            now: Optional creation timestamp in epoch milliseconds.

        Raises:
            InvalidExpenseError: If any field fails validation.
        """
        description = (self.description or '').strip()
        if not description:
            raise InvalidExpenseError("Description cannot be empty")
        notes = (self.notes or '').strip() or None
        return ExpenseRecord(
            id=uuid.uuid4().hex,
            description=description,
            amount=parse_amount(self.amount),
            category=Category.parse(self.category),
            payment_mode=PaymentMode.parse(self.payment_mode),
            date=parse_date(self.date),
            notes=notes,
            created_at=current_millis() if now is None else int(now),
        )
