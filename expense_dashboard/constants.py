"""Display constants keyed by the closed category and payment enumerations."""

from __future__ import annotations

from typing import Dict

from .models import Category, PaymentMode

CATEGORY_ICONS: Dict[Category, str] = {
    Category.FOOD_AND_DINING: '🍽️',
    Category.GROCERIES: '🛒',
    Category.TRAVEL_AND_TRANSPORTATION: '🚗',
    Category.ENTERTAINMENT: '🎬',
    Category.UTILITIES_AND_BILLS: '⚡',
    Category.SHOPPING: '🛍️',
    Category.HEALTH_AND_MEDICAL: '🩺',
    Category.EDUCATION: '🎓',
    Category.MISCELLANEOUS: '📦',
}

PAYMENT_ICONS: Dict[PaymentMode, str] = {
    PaymentMode.CASH: '💵',
    PaymentMode.UPI: '📱',
    PaymentMode.CARD: '💳',
    PaymentMode.BANK_TRANSFER: '🏦',
}

CHART_COLORS = [
    '#10b981',  # emerald
    '#3b82f6',  # blue
    '#f59e0b',  # amber
    '#ef4444',  # red
    '#8b5cf6',  # violet
    '#ec4899',  # pink
    '#06b6d4',  # cyan
    '#f97316',  # orange
    '#64748b',  # slate
]

TREND_COLOR = CHART_COLORS[0]


def category_label(category: Category) -> str:
    return f"{CATEGORY_ICONS[category]} {category.value}"


def payment_label(mode: PaymentMode) -> str:
    return f"{PAYMENT_ICONS[mode]} {mode.value}"
