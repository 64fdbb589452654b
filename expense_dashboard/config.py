"""Configuration management for the expense dashboard.

This module centralizes all configuration values including paths,
defaults, and environment variable overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Base project root - assumes this file is in expense_dashboard/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("EXPENSE_DASHBOARD_DATA_DIR", _PROJECT_ROOT / "data"))

# Persisted expense blob
STORAGE_PATH = Path(
    os.getenv("EXPENSE_DASHBOARD_STORAGE_PATH", DATA_DIR / "expenses.json")
).resolve()
STORAGE_KEY = "expense_tracker_data_v1"

# Dashboard defaults
TREND_WINDOW_DAYS = 15
RECENT_TRANSACTIONS_LIMIT = 5
CURRENCY_SYMBOL = "₹"


def configure_logging() -> None:
    """Configure root logging once, honouring EXPENSE_DASHBOARD_LOG_LEVEL."""
    level_name = os.getenv("EXPENSE_DASHBOARD_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
