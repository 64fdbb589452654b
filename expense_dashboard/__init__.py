"""Top-level package for the Expense Dashboard.

This file makes the directory a Python package and exposes
convenient names.  The primary modules are:

* ``models`` – expense records, drafts and the category/payment enumerations
* ``storage`` – the JSON-backed expense store
* ``selection``, ``filters``, ``sorting`` – narrowing and ordering the records
* ``aggregation`` – totals, averages and chart series
* ``visualization`` – functions that generate Plotly figures

To run the dashboard from the command line you can execute:

```bash
streamlit run expense_dashboard/Home.py
```

or use the ``run_dashboard.py`` launcher at the repository root.
"""

from . import aggregation  # noqa: F401  # re-exported for convenience
from . import visualization  # noqa: F401  # re-exported for convenience
from .models import Category, ExpenseDraft, ExpenseRecord, PaymentMode
from .storage import ExpenseStore

__all__ = [
    "aggregation",
    "visualization",
    "Category",
    "ExpenseDraft",
    "ExpenseRecord",
    "ExpenseStore",
    "PaymentMode",
]
