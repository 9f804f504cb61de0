"""Top-level package for the expense recap dashboard.

The primary modules are:

* ``months`` – month identifiers and their date ranges
* ``db`` – fetching expense records from the hosted store
* ``aggregation`` – per-category and grand totals, category filter
* ``export`` – the ``Rekap-Pengeluaran.xlsx`` spreadsheet
* ``recap_page`` – the Streamlit page that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run expense_recap/Home.py
```
"""

from . import aggregation  # noqa: F401  # re-exported for convenience
from . import export  # noqa: F401  # re-exported for convenience
from . import months  # noqa: F401  # re-exported for convenience

__all__ = ["aggregation", "export", "months"]
