#!/usr/bin/env python3
"""Export one owner's monthly expense recap to an .xlsx file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from expense_recap.aggregation import aggregate
from expense_recap.config import EXPORT_FILENAME, ConfigurationError, get_log_level, load_store_config
from expense_recap.db import FetchError, create_store
from expense_recap.export import export_workbook
from expense_recap.formatting import format_rupiah
from expense_recap.log import setup_logging
from expense_recap.months import InvalidMonthError, resolve_month_range

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Export a monthly expense recap to Excel.')
    parser.add_argument('owner_id', help='Owner (user) identifier')
    parser.add_argument('month', help='Month in YYYY-MM format')
    parser.add_argument('--output', type=Path, default=Path(EXPORT_FILENAME), help='Destination .xlsx path')
    args = parser.parse_args(argv)

    setup_logging(get_log_level())

    try:
        month_range = resolve_month_range(args.month)
        store = create_store(load_store_config())
        records = store.fetch_expenses(args.owner_id, month_range)
    except (ConfigurationError, InvalidMonthError, FetchError) as exc:
        logger.error('%s', exc)
        return 1

    args.output.write_bytes(export_workbook(records))
    summary = aggregate(records)
    print(f"Wrote {len(records)} records to {args.output}")
    print(f"Total Keseluruhan: {format_rupiah(summary.total_all)}")
    for category, total in summary.category_totals.items():
        print(f"  {category}: {format_rupiah(total)}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
