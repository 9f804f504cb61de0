"""Spreadsheet export of a month's records.

The workbook has one sheet named ``Rekap Pengeluaran`` with the columns
``No, Tanggal, Barang, Kategori, Jumlah``.  ``Jumlah`` holds Rupiah
display text rather than numbers.
"""

from __future__ import annotations

import io
from typing import Dict

import pandas as pd
from openpyxl.utils import get_column_letter

try:
    from .config import SHEET_NAME
    from .formatting import format_rupiah
except ImportError:
    from config import SHEET_NAME
    from formatting import format_rupiah

EXPORT_COLUMNS = ['No', 'Tanggal', 'Barang', 'Kategori', 'Jumlah']

# Column widths in pixels, keyed by header
COLUMN_WIDTHS_PX: Dict[str, int] = {
    'No': 40,
    'Tanggal': 100,
    'Barang': 250,
    'Kategori': 120,
    'Jumlah': 100,
}

# Excel default font maximum digit width and cell padding, in pixels
_MAX_DIGIT_WIDTH = 7
_CELL_PADDING = 5


def pixels_to_width(pixels: int) -> float:
    """Convert a pixel width to Excel's character-based column width."""
    return int((pixels - _CELL_PADDING) / _MAX_DIGIT_WIDTH * 100 + 0.5) / 100


def build_recap_frame(records: pd.DataFrame, format_amounts: bool = True) -> pd.DataFrame:
    """Map records to the recap table layout, numbered from 1.

    Args:
        records: Record DataFrame in display order.
        format_amounts: When True, ``Jumlah`` is converted with
            :func:`format_rupiah`; otherwise it stays numeric.
    """
    amounts = records['amount'].tolist()
    return pd.DataFrame({
        'No': list(range(1, len(records) + 1)),
        'Tanggal': records['date'].tolist(),
        'Barang': records['note'].tolist(),
        'Kategori': records['category'].tolist(),
        'Jumlah': [format_rupiah(value) for value in amounts] if format_amounts else amounts,
    }, columns=EXPORT_COLUMNS)


def export_workbook(records: pd.DataFrame) -> bytes:
    """Serialize ``records`` into an ``.xlsx`` workbook and return its bytes."""
    frame = build_recap_frame(records, format_amounts=True)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        frame.to_excel(writer, sheet_name=SHEET_NAME, index=False)
        sheet = writer.sheets[SHEET_NAME]
        for index, column in enumerate(EXPORT_COLUMNS, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = pixels_to_width(COLUMN_WIDTHS_PX[column])
    return buffer.getvalue()
