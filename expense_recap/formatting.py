"""Formatting utilities for Rupiah amounts.

Amounts are shown with Indonesian thousands separators and no decimal
places, e.g. ``15000`` -> ``"Rp15.000"``.  Rounding happens only here,
at presentation time.
"""

from __future__ import annotations

from typing import Union

from babel import Locale, numbers

try:
    from .config import CURRENCY_PREFIX, LOCALE
except ImportError:
    from config import CURRENCY_PREFIX, LOCALE

WHOLE_NUMBER_PATTERN = "#,##0"

_locale = Locale.parse(LOCALE)


def format_number(amount: Union[float, int]) -> str:
    """Format a number with id_ID grouping and no decimals.

    Example:
        >>> format_number(1234567)
        '1.234.567'
    """
    return numbers.format_decimal(amount, format=WHOLE_NUMBER_PATTERN, locale=_locale)


def format_rupiah(amount: Union[float, int]) -> str:
    """Format an amount as Rupiah display text.

    This is the single rule used for the table, the totals and the
    ``Jumlah`` column of the exported spreadsheet.

    Example:
        >>> format_rupiah(15000)
        'Rp15.000'
    """
    return f"{CURRENCY_PREFIX}{format_number(amount)}"
