"""Configuration management for the expense recap dashboard.

This module centralizes the store credentials and display
constants.  Store credentials are read once at startup into a
:class:`StoreConfig` and passed explicitly to the data-access layer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

URL_ENV = "SUPABASE_URL"
KEY_ENV = "SUPABASE_ANON_KEY"
TABLE_ENV = "EXPENSE_RECAP_TABLE"
LOG_LEVEL_ENV = "EXPENSE_RECAP_LOG_LEVEL"

DEFAULT_TABLE = "pengeluaran"

# Display / export constants
LOCALE = "id_ID"
CURRENCY_PREFIX = "Rp"
SHEET_NAME = "Rekap Pengeluaran"
EXPORT_FILENAME = "Rekap-Pengeluaran.xlsx"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ConfigurationError(RuntimeError):
    """Raised when required store settings are missing."""


@dataclass(frozen=True)
class StoreConfig:
    """Connection settings for the hosted expense store."""

    url: str
    key: str
    table: str = DEFAULT_TABLE


def load_store_config(environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
    """Build the store configuration from the environment.

    When ``environ`` is omitted, a ``.env`` file in the working directory
    (if any) is loaded into ``os.environ`` first.

    Raises:
        ConfigurationError: If the URL or access key is missing or blank.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    url = (environ.get(URL_ENV) or "").strip()
    key = (environ.get(KEY_ENV) or "").strip()
    missing = [name for name, value in ((URL_ENV, url), (KEY_ENV, key)) if not value]
    if missing:
        raise ConfigurationError(
            f"Missing store settings: {', '.join(missing)}. "
            "Set them in the environment or in a .env file."
        )

    table = (environ.get(TABLE_ENV) or "").strip() or DEFAULT_TABLE
    return StoreConfig(url=url, key=key, table=table)


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Get the configured log level name (defaults to ``INFO``)."""
    environ = os.environ if environ is None else environ
    return (environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
