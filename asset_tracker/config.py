"""Central configuration for the asset tracker package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Context, Decimal
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_LEDGER_PATH = DATA_DIR / "ledger.json"

# Months looked back by the trailing growth badges.
TRAILING_WINDOWS = (1, 3, 6, 12, 36)


def _ledger_path_from_env() -> Path:
    override = os.environ.get("ASSET_TRACKER_DATA_FILE", "").strip()
    return Path(override) if override else DEFAULT_LEDGER_PATH


@dataclass(slots=True, frozen=True)
class Settings:
    decimal_context: Context
    home_currency: str
    currency_symbol: str
    default_fx_rate: Decimal
    trailing_windows: tuple[int, ...]
    ledger_path: Path


SETTINGS = Settings(
    decimal_context=Context(prec=28),
    home_currency="TWD",
    currency_symbol="NT$",
    default_fx_rate=Decimal("32.5"),
    trailing_windows=TRAILING_WINDOWS,
    ledger_path=_ledger_path_from_env(),
)
