"""Shared parsing utilities for ledger input (JSON files, CLI arguments, forms)."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from asset_tracker.domain.errors import InvalidRecordError
from asset_tracker.domain.models import AssetCategory, Contributor

# Category keys written by the browser version of the tracker.
LEGACY_CATEGORY_ALIASES = {
    "tw_stock": AssetCategory.LOCAL_EQUITY,
    "us_stock": AssetCategory.FOREIGN_EQUITY,
    "tw_cash": AssetCategory.LOCAL_CASH,
    "us_cash": AssetCategory.FOREIGN_CASH,
}


def parse_decimal(value: object, field: str = "amount") -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise InvalidRecordError(f"Missing or invalid {field}: {value!r}")
    if isinstance(value, (int, float)):
        # str() keeps 32.5 as Decimal("32.5") rather than its binary expansion
        return Decimal(str(value))
    s = str(value).strip()
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    for token in [",", "NT$", "$", " "]:
        s = s.replace(token, "")
    if not s:
        raise InvalidRecordError(f"Missing {field}")
    try:
        result = Decimal(s)
    except InvalidOperation as exc:
        raise InvalidRecordError(f"Invalid {field}: {value!r}") from exc
    if not result.is_finite():
        raise InvalidRecordError(f"Invalid {field}: {value!r}")
    return -result if negative else result


def parse_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = "" if value is None else str(value).strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        if len(s) == 10:
            return date.fromisoformat(s)
        return datetime.fromisoformat(s).date()
    except ValueError as exc:
        raise InvalidRecordError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from exc


def parse_category(value: object) -> AssetCategory:
    if isinstance(value, AssetCategory):
        return value
    key = "" if value is None else str(value).strip().lower()
    if key in LEGACY_CATEGORY_ALIASES:
        return LEGACY_CATEGORY_ALIASES[key]
    try:
        return AssetCategory(key)
    except ValueError as exc:
        choices = ", ".join(category.value for category in AssetCategory)
        raise InvalidRecordError(f"Unknown asset category {value!r}; expected one of {choices}") from exc


def parse_contributor(value: object) -> Contributor:
    if isinstance(value, Contributor):
        return value
    key = "" if value is None else str(value).strip()
    for person in Contributor:
        if person.value.lower() == key.lower():
            return person
    choices = ", ".join(person.value for person in Contributor)
    raise InvalidRecordError(f"Unknown contributor {value!r}; expected one of {choices}")
