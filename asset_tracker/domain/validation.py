"""Write-time checks for ledger records."""
from __future__ import annotations

from decimal import Decimal

from .errors import InvalidRecordError
from .models import AssetCategory, AssetRecord, ContributionRecord, Contributor


def validate_asset_record(record: AssetRecord) -> AssetRecord:
    if not isinstance(record.category, AssetCategory):
        raise InvalidRecordError(f"Unknown asset category: {record.category!r}")
    if not record.amount.is_finite() or record.amount < 0:
        raise InvalidRecordError(f"Asset amount must be a non-negative number, got {record.amount}")
    if not record.fx_rate.is_finite() or record.fx_rate <= 0:
        raise InvalidRecordError(f"Exchange rate must be positive, got {record.fx_rate}")
    if not record.category.is_foreign and record.fx_rate != Decimal("1"):
        raise InvalidRecordError(f"{record.category.value} is held in the home currency; exchange rate must be 1")
    return record


def validate_contribution_record(record: ContributionRecord) -> ContributionRecord:
    if not isinstance(record.person, Contributor):
        raise InvalidRecordError(f"Unknown contributor: {record.person!r}")
    if not record.amount.is_finite() or record.amount <= 0:
        raise InvalidRecordError(f"Contribution amount must be positive, got {record.amount}")
    return record
