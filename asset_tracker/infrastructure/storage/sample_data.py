"""Starter ledgers written when a fresh ledger file is seeded."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from asset_tracker.domain.models import AssetCategory, AssetRecord, ContributionRecord, Contributor

SAMPLE_ASSETS = (
    AssetRecord(
        id="1",
        date=date(2025, 1, 5),
        category=AssetCategory.FOREIGN_EQUITY,
        amount=Decimal("78130"),
        fx_rate=Decimal("32.5"),
        note="Initial record (rate assumed 32.5)",
    ),
    AssetRecord(
        id="2",
        date=date(2025, 1, 5),
        category=AssetCategory.LOCAL_EQUITY,
        amount=Decimal("107947"),
        note="Initial record",
    ),
    AssetRecord(
        id="3",
        date=date(2026, 1, 5),
        category=AssetCategory.FOREIGN_EQUITY,
        amount=Decimal("94937"),
        fx_rate=Decimal("32.5"),
        note="Yearly update (rate assumed 32.5)",
    ),
    AssetRecord(
        id="4",
        date=date(2026, 1, 5),
        category=AssetCategory.LOCAL_EQUITY,
        amount=Decimal("147107"),
        note="Yearly update",
    ),
)

SAMPLE_CONTRIBUTIONS = (
    ContributionRecord(id="1", person=Contributor.A_HUI, date=date(2026, 12, 31), amount=Decimal("350000")),
)
