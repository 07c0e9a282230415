"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import AssetRecord, ContributionRecord


class AssetLedgerRepository(Protocol):
    """Provides the asset snapshots recorded so far, in no particular order."""

    def list_asset_records(self) -> Sequence[AssetRecord]:
        ...


class ContributionLedgerRepository(Protocol):
    """Provides the contribution records recorded so far."""

    def list_contribution_records(self) -> Sequence[ContributionRecord]:
        ...


class LedgerRepository(AssetLedgerRepository, ContributionLedgerRepository, Protocol):
    """Both ledgers behind one store."""
