"""Personal asset tracking: ledgers of snapshots and contributions, and the
timeline and growth figures derived from them."""
from asset_tracker.application.use_cases import BuildDashboardUseCase, DashboardContext
from asset_tracker.domain.contributions import contributions_by_person, total_contributions
from asset_tracker.domain.timeline import (
    annual_growth,
    build_timeline,
    current_allocation,
    filter_by_period,
    trailing_growth,
)
from asset_tracker.infrastructure.storage.ledger_store import JsonLedgerStore

__all__ = [
    "BuildDashboardUseCase",
    "DashboardContext",
    "JsonLedgerStore",
    "annual_growth",
    "build_timeline",
    "contributions_by_person",
    "current_allocation",
    "filter_by_period",
    "total_contributions",
    "trailing_growth",
]
