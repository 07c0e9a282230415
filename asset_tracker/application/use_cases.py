"""Application services assembling the dashboard from the ledgers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from asset_tracker.application.dto import DashboardRequest, DashboardSnapshot
from asset_tracker.config import SETTINGS, Settings
from asset_tracker.domain.contributions import contributions_by_person
from asset_tracker.domain.models import Metric, Period
from asset_tracker.domain.repositories import LedgerRepository
from asset_tracker.domain.timeline import (
    annual_growth,
    available_years,
    build_timeline,
    current_allocation,
    filter_by_period,
    trailing_growth_table,
)


@dataclass(slots=True)
class DashboardContext:
    repository: LedgerRepository
    settings: Settings = SETTINGS


class BuildDashboardUseCase:
    def __init__(self, context: DashboardContext) -> None:
        self._context = context

    def execute(self, request: DashboardRequest | None = None) -> DashboardSnapshot:
        request = request or DashboardRequest()
        as_of = request.reference_date or date.today()
        metric = Metric(request.metric)
        year = request.year if request.year is not None else as_of.year

        assets = self._context.repository.list_asset_records()
        contributions = self._context.repository.list_contribution_records()

        timeline = build_timeline(assets)
        allocation = current_allocation(assets)
        return DashboardSnapshot(
            as_of=as_of,
            allocation=allocation,
            total_assets=sum(allocation.values(), Decimal("0")),
            contributions=contributions_by_person(contributions),
            timeline=tuple(timeline),
            visible_timeline=tuple(filter_by_period(timeline, Period(request.period), as_of)),
            metric=metric,
            trailing=trailing_growth_table(timeline, self._context.settings.trailing_windows, metric),
            annual=annual_growth(timeline, year, metric),
            years=tuple(available_years(timeline, as_of)),
        )
