from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Sequence

import pytest

from asset_tracker.application.dto import DashboardRequest
from asset_tracker.application.use_cases import BuildDashboardUseCase, DashboardContext
from asset_tracker.domain.models import AssetCategory, AssetRecord, ContributionRecord, Contributor, Metric, Period
from asset_tracker.infrastructure.storage.sample_data import SAMPLE_ASSETS, SAMPLE_CONTRIBUTIONS


@dataclass
class InMemoryLedger:
    assets: Sequence[AssetRecord] = field(default_factory=tuple)
    contributions: Sequence[ContributionRecord] = field(default_factory=tuple)

    def list_asset_records(self) -> Sequence[AssetRecord]:
        return self.assets

    def list_contribution_records(self) -> Sequence[ContributionRecord]:
        return self.contributions


@pytest.fixture
def use_case() -> BuildDashboardUseCase:
    ledger = InMemoryLedger(assets=SAMPLE_ASSETS, contributions=SAMPLE_CONTRIBUTIONS)
    return BuildDashboardUseCase(DashboardContext(repository=ledger))


def test_dashboard_for_sample_ledger(use_case: BuildDashboardUseCase):
    snapshot = use_case.execute(
        DashboardRequest(period=Period.ONE_YEAR, metric=Metric.TOTAL, year=2026, reference_date=date(2026, 10, 16))
    )

    assert snapshot.total_assets == Decimal("3232559.5")
    assert snapshot.allocation[AssetCategory.LOCAL_EQUITY] == Decimal("147107")
    assert snapshot.allocation[AssetCategory.FOREIGN_CASH] == Decimal("0")
    assert snapshot.contributions == {Contributor.A_RU: Decimal("0"), Contributor.A_HUI: Decimal("350000")}
    assert len(snapshot.timeline) == 2
    assert [point.date for point in snapshot.visible_timeline] == [date(2026, 1, 5)]
    assert list(snapshot.trailing) == [1, 3, 6, 12, 36]
    assert snapshot.trailing[12].quantize(Decimal("0.01")) == Decimal("22.11")
    assert snapshot.annual.growth.quantize(Decimal("0.01")) == Decimal("22.11")
    assert snapshot.years == (2025, 2026)


def test_dashboard_defaults_to_reference_year(use_case: BuildDashboardUseCase):
    snapshot = use_case.execute(DashboardRequest(metric=Metric.INVESTMENT, reference_date=date(2025, 8, 1)))

    assert snapshot.annual.year == 2025
    assert snapshot.annual.growth is None
    assert len(snapshot.visible_timeline) == 2
    assert snapshot.years == (2025, 2026)


def test_dashboard_for_empty_ledger():
    use_case = BuildDashboardUseCase(DashboardContext(repository=InMemoryLedger()))

    snapshot = use_case.execute(DashboardRequest(reference_date=date(2026, 10, 16)))

    assert snapshot.total_assets == Decimal("0")
    assert snapshot.timeline == ()
    assert all(growth is None for growth in snapshot.trailing.values())
    assert not snapshot.annual.has_growth()
    assert snapshot.years == (2026,)
