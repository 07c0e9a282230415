"""Application-level DTOs for the dashboard."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Mapping, Sequence

from asset_tracker.domain.models import AssetCategory, Contributor, Metric, Period, TimelinePoint
from asset_tracker.domain.results import AnnualGrowth


@dataclass(slots=True, frozen=True)
class DashboardRequest:
    period: Period = Period.ALL
    metric: Metric = Metric.TOTAL
    year: int | None = None
    reference_date: date | None = None


@dataclass(slots=True, frozen=True)
class DashboardSnapshot:
    as_of: date
    allocation: Mapping[AssetCategory, Decimal]
    total_assets: Decimal
    contributions: Mapping[Contributor, Decimal]
    timeline: Sequence[TimelinePoint]
    visible_timeline: Sequence[TimelinePoint]
    metric: Metric
    trailing: Mapping[int, Decimal | None]
    annual: AnnualGrowth
    years: Sequence[int] = field(default_factory=tuple)
