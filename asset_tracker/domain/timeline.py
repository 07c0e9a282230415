"""Timeline reconstruction and growth statistics over the asset ledger.

Every function here is pure: it takes a snapshot of the ledger (or a timeline
built from one) and returns fresh values, so callers simply recompute after
each ledger change.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal, localcontext
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Mapping, Sequence

import pandas as pd

from asset_tracker.config import SETTINGS
from .models import (
    EQUITY_CATEGORIES,
    AssetCategory,
    AssetRecord,
    Metric,
    Period,
    TimelinePoint,
)
from .results import AnnualGrowth

ZERO = Decimal("0")


def shift_months(day: date, months: int) -> date:
    """Move ``day`` back by calendar months, clamping to the month end."""
    return (pd.Timestamp(day) - pd.DateOffset(months=months)).date()


def _ledger_order(record: AssetRecord) -> tuple[date, str]:
    # Same-day snapshots of one category resolve to the lexicographically larger id.
    return (record.date, record.id)


def _snapshot(day: date, latest: Mapping[AssetCategory, AssetRecord]) -> TimelinePoint:
    by_category = {
        category: latest[category].value if category in latest else ZERO
        for category in AssetCategory
    }
    investment = sum((by_category[category] for category in EQUITY_CATEGORIES), ZERO)
    total = sum(by_category.values(), ZERO)
    return TimelinePoint(
        date=day,
        total_value=total,
        investment_value=investment,
        by_category=by_category,
    )


def build_timeline(records: Iterable[AssetRecord]) -> list[TimelinePoint]:
    """One point per distinct record date, carrying each category forward."""
    ordered = sorted(records, key=_ledger_order)
    latest: dict[AssetCategory, AssetRecord] = {}
    points: list[TimelinePoint] = []
    for day, same_day in groupby(ordered, key=attrgetter("date")):
        for record in same_day:
            latest[record.category] = record
        points.append(_snapshot(day, latest))
    return points


def current_allocation(records: Iterable[AssetRecord]) -> dict[AssetCategory, Decimal]:
    """Home-currency value of the newest snapshot of every category."""
    latest: dict[AssetCategory, AssetRecord] = {}
    for record in sorted(records, key=_ledger_order):
        latest[record.category] = record
    return dict(_snapshot(date.min, latest).by_category)


def filter_by_period(
    points: Sequence[TimelinePoint],
    period: Period | str,
    reference: date | None = None,
) -> list[TimelinePoint]:
    period = Period(period)
    if period.months is None:
        return list(points)
    cutoff = shift_months(reference or date.today(), period.months)
    return [point for point in points if point.date >= cutoff]


def _percent_change(start: Decimal, end: Decimal) -> Decimal:
    with localcontext(SETTINGS.decimal_context):
        return (end - start) / start * 100


def trailing_growth(
    points: Sequence[TimelinePoint],
    months_back: int,
    metric: Metric | str = Metric.TOTAL,
) -> Decimal | None:
    """Percent change from the point nearest ``months_back`` before the last one.

    Returns ``None`` when the timeline has fewer than two points and ``0`` when
    the comparison point has nothing to compare against.
    """
    metric = Metric(metric)
    if len(points) < 2:
        return None

    last = points[-1]
    target = shift_months(last.date, months_back)
    comparison = points[0]
    nearest: int | None = None
    for point in points:
        distance = abs((point.date - target).days)
        if nearest is None or distance < nearest:
            nearest = distance
            comparison = point

    baseline = metric.of(comparison)
    if baseline == 0:
        return ZERO
    return _percent_change(baseline, metric.of(last))


def trailing_growth_table(
    points: Sequence[TimelinePoint],
    windows: Sequence[int] | None = None,
    metric: Metric | str = Metric.TOTAL,
) -> dict[int, Decimal | None]:
    if windows is None:
        windows = SETTINGS.trailing_windows
    return {months: trailing_growth(points, months, metric) for months in windows}


def annual_growth(
    points: Sequence[TimelinePoint],
    year: int,
    metric: Metric | str = Metric.TOTAL,
) -> AnnualGrowth:
    """Growth of ``year``'s closing value over the prior year's close.

    Without earlier data the year's own first point is the baseline; a single
    point in that case, or a zero baseline, yields no growth figure.
    """
    metric = Metric(metric)
    year = int(year)
    year_start = date(year, 1, 1)
    in_year = [point for point in points if point.date.year == year]
    before_year = [point for point in points if point.date < year_start]

    if not in_year:
        return AnnualGrowth(year=year, growth=None, start_value=ZERO, end_value=ZERO)

    end_value = metric.of(in_year[-1])
    if before_year:
        start_value = metric.of(before_year[-1])
    elif len(in_year) == 1:
        return AnnualGrowth(year=year, growth=None, start_value=ZERO, end_value=end_value)
    else:
        start_value = metric.of(in_year[0])

    if start_value == 0:
        return AnnualGrowth(year=year, growth=None, start_value=start_value, end_value=end_value)
    return AnnualGrowth(
        year=year,
        growth=_percent_change(start_value, end_value),
        start_value=start_value,
        end_value=end_value,
    )


def available_years(points: Iterable[TimelinePoint], today: date | None = None) -> list[int]:
    years = {point.date.year for point in points}
    years.add((today or date.today()).year)
    return sorted(years)
