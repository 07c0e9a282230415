from datetime import date
from decimal import Decimal

from asset_tracker.domain.models import AssetCategory, AssetRecord, Metric
from asset_tracker.domain.timeline import (
    annual_growth,
    build_timeline,
    trailing_growth,
    trailing_growth_table,
)


def make_record(record_id: str, day: date, category: AssetCategory, amount: str, fx_rate: str = "1") -> AssetRecord:
    return AssetRecord(id=record_id, date=day, category=category, amount=Decimal(amount), fx_rate=Decimal(fx_rate))


def sample_timeline():
    return build_timeline(
        [
            make_record("1", date(2025, 1, 5), AssetCategory.FOREIGN_EQUITY, "78130", "32.5"),
            make_record("2", date(2025, 1, 5), AssetCategory.LOCAL_EQUITY, "107947"),
            make_record("3", date(2026, 1, 5), AssetCategory.FOREIGN_EQUITY, "94937", "32.5"),
            make_record("4", date(2026, 1, 5), AssetCategory.LOCAL_EQUITY, "147107"),
        ]
    )


def local_cash_timeline(*snapshots: tuple[date, str]):
    return build_timeline(
        [make_record(str(index), day, AssetCategory.LOCAL_CASH, amount) for index, (day, amount) in enumerate(snapshots)]
    )


def test_trailing_growth_needs_two_points():
    assert trailing_growth([], 12) is None
    single = local_cash_timeline((date(2025, 1, 1), "100"))
    assert trailing_growth(single, 12) is None
    assert trailing_growth_table(single) == {1: None, 3: None, 6: None, 12: None, 36: None}


def test_trailing_growth_over_a_year():
    growth = trailing_growth(sample_timeline(), 12, Metric.TOTAL)

    assert growth.quantize(Decimal("0.01")) == Decimal("22.11")


def test_trailing_growth_nearest_point_can_be_the_latest():
    # one month back from 2026-01-05 is closer to the latest point than the first
    assert trailing_growth(sample_timeline(), 1) == Decimal("0")


def test_trailing_growth_tie_goes_to_earlier_point():
    timeline = local_cash_timeline(
        (date(2026, 3, 22), "100"),
        (date(2026, 4, 11), "200"),
        (date(2026, 7, 1), "300"),
    )

    # target 2026-04-01 sits ten days from both candidates
    assert trailing_growth(timeline, 3) == Decimal("200")


def test_trailing_growth_zero_baseline_reports_zero():
    timeline = local_cash_timeline((date(2025, 1, 1), "0"), (date(2026, 1, 1), "500"))

    assert trailing_growth(timeline, 12) == Decimal("0")


def test_trailing_growth_investment_metric():
    timeline = build_timeline(
        [
            make_record("1", date(2025, 1, 1), AssetCategory.LOCAL_CASH, "1000"),
            make_record("2", date(2025, 1, 1), AssetCategory.LOCAL_EQUITY, "400"),
            make_record("3", date(2025, 7, 1), AssetCategory.LOCAL_EQUITY, "500"),
        ]
    )

    assert trailing_growth(timeline, 6, "investment") == Decimal("25")
    assert trailing_growth(timeline, 6, Metric.TOTAL).quantize(Decimal("0.01")) == Decimal("7.14")


def test_annual_growth_example_year():
    result = annual_growth(sample_timeline(), 2026, Metric.TOTAL)

    assert result.start_value == Decimal("2647172")
    assert result.end_value == Decimal("3232559.5")
    assert result.has_growth()
    assert result.growth.quantize(Decimal("0.01")) == Decimal("22.11")


def test_annual_growth_insufficient_data():
    empty = annual_growth([], 2026)
    assert empty.growth is None
    assert (empty.start_value, empty.end_value) == (Decimal("0"), Decimal("0"))

    single = annual_growth(local_cash_timeline((date(2026, 5, 1), "100")), 2026)
    assert single.growth is None
    assert single.start_value == Decimal("0")
    assert single.end_value == Decimal("100")

    # first year of data with a single snapshot has no baseline
    first_year = annual_growth(sample_timeline(), 2025)
    assert first_year.growth is None
    assert first_year.end_value == Decimal("2647172")


def test_annual_growth_year_without_points():
    result = annual_growth(sample_timeline(), 2027)

    assert result.growth is None
    assert result.end_value == Decimal("0")


def test_annual_growth_uses_first_point_without_prior_year():
    timeline = local_cash_timeline(
        (date(2025, 1, 10), "100"),
        (date(2025, 6, 1), "120"),
        (date(2025, 12, 31), "150"),
    )

    result = annual_growth(timeline, "2025")

    assert result.year == 2025
    assert result.start_value == Decimal("100")
    assert result.end_value == Decimal("150")
    assert result.growth == Decimal("50")


def test_annual_growth_prefers_prior_year_close():
    timeline = local_cash_timeline(
        (date(2024, 6, 1), "80"),
        (date(2024, 12, 31), "100"),
        (date(2025, 3, 1), "90"),
        (date(2025, 9, 1), "110"),
    )

    result = annual_growth(timeline, 2025)

    assert result.start_value == Decimal("100")
    assert result.end_value == Decimal("110")
    assert result.growth == Decimal("10")


def test_annual_growth_zero_baseline_still_reports_values():
    timeline = local_cash_timeline((date(2025, 12, 1), "0"), (date(2026, 2, 1), "100"))

    result = annual_growth(timeline, 2026)

    assert result.growth is None
    assert result.start_value == Decimal("0")
    assert result.end_value == Decimal("100")
