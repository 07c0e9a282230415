from datetime import date
from decimal import Decimal

from asset_tracker.domain.contributions import contributions_by_person, total_contributions
from asset_tracker.domain.models import ContributionRecord, Contributor


def make_contribution(record_id: str, person: Contributor, amount: str) -> ContributionRecord:
    return ContributionRecord(id=record_id, person=person, date=date(2026, 12, 31), amount=Decimal(amount))


def test_total_sums_only_matching_person():
    records = [
        make_contribution("1", Contributor.A_HUI, "350000"),
        make_contribution("2", Contributor.A_RU, "120000"),
        make_contribution("3", Contributor.A_HUI, "50000"),
    ]

    assert total_contributions(records, Contributor.A_HUI) == Decimal("400000")
    assert total_contributions(records, "A_Ru") == Decimal("120000")


def test_person_without_records_totals_zero():
    records = [make_contribution("1", Contributor.A_HUI, "350000")]

    assert total_contributions(records, Contributor.A_RU) == Decimal("0")
    assert total_contributions([], Contributor.A_HUI) == Decimal("0")


def test_by_person_lists_every_contributor():
    records = [make_contribution("1", Contributor.A_HUI, "350000")]

    assert contributions_by_person(records) == {
        Contributor.A_RU: Decimal("0"),
        Contributor.A_HUI: Decimal("350000"),
    }
