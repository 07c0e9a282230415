"""Aggregation over the contribution ledger."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .models import ContributionRecord, Contributor


def total_contributions(records: Iterable[ContributionRecord], person: Contributor | str) -> Decimal:
    person = Contributor(person)
    return sum((record.amount for record in records if record.person is person), Decimal("0"))


def contributions_by_person(records: Iterable[ContributionRecord]) -> dict[Contributor, Decimal]:
    totals = {person: Decimal("0") for person in Contributor}
    for record in records:
        totals[record.person] += record.amount
    return totals
