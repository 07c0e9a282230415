"""Domain models for the asset tracker.

Asset and contribution records are the persisted ledger entries; timeline
points are derived from the asset ledger on demand and never stored.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Mapping


class AssetCategory(str, Enum):
    LOCAL_EQUITY = "local_equity"
    FOREIGN_EQUITY = "foreign_equity"
    LOCAL_CASH = "local_cash"
    FOREIGN_CASH = "foreign_cash"

    @property
    def is_equity(self) -> bool:
        return self in EQUITY_CATEGORIES

    @property
    def is_foreign(self) -> bool:
        return self in FOREIGN_CATEGORIES

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


EQUITY_CATEGORIES = frozenset({AssetCategory.LOCAL_EQUITY, AssetCategory.FOREIGN_EQUITY})
CASH_CATEGORIES = frozenset({AssetCategory.LOCAL_CASH, AssetCategory.FOREIGN_CASH})
FOREIGN_CATEGORIES = frozenset({AssetCategory.FOREIGN_EQUITY, AssetCategory.FOREIGN_CASH})

CATEGORY_LABELS = {
    AssetCategory.LOCAL_EQUITY: "Local stocks",
    AssetCategory.FOREIGN_EQUITY: "Foreign stocks",
    AssetCategory.LOCAL_CASH: "Local cash",
    AssetCategory.FOREIGN_CASH: "Foreign cash",
}


class Contributor(str, Enum):
    A_RU = "A_Ru"
    A_HUI = "A_Hui"


@dataclass(frozen=True)
class AssetRecord:
    """Point-in-time holding of one asset category, in its native currency."""

    id: str
    date: date
    category: AssetCategory
    amount: Decimal
    fx_rate: Decimal = Decimal("1")
    note: str = ""

    @property
    def value(self) -> Decimal:
        """Holding converted to the home currency."""
        return self.amount * self.fx_rate

    def replace(self, **changes: object) -> "AssetRecord":
        if "id" in changes:
            raise TypeError("AssetRecord id cannot be replaced")
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ContributionRecord:
    """Capital put in by one contributor, in the home currency."""

    id: str
    person: Contributor
    date: date
    amount: Decimal


@dataclass(frozen=True)
class TimelinePoint:
    """Reconstructed valuation of the whole ledger as of one date."""

    date: date
    total_value: Decimal
    investment_value: Decimal
    by_category: Mapping[AssetCategory, Decimal] = field(default_factory=dict)

    @property
    def cash_value(self) -> Decimal:
        return sum((self.value_for(category) for category in CASH_CATEGORIES), Decimal("0"))

    def value_for(self, category: AssetCategory) -> Decimal:
        return self.by_category.get(category, Decimal("0"))


class Metric(str, Enum):
    TOTAL = "total"
    INVESTMENT = "investment"

    def of(self, point: TimelinePoint) -> Decimal:
        if self is Metric.INVESTMENT:
            return point.investment_value
        return point.total_value


class Period(str, Enum):
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"
    THREE_YEARS = "3y"
    ALL = "all"

    @property
    def months(self) -> int | None:
        return _PERIOD_MONTHS[self]


_PERIOD_MONTHS = {
    Period.ONE_MONTH: 1,
    Period.THREE_MONTHS: 3,
    Period.SIX_MONTHS: 6,
    Period.ONE_YEAR: 12,
    Period.THREE_YEARS: 36,
    Period.ALL: None,
}
