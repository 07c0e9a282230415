"""Domain-level results for growth calculations."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AnnualGrowth:
    year: int
    growth: Decimal | None
    start_value: Decimal
    end_value: Decimal

    def has_growth(self) -> bool:
        return self.growth is not None
