"""Tabular renderings of the timeline for display and export."""
from __future__ import annotations

import csv
import html
import io
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Sequence

import pandas as pd

from asset_tracker.config import SETTINGS
from asset_tracker.domain.models import AssetCategory, AssetRecord, TimelinePoint

TIMELINE_COLUMNS = ["date", "total", "investment"] + [category.value for category in AssetCategory]


def timeline_to_rows(points: Sequence[TimelinePoint]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for point in points:
        row = {
            "date": point.date.isoformat(),
            "total": str(point.total_value),
            "investment": str(point.investment_value),
        }
        for category in AssetCategory:
            row[category.value] = str(point.value_for(category))
        rows.append(row)
    return rows


def timeline_to_dataframe(points: Sequence[TimelinePoint]) -> pd.DataFrame:
    frame = pd.DataFrame(
        [
            {
                "date": pd.Timestamp(point.date),
                "total": float(point.total_value),
                "investment": float(point.investment_value),
                **{category.value: float(point.value_for(category)) for category in AssetCategory},
            }
            for point in points
        ],
        columns=TIMELINE_COLUMNS,
    )
    return frame


def records_to_dataframe(records: Sequence[AssetRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "id": r.id,
                "date": r.date,
                "category": r.category.label,
                "amount": float(r.amount),
                "fx_rate": float(r.fx_rate),
                "value": float(r.value),
                "note": r.note,
            }
            for r in records
        ],
        columns=["id", "date", "category", "amount", "fx_rate", "value", "note"],
    )


def allocation_rows(allocation: Mapping[AssetCategory, Decimal]) -> list[dict[str, object]]:
    """Pie-chart slices; empty categories are left out."""
    return [
        {"category": category.value, "label": category.label, "value": float(value)}
        for category, value in allocation.items()
        if value > 0
    ]


def render_csv(points: Sequence[TimelinePoint]) -> bytes:
    rows = timeline_to_rows(points)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TIMELINE_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(points: Sequence[TimelinePoint]) -> str:
    rows = timeline_to_rows(points)
    if not rows:
        return "<p>No asset records yet.</p>"
    header = "".join(f"<th>{col}</th>" for col in TIMELINE_COLUMNS)
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{html.escape(row[col])}</td>" for col in TIMELINE_COLUMNS) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def render_xlsx(points: Sequence[TimelinePoint]) -> bytes:
    frame = timeline_to_dataframe(points)
    if not frame.empty:
        frame["date"] = frame["date"].dt.date
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name="Timeline", index=False)
    return buffer.getvalue()


def format_currency(value: Decimal | int | float, symbol: str | None = None) -> str:
    symbol = SETTINGS.currency_symbol if symbol is None else symbol
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,}"


def format_growth(value: Decimal | None, digits: int = 2) -> str:
    if value is None:
        return "n/a"
    quantum = Decimal(1).scaleb(-digits)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "+" if rounded > 0 else ""
    return f"{sign}{rounded}%"
