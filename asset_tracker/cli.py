"""Command-line entrypoint for the asset tracker."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from asset_tracker.application.dto import DashboardRequest
from asset_tracker.application.use_cases import BuildDashboardUseCase, DashboardContext
from asset_tracker.domain.errors import LedgerStorageError
from asset_tracker.domain.models import AssetCategory, Contributor, Metric, Period
from asset_tracker.domain.timeline import build_timeline
from asset_tracker.infrastructure.storage.ledger_store import JsonLedgerStore
from asset_tracker.presentation.report import (
    format_currency,
    format_growth,
    render_csv,
    render_html,
    render_xlsx,
)

EXPORTERS = {
    "csv": render_csv,
    "html": render_html,
    "xlsx": render_xlsx,
}


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="asset-tracker", description="Track asset snapshots and contributions")
    parser.add_argument("--data-file", type=Path, help="Ledger JSON file (defaults to ASSET_TRACKER_DATA_FILE or data/ledger.json)")
    parser.add_argument("--seed", action="store_true", help="Start a missing ledger from the sample records")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    commands = parser.add_subparsers(dest="command", required=True)

    summary = commands.add_parser("summary", help="Print the dashboard")
    summary.add_argument("--period", choices=[p.value for p in Period], default=Period.ALL.value)
    summary.add_argument("--metric", choices=[m.value for m in Metric], default=Metric.TOTAL.value)
    summary.add_argument("--year", type=int, help="Calendar year for annual growth (default: current year)")
    summary.add_argument("--as-of", type=str, help="Reference date YYYY-MM-DD (default: today)")

    add_asset = commands.add_parser("add-asset", help="Record an asset snapshot")
    add_asset.add_argument("date", type=str)
    add_asset.add_argument("category", choices=[c.value for c in AssetCategory])
    add_asset.add_argument("amount", type=str)
    add_asset.add_argument("--fx-rate", type=str, help="Rate to the home currency (foreign categories only)")
    add_asset.add_argument("--note", type=str, default="")

    add_contribution = commands.add_parser("add-contribution", help="Record a capital contribution")
    add_contribution.add_argument("person", choices=[p.value for p in Contributor])
    add_contribution.add_argument("date", type=str)
    add_contribution.add_argument("amount", type=str)

    export = commands.add_parser("export", help="Export the timeline")
    export.add_argument("format", choices=sorted(EXPORTERS))
    export.add_argument("output", type=Path)
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def print_summary(store: JsonLedgerStore, args: argparse.Namespace) -> None:
    request = DashboardRequest(
        period=Period(args.period),
        metric=Metric(args.metric),
        year=args.year,
        reference_date=date.fromisoformat(args.as_of) if args.as_of else None,
    )
    snapshot = BuildDashboardUseCase(DashboardContext(repository=store)).execute(request)

    print("Asset Summary")
    print("=============")
    print(f"Total assets: {format_currency(snapshot.total_assets)}")
    for category, value in snapshot.allocation.items():
        print(f"  {category.label}: {format_currency(value)}")
    for person, amount in snapshot.contributions.items():
        print(f"Contributed by {person.value}: {format_currency(amount)}")

    print(f"\nTimeline ({snapshot.metric.value}, period {args.period})")
    if not snapshot.visible_timeline:
        print("  No records in this period.")
    for point in snapshot.visible_timeline:
        print(f"  {point.date.isoformat()}  {format_currency(snapshot.metric.of(point))}")

    print("\nTrailing growth")
    for months, growth in snapshot.trailing.items():
        print(f"  {months:>2}m: {format_growth(growth, digits=1)}")

    annual = snapshot.annual
    if annual.has_growth():
        print(
            f"\n{annual.year} growth: {format_growth(annual.growth)} "
            f"({format_currency(annual.start_value)} -> {format_currency(annual.end_value)})"
        )
    else:
        print(f"\n{annual.year} growth: not enough data")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    try:
        store = JsonLedgerStore(args.data_file, seed_if_missing=args.seed)
        if args.command == "summary":
            print_summary(store, args)
        elif args.command == "add-asset":
            record = store.add_asset(args.date, args.category, args.amount, fx_rate=args.fx_rate, note=args.note)
            print(f"Added {record.category.label} snapshot {record.id}: {format_currency(record.value)}")
        elif args.command == "add-contribution":
            record = store.add_contribution(args.person, args.date, args.amount)
            print(f"Added contribution {record.id} by {record.person.value}: {format_currency(record.amount)}")
        elif args.command == "export":
            content = EXPORTERS[args.format](build_timeline(store.list_asset_records()))
            if isinstance(content, str):
                args.output.write_text(content, encoding="utf-8")
            else:
                args.output.write_bytes(content)
            print(f"Wrote {args.output}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (LedgerStorageError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
