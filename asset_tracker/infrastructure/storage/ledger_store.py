"""JSON-file storage for the asset and contribution ledgers."""
from __future__ import annotations

import json
import logging
import uuid
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Sequence

from asset_tracker.config import SETTINGS, Settings
from asset_tracker.domain.errors import InvalidRecordError, LedgerStorageError, RecordNotFoundError
from asset_tracker.domain.models import AssetCategory, AssetRecord, ContributionRecord, Contributor
from asset_tracker.domain.validation import validate_asset_record, validate_contribution_record
from asset_tracker.infrastructure.parsing.utils import (
    parse_category,
    parse_contributor,
    parse_date,
    parse_decimal,
)
from asset_tracker.infrastructure.storage.sample_data import SAMPLE_ASSETS, SAMPLE_CONTRIBUTIONS

logger = logging.getLogger(__name__)

ASSET_KEYS = ("assets", "inv_assets")
CONTRIBUTION_KEYS = ("contributions", "inv_contributions")


def asset_to_dict(record: AssetRecord) -> dict[str, str]:
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "category": record.category.value,
        "amount": str(record.amount),
        "fx_rate": str(record.fx_rate),
        "note": record.note,
    }


def asset_from_dict(raw: dict[str, Any]) -> AssetRecord:
    category = parse_category(raw.get("category", raw.get("type")))
    fx_rate = raw.get("fx_rate", raw.get("exchangeRate", 1))
    record = AssetRecord(
        id=str(raw["id"]),
        date=parse_date(raw.get("date")),
        category=category,
        amount=parse_decimal(raw.get("amount")),
        fx_rate=parse_decimal(fx_rate, "exchange rate") if category.is_foreign else Decimal("1"),
        note=str(raw.get("note") or ""),
    )
    return validate_asset_record(record)


def contribution_to_dict(record: ContributionRecord) -> dict[str, str]:
    return {
        "id": record.id,
        "person": record.person.value,
        "date": record.date.isoformat(),
        "amount": str(record.amount),
    }


def contribution_from_dict(raw: dict[str, Any]) -> ContributionRecord:
    record = ContributionRecord(
        id=str(raw["id"]),
        person=parse_contributor(raw.get("person")),
        date=parse_date(raw.get("date")),
        amount=parse_decimal(raw.get("amount")),
    )
    return validate_contribution_record(record)


def _first_present(data: dict[str, Any], keys: Sequence[str]) -> list[Any]:
    for key in keys:
        if key in data:
            return list(data[key] or [])
    return []


class JsonLedgerStore:
    """Owns both ledgers and writes them through to a single JSON document.

    Records are validated before they are stored, so anything handed out by
    ``list_asset_records`` can go straight into the timeline functions.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        seed_if_missing: bool = False,
        settings: Settings = SETTINGS,
    ) -> None:
        self._path = Path(path) if path is not None else settings.ledger_path
        self._settings = settings
        self._assets: list[AssetRecord] = []
        self._contributions: list[ContributionRecord] = []
        self._load(seed_if_missing)

    @property
    def path(self) -> Path:
        return self._path

    # -- reads ---------------------------------------------------------------

    def list_asset_records(self) -> Sequence[AssetRecord]:
        return tuple(self._assets)

    def list_contribution_records(self) -> Sequence[ContributionRecord]:
        return tuple(self._contributions)

    def list_asset_history(self) -> list[AssetRecord]:
        """Asset records newest first, as shown in the history table."""
        return sorted(self._assets, key=lambda record: (record.date, record.id), reverse=True)

    def get_asset(self, record_id: str) -> AssetRecord:
        return self._assets[self._asset_index(record_id)]

    # -- writes --------------------------------------------------------------

    def add_asset(
        self,
        record_date: date | str,
        category: AssetCategory | str,
        amount: Decimal | str | float,
        fx_rate: Decimal | str | float | None = None,
        note: str = "",
    ) -> AssetRecord:
        category = parse_category(category)
        record = AssetRecord(
            id=self._new_id({record.id for record in self._assets}),
            date=parse_date(record_date),
            category=category,
            amount=parse_decimal(amount),
            fx_rate=self._effective_fx_rate(category, fx_rate),
            note=note or "",
        )
        validate_asset_record(record)
        self._commit(assets=[*self._assets, record])
        logger.info("Added %s snapshot %s dated %s", record.category.value, record.id, record.date)
        return record

    def update_asset(
        self,
        record_id: str,
        record_date: date | str | None = None,
        category: AssetCategory | str | None = None,
        amount: Decimal | str | float | None = None,
        fx_rate: Decimal | str | float | None = None,
        note: str | None = None,
    ) -> AssetRecord:
        index = self._asset_index(record_id)
        current = self._assets[index]
        new_category = parse_category(category) if category is not None else current.category
        if fx_rate is None and new_category.is_foreign and current.category.is_foreign:
            fx_rate = current.fx_rate
        updated = current.replace(
            date=parse_date(record_date) if record_date is not None else current.date,
            category=new_category,
            amount=parse_decimal(amount) if amount is not None else current.amount,
            fx_rate=self._effective_fx_rate(new_category, fx_rate),
            note=note if note is not None else current.note,
        )
        validate_asset_record(updated)
        assets = list(self._assets)
        assets[index] = updated
        self._commit(assets=assets)
        logger.info("Updated asset snapshot %s", record_id)
        return updated

    def delete_asset(self, record_id: str) -> None:
        assets = list(self._assets)
        del assets[self._asset_index(record_id)]
        self._commit(assets=assets)
        logger.info("Deleted asset snapshot %s", record_id)

    def add_contribution(
        self,
        person: Contributor | str,
        record_date: date | str,
        amount: Decimal | str | float,
    ) -> ContributionRecord:
        record = ContributionRecord(
            id=self._new_id({record.id for record in self._contributions}),
            person=parse_contributor(person),
            date=parse_date(record_date),
            amount=parse_decimal(amount),
        )
        validate_contribution_record(record)
        self._commit(contributions=[*self._contributions, record])
        logger.info("Added contribution %s by %s", record.id, record.person.value)
        return record

    def delete_contribution(self, record_id: str) -> None:
        for index, record in enumerate(self._contributions):
            if record.id == record_id:
                self._commit(contributions=self._contributions[:index] + self._contributions[index + 1 :])
                logger.info("Deleted contribution %s", record_id)
                return
        raise RecordNotFoundError(record_id)

    # -- internals -----------------------------------------------------------

    def _effective_fx_rate(
        self,
        category: AssetCategory,
        fx_rate: Decimal | str | float | None,
    ) -> Decimal:
        if not category.is_foreign:
            return Decimal("1")
        if fx_rate is None:
            return self._settings.default_fx_rate
        return parse_decimal(fx_rate, "exchange rate")

    def _asset_index(self, record_id: str) -> int:
        for index, record in enumerate(self._assets):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(record_id)

    @staticmethod
    def _new_id(taken: set[str]) -> str:
        while True:
            candidate = uuid.uuid4().hex[:9]
            if candidate not in taken:
                return candidate

    def _load(self, seed_if_missing: bool) -> None:
        if not self._path.exists():
            if seed_if_missing:
                self._commit(assets=list(SAMPLE_ASSETS), contributions=list(SAMPLE_CONTRIBUTIONS))
                logger.info("Seeded new ledger at %s", self._path)
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read ledger %s: %s", self._path, exc)
            raise LedgerStorageError(f"Could not read ledger {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise LedgerStorageError(f"Ledger {self._path} must hold a JSON object")
        try:
            self._assets = [asset_from_dict(raw) for raw in _first_present(data, ASSET_KEYS)]
            self._contributions = [
                contribution_from_dict(raw) for raw in _first_present(data, CONTRIBUTION_KEYS)
            ]
        except (InvalidRecordError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Malformed record in ledger %s: %s", self._path, exc)
            raise LedgerStorageError(f"Malformed record in ledger {self._path}: {exc}") from exc
        logger.debug(
            "Loaded %d asset and %d contribution records from %s",
            len(self._assets),
            len(self._contributions),
            self._path,
        )

    def _commit(
        self,
        assets: list[AssetRecord] | None = None,
        contributions: list[ContributionRecord] | None = None,
    ) -> None:
        """Write the given ledgers and only then make them the in-memory state."""
        if assets is None:
            assets = self._assets
        if contributions is None:
            contributions = self._contributions
        payload = {
            "assets": [asset_to_dict(record) for record in assets],
            "contributions": [contribution_to_dict(record) for record in contributions],
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write ledger %s: %s", self._path, exc)
            raise LedgerStorageError(f"Could not write ledger {self._path}: {exc}") from exc
        self._assets = assets
        self._contributions = contributions
