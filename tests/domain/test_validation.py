from datetime import date
from decimal import Decimal

import pytest

from asset_tracker.domain.errors import InvalidRecordError
from asset_tracker.domain.models import AssetCategory, AssetRecord, ContributionRecord, Contributor
from asset_tracker.domain.validation import validate_asset_record, validate_contribution_record


def make_asset(**overrides) -> AssetRecord:
    fields = dict(
        id="x",
        date=date(2025, 1, 5),
        category=AssetCategory.FOREIGN_CASH,
        amount=Decimal("100"),
        fx_rate=Decimal("32.5"),
    )
    fields.update(overrides)
    return AssetRecord(**fields)


def test_valid_records_pass_through():
    record = make_asset()
    assert validate_asset_record(record) is record
    assert validate_asset_record(make_asset(amount=Decimal("0"))).amount == Decimal("0")


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": Decimal("-1")},
        {"fx_rate": Decimal("0")},
        {"amount": Decimal("NaN")},
        {"category": AssetCategory.LOCAL_CASH, "fx_rate": Decimal("30")},
        {"category": "bonds"},
    ],
)
def test_invalid_asset_records_are_rejected(overrides):
    with pytest.raises(InvalidRecordError):
        validate_asset_record(make_asset(**overrides))


def test_contribution_amount_must_be_positive():
    record = ContributionRecord(id="1", person=Contributor.A_RU, date=date(2025, 1, 1), amount=Decimal("0"))
    with pytest.raises(InvalidRecordError):
        validate_contribution_record(record)


def test_replace_keeps_id():
    record = make_asset()
    updated = record.replace(amount=Decimal("200"))

    assert updated.id == record.id
    assert updated.value == Decimal("6500.0")
    with pytest.raises(TypeError):
        record.replace(id="other")
