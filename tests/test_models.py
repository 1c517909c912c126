from __future__ import annotations

from datetime import date, time

import pytest

from errors import StructuralParseError
from models import (
    Receipt,
    formatPurchaseDate,
    formatPurchaseTime,
    parsePurchaseDate,
    parsePurchaseTime,
    parseReceipt,
)


def test_parse_receipt_converts_date_and_time(exampleOne):
    receipt = parseReceipt(exampleOne)

    assert receipt.retailer == "Target"
    assert receipt.purchaseDate == date(2022, 1, 1)
    assert receipt.purchaseTime == time(13, 1)
    assert len(receipt.items) == 5
    assert receipt.items[4].shortDescription == "   Klarbrunn 12-PK 12 FL OZ  "
    assert receipt.total == "35.35"


@pytest.mark.parametrize("raw", ["2022-01-01", "1999-10-13", "2024-02-29", "0001-12-31"])
def test_purchase_date_round_trip(raw):
    assert formatPurchaseDate(parsePurchaseDate(raw)) == raw


@pytest.mark.parametrize("raw", ["00:00", "08:13", "14:33", "23:59"])
def test_purchase_time_round_trip(raw):
    assert formatPurchaseTime(parsePurchaseTime(raw)) == raw


def test_dump_renders_canonical_date_and_time(exampleTwo):
    dumped = parseReceipt(exampleTwo).model_dump()

    assert dumped["purchaseDate"] == "2022-03-20"
    assert dumped["purchaseTime"] == "14:33"
    assert parseReceipt(dumped) == parseReceipt(exampleTwo)


@pytest.mark.parametrize(
    "purchaseDate",
    ["", "22-01-02", "2022-1-02", "2022-01-1", "2022_01_02", "2022-02-30", "2022-01-02T00:00", "２０２２-01-02"],
)
def test_malformed_purchase_date_is_structural_error(morningReceipt, purchaseDate):
    morningReceipt["purchaseDate"] = purchaseDate

    with pytest.raises(StructuralParseError) as excinfo:
        parseReceipt(morningReceipt)

    assert excinfo.value.field == "purchaseDate"
    assert excinfo.value.message == "purchaseDate must be in format YYYY-MM-DD"


@pytest.mark.parametrize("purchaseTime", ["", "100:13", "10:113", "10_11", "8:13", "24:00", "10:60"])
def test_malformed_purchase_time_is_structural_error(morningReceipt, purchaseTime):
    morningReceipt["purchaseTime"] = purchaseTime

    with pytest.raises(StructuralParseError) as excinfo:
        parseReceipt(morningReceipt)

    assert excinfo.value.field == "purchaseTime"
    assert excinfo.value.message == "purchaseTime must be in format HH:MM"


@pytest.mark.parametrize("value", [20220102, None, ["2022-01-02"]])
def test_non_string_purchase_date_is_structural_error(morningReceipt, value):
    morningReceipt["purchaseDate"] = value

    with pytest.raises(StructuralParseError, match="purchaseDate field must be a string"):
        parseReceipt(morningReceipt)


def test_non_string_purchase_time_is_structural_error(morningReceipt):
    morningReceipt["purchaseTime"] = 813

    with pytest.raises(StructuralParseError, match="purchaseTime field must be a string"):
        parseReceipt(morningReceipt)


@pytest.mark.parametrize("raw", [None, "receipt", [], [{"retailer": "Target"}]])
def test_non_object_input_is_structural_error(raw):
    with pytest.raises(StructuralParseError, match="must be a JSON object"):
        parseReceipt(raw)


def test_wrong_field_type_is_structural_error(morningReceipt):
    morningReceipt["items"] = "Pepsi"

    with pytest.raises(StructuralParseError) as excinfo:
        parseReceipt(morningReceipt)

    assert excinfo.value.field == "items"


def test_missing_fields_take_empty_defaults():
    receipt = parseReceipt({})

    assert receipt == Receipt()
    assert receipt.retailer == ""
    assert receipt.purchaseDate is None
    assert receipt.purchaseTime is None
    assert receipt.items == []
    assert receipt.total == ""


def test_receipt_accepts_date_and_time_values():
    receipt = Receipt(retailer="Target", purchaseDate=date(2022, 1, 2), purchaseTime=time(13, 13))

    assert receipt.purchaseDate == date(2022, 1, 2)
    assert receipt.purchaseTime == time(13, 13)
