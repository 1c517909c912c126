from __future__ import annotations

import re

from errors import ReceiptValidationError
from models import Receipt

RETAILER_PATTERN = re.compile(r"[\w\s\-&]+")
SHORT_DESCRIPTION_PATTERN = re.compile(r"[\w\s\-]+")
PRICE_PATTERN = re.compile(r"\d+\.\d{2}", re.ASCII)


def validateReceipt(receipt: Receipt) -> None:
    """
    Check that every field of a decoded receipt is in the expected format.

    purchaseDate and purchaseTime are already checked when the receipt is
    parsed, but they are checked again here for receipts built without
    going through parseReceipt.

    Args:
        receipt (Receipt): The receipt to validate.

    Raises:
        ReceiptValidationError: For the first rule the receipt violates.
    """
    if not RETAILER_PATTERN.fullmatch(receipt.retailer):
        raise ReceiptValidationError("invalid retailer format")

    if receipt.purchaseDate is None:
        raise ReceiptValidationError("invalid purchase date format")

    if receipt.purchaseTime is None:
        raise ReceiptValidationError("invalid purchase time format")

    if not PRICE_PATTERN.fullmatch(receipt.total):
        raise ReceiptValidationError("invalid total format")

    if len(receipt.items) == 0:
        raise ReceiptValidationError("there must be at least one item in receipt")

    for item in receipt.items:
        if not SHORT_DESCRIPTION_PATTERN.fullmatch(item.shortDescription):
            raise ReceiptValidationError("invalid item short description format")
        if not PRICE_PATTERN.fullmatch(item.price):
            raise ReceiptValidationError("invalid item price format")
