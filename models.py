from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from errors import StructuralParseError

DATE_LAYOUT = "%Y-%m-%d"
TIME_LAYOUT = "%H:%M"

_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_SHAPE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def parsePurchaseDate(raw: Any) -> date:
    """
    Parse a purchase date given exactly as YYYY-MM-DD.

    Args:
        raw (Any): The raw value taken from the request body.

    Returns:
        date: The parsed calendar date.

    Raises:
        ValueError: If the value is not a string or does not match the layout.
    """
    if not isinstance(raw, str):
        raise ValueError("purchaseDate field must be a string")
    if not _DATE_SHAPE.fullmatch(raw):
        raise ValueError("purchaseDate must be in format YYYY-MM-DD")
    try:
        return datetime.strptime(raw, DATE_LAYOUT).date()
    except ValueError:
        raise ValueError("purchaseDate must be in format YYYY-MM-DD") from None


def parsePurchaseTime(raw: Any) -> time:
    """
    Parse a purchase time given exactly as HH:MM (24-hour).

    Raises:
        ValueError: If the value is not a string or does not match the layout.
    """
    if not isinstance(raw, str):
        raise ValueError("purchaseTime field must be a string")
    if not _TIME_SHAPE.fullmatch(raw):
        raise ValueError("purchaseTime must be in format HH:MM")
    try:
        return datetime.strptime(raw, TIME_LAYOUT).time()
    except ValueError:
        raise ValueError("purchaseTime must be in format HH:MM") from None


def formatPurchaseDate(value: date) -> str:
    return value.isoformat()


def formatPurchaseTime(value: time) -> str:
    return value.strftime(TIME_LAYOUT)


class Item(BaseModel):
    """
    Represents an item in a receipt with a short description and price.

    Attributes:
        shortDescription (str): A short description of the product.
        price (str): The price paid for the item, as a decimal string such as "6.49".
    """
    shortDescription: str = Field(
        default="",
        description="The Short Product Description for the item.",
        examples=["Mountain Dew 12PK"],
    )
    price: str = Field(
        default="",
        description="The total price paid for this item.",
        examples=["6.49"],
    )


class Receipt(BaseModel):
    """
    Represents a receipt that contains details about the purchase including retailer name,
    purchase date and time, items, and total price.

    Fields missing from the input keep their empty defaults here and are
    rejected later by validateReceipt; only a present field of the wrong
    shape fails at parse time.

    Attributes:
        retailer (str): The name of the retailer or store where the receipt is from.
        purchaseDate (Optional[date]): The date the purchase was made.
        purchaseTime (Optional[time]): The time the purchase was made (in 24-hour format).
        items (List[Item]): A list of items included in the receipt.
        total (str): The total amount paid, formatted as a string representing a decimal number.
    """
    retailer: str = Field(
        default="",
        description="The name of the retailer or store the receipt is from.",
        examples=["M&M Corner Market"],
    )
    purchaseDate: Optional[date] = Field(
        default=None,
        description="The date of the purchase printed on the receipt.",
        examples=["2022-01-01"],
    )
    purchaseTime: Optional[time] = Field(
        default=None,
        description="The time of the purchase printed on the receipt. 24-hour time expected.",
        examples=["13:01"],
    )
    items: List[Item] = Field(default_factory=list)
    total: str = Field(
        default="",
        description="The total amount paid on the receipt.",
        examples=["6.49"],
    )

    @field_validator("purchaseDate", mode="before")
    @classmethod
    def decodePurchaseDate(cls, value: Any) -> date:
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        return parsePurchaseDate(value)

    @field_validator("purchaseTime", mode="before")
    @classmethod
    def decodePurchaseTime(cls, value: Any) -> time:
        if isinstance(value, time):
            return value
        return parsePurchaseTime(value)

    @field_serializer("purchaseDate")
    def encodePurchaseDate(self, value: Optional[date]) -> Optional[str]:
        return None if value is None else formatPurchaseDate(value)

    @field_serializer("purchaseTime")
    def encodePurchaseTime(self, value: Optional[time]) -> Optional[str]:
        return None if value is None else formatPurchaseTime(value)


class ReceiptIdResponse(BaseModel):
    """
    Represents the response for a processed receipt.

    Attributes:
        id (str): The identifier assigned to the stored receipt.
    """
    id: str


class PointsResponse(BaseModel):
    """
    Represents the response for points calculation based on a receipt.

    Attributes:
        points (int): The total points earned for a purchase based on the receipt.
    """
    points: int


class ErrorResponse(BaseModel):
    """
    Represents an error response when a request fails.

    Attributes:
        detail (str): The detail of the error message explaining what went wrong.
    """
    detail: str


def _describeError(error: Mapping[str, Any]) -> str:
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"


def parseReceipt(raw: Any) -> Receipt:
    """
    Decode a raw structured record (such as a parsed JSON object) into a Receipt.

    Args:
        raw (Any): The decoded request body.

    Returns:
        Receipt: The receipt with purchaseDate and purchaseTime converted.

    Raises:
        StructuralParseError: If the input is not an object, a field has the
            wrong type, or the date/time does not match its layout.
    """
    if not isinstance(raw, Mapping):
        raise StructuralParseError("receipt must be a JSON object")
    try:
        return Receipt.model_validate(dict(raw))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        raise StructuralParseError(_describeError(first), field=field) from exc
