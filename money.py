from __future__ import annotations

import math
from typing import List, Optional, Tuple

INVALID_AMOUNT = -1


def _isDigits(part: str) -> bool:
    return part != "" and part.isascii() and part.isdigit()


def _priceParts(price: str) -> Optional[List[str]]:
    parts = price.split(".")
    if len(parts) != 2 or not _isDigits(parts[0]) or not _isDigits(parts[1]):
        return None
    return parts


def _toInt(part: str) -> int:
    # int() refuses very long digit strings on newer interpreters
    try:
        return int(part)
    except ValueError:
        return INVALID_AMOUNT


def splitPrice(price: str) -> Tuple[int, int]:
    """
    Split a price string such as "1.25" into whole dollars and cents.

    Args:
        price (str): The price string, expected in the form "D.CC".

    Returns:
        Tuple[int, int]: (dollars, cents), or (-1, -1) if the string does not
        split into exactly two non-empty numeric parts around a single period.
        A part too long to convert is -1 on its own.
    """
    return getDollars(price), getCents(price)


def getDollars(price: str) -> int:
    """Returns the dollars before the period in a price string, or -1."""
    parts = _priceParts(price)
    if parts is None:
        return INVALID_AMOUNT
    return _toInt(parts[0])


def getCents(price: str) -> int:
    """Returns the cents after the period in a price string, or -1."""
    parts = _priceParts(price)
    if parts is None:
        return INVALID_AMOUNT
    return _toInt(parts[1])


def parseAmount(value: str) -> Optional[float]:
    """
    Parse an amount as a float for rules that work on the numeric value.

    Returns None when the value is not a number or is not finite.
    """
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount
