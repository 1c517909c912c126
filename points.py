from __future__ import annotations

import logging
import math
from datetime import time
from typing import Callable, List, Tuple

from config import CONFIG
from models import Receipt
from money import getCents, parseAmount

logger = logging.getLogger("ReceiptLogger")

ReceiptRule = Callable[[Receipt], int]

QUARTER = 0.25
DESCRIPTION_LENGTH_FACTOR = 3
TIME_BONUS_START = time(14, 0)
TIME_BONUS_END = time(16, 0)


def retailerRule(receipt: Receipt) -> int:
    """One point for every alphanumeric character in the retailer name."""
    count = sum(1 for c in receipt.retailer if c.isalnum())
    return count * CONFIG["retailerNameMultiplier"]


def totalRoundRule(receipt: Receipt) -> int:
    """Bonus if the total is a round dollar amount with no cents."""
    if getCents(receipt.total) == 0:
        return CONFIG["roundDollarBonus"]
    return 0


def totalMultipleRule(receipt: Receipt) -> int:
    """Bonus if the total is a multiple of 0.25."""
    total = parseAmount(receipt.total)
    if total is None:
        return 0
    if total >= QUARTER and math.fmod(total, QUARTER) == 0:
        return CONFIG["multipleOf025Bonus"]
    return 0


def numItemsRule(receipt: Receipt) -> int:
    """Points for every two items on the receipt."""
    return (len(receipt.items) // 2) * CONFIG["itemsBonusPerTwo"]


def itemDescriptionRule(receipt: Receipt) -> int:
    """
    For every item whose trimmed description length is a multiple of three,
    multiply the price by the description multiplier and round up to the
    nearest integer. Items with a price that is not a number are skipped.
    """
    points = 0
    for item in receipt.items:
        if len(item.shortDescription.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = parseAmount(item.price)
        if price is None:
            continue
        points += max(0, math.ceil(price * CONFIG["itemDescriptionMultiplier"]))
    return points


def purchaseDayRule(receipt: Receipt) -> int:
    """Bonus if the day in the purchase date is odd."""
    if receipt.purchaseDate is None:
        return 0
    if receipt.purchaseDate.day % 2 != 0:
        return CONFIG["oddDayBonus"]
    return 0


def purchaseTimeRule(receipt: Receipt) -> int:
    """Bonus if the time of purchase is after 2:00pm and before 4:00pm."""
    purchaseTime = receipt.purchaseTime
    if purchaseTime is None:
        return 0
    # Seconds are ignored, so 14:00 itself never qualifies.
    if TIME_BONUS_START < time(purchaseTime.hour, purchaseTime.minute) < TIME_BONUS_END:
        return CONFIG["timeBonus"]
    return 0


RECEIPT_RULES: Tuple[ReceiptRule, ...] = (
    retailerRule,
    totalRoundRule,
    totalMultipleRule,
    numItemsRule,
    itemDescriptionRule,
    purchaseDayRule,
    purchaseTimeRule,
)


def getReceiptRules() -> Tuple[ReceiptRule, ...]:
    """Returns all current receipt point rules in evaluation order."""
    return RECEIPT_RULES


def calculatePointsBreakdown(receipt: Receipt) -> List[Tuple[str, int]]:
    """
    Evaluate every rule against the receipt, in order.

    Args:
        receipt (Receipt): A receipt that has already passed validateReceipt.

    Returns:
        List[Tuple[str, int]]: (rule name, points earned) for each rule.
    """
    breakdown = []
    runningTotal = 0
    for rule in getReceiptRules():
        earned = rule(receipt)
        runningTotal += earned
        logger.debug("After %s: +%d (%d points)", rule.__name__, earned, runningTotal)
        breakdown.append((rule.__name__, earned))
    return breakdown


def calculatePoints(receipt: Receipt) -> int:
    """
    Calculate points based on the receipt data according to specific rules.
    Multiplier values are loaded from CONFIG.

    Args:
        receipt (Receipt): The receipt object containing the data to calculate points.

    Returns:
        int: The total points calculated based on the rules.
    """
    return sum(points for _, points in calculatePointsBreakdown(receipt))
