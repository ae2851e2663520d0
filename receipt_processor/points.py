"""Point rules for validated receipts.

Each rule returns a non-negative contribution; a receipt's score is their sum.
Callers must run ``validation.validate`` first: a field that fails to parse
here raises ``ValueError`` instead of scoring as zero.
"""

import math
import re

from receipt_processor.schemas import ItemIn, ReceiptIn

NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]+")
NON_DIGIT_RE = re.compile(r"[^0-9]+")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DATE_POINTS = 6
AFTERNOON_POINTS = 10
# HHMM, both bounds exclusive
AFTERNOON_START = 1400
AFTERNOON_END = 1600


def _digits(value: str) -> int:
    return int(NON_DIGIT_RE.sub("", value))


def retailer_points(retailer: str) -> int:
    return len(NON_ALNUM_RE.sub("", retailer))


def total_points(total: str) -> int:
    amount = float(total)
    points = 0
    if amount == math.trunc(amount):
        points += ROUND_DOLLAR_POINTS
    quarters = amount * 4
    # Anything large enough for quarters to overflow is already a whole number
    if math.isinf(quarters) or amount == math.trunc(quarters) / 4:
        points += QUARTER_MULTIPLE_POINTS
    return points


def item_count_points(items: list[ItemIn]) -> int:
    return (len(items) // 2) * ITEM_PAIR_POINTS


def item_description_points(items: list[ItemIn]) -> int:
    """Points for items whose space-trimmed description is a multiple of 3 bytes long.

    Length is measured in UTF-8 bytes, so "Crème" counts as 6.
    """
    points = 0
    for item in items:
        description = item.short_description.strip(" ")
        if len(description.encode("utf-8")) % DESCRIPTION_LENGTH_FACTOR == 0:
            points += math.ceil(float(item.price) * DESCRIPTION_PRICE_MULTIPLIER)
    return points


def purchase_date_points(purchase_date: str) -> int:
    # Parity of the whole YYYYMMDD number, not of the day component alone
    if _digits(purchase_date) % 2 != 0:
        return ODD_DATE_POINTS
    return 0


def purchase_time_points(purchase_time: str) -> int:
    if AFTERNOON_START < _digits(purchase_time) < AFTERNOON_END:
        return AFTERNOON_POINTS
    return 0


def points_breakdown(receipt: ReceiptIn) -> dict[str, int]:
    """Return each rule's contribution keyed by rule name."""
    items = receipt.items or []
    return {
        "retailer": retailer_points(receipt.retailer),
        "total": total_points(receipt.total),
        "item_count": item_count_points(items),
        "item_descriptions": item_description_points(items),
        "purchase_date": purchase_date_points(receipt.purchase_date),
        "purchase_time": purchase_time_points(receipt.purchase_time),
    }


def score(receipt: ReceiptIn) -> int:
    return sum(points_breakdown(receipt).values())
