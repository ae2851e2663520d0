"""Checks that gate which receipts may be scored.

Every check is independent. A receipt is valid only when
``validation_errors`` finds nothing; nothing in here raises for bad input.
"""

import math
import re
from datetime import datetime

from receipt_processor.schemas import ItemIn, ReceiptIn

DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_RE = re.compile(r"\d{1,2}:\d{2}", re.ASCII)
AMOUNT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def parse_amount(value: str) -> float | None:
    """Parse a decimal money string, or return None if it isn't one."""
    if not AMOUNT_RE.fullmatch(value):
        return None
    amount = float(value)
    # Digit strings too long for a double overflow to inf
    if not math.isfinite(amount):
        return None
    return amount


def is_valid_date(value: str) -> bool:
    if not DATE_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_time(value: str) -> bool:
    if not TIME_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, TIME_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_amount(value: str) -> bool:
    amount = parse_amount(value)
    return amount is not None and amount >= 0


def _item_errors(index: int, item: ItemIn) -> list[str]:
    errors: list[str] = []
    if item.short_description == "":
        errors.append(f"items[{index}].shortDescription is required")
    if item.price == "":
        errors.append(f"items[{index}].price is required")
    elif not is_valid_amount(item.price):
        errors.append(f"items[{index}].price must be a non-negative decimal")
    return errors


def validation_errors(receipt: ReceiptIn) -> list[str]:
    """Return every reason the receipt can't be scored (empty when valid)."""
    errors: list[str] = []

    if receipt.retailer == "":
        errors.append("retailer is required")

    if receipt.purchase_date == "":
        errors.append("purchaseDate is required")
    elif not is_valid_date(receipt.purchase_date):
        errors.append("purchaseDate must be a date in YYYY-MM-DD form")

    if receipt.purchase_time == "":
        errors.append("purchaseTime is required")
    elif not is_valid_time(receipt.purchase_time):
        errors.append("purchaseTime must be a time in HH:MM form")

    if receipt.total == "":
        errors.append("total is required")
    elif not is_valid_amount(receipt.total):
        errors.append("total must be a non-negative decimal")

    if not receipt.items:
        errors.append("items must contain at least one item")
    else:
        for i, item in enumerate(receipt.items):
            errors.extend(_item_errors(i, item))

    return errors


def validate(receipt: ReceiptIn) -> bool:
    return not validation_errors(receipt)
