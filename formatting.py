"""Currency and date display helpers."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from dateutil import parser as date_parser

RUPEE = "₹"


def _group_indian(digits: str) -> str:
    """Group digits the en-IN way: last three, then pairs (1,23,45,678)."""

    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount) -> str:
    """Format ``amount`` as whole Indian Rupees, e.g. ``₹1,23,457``."""

    value = Decimal(str(amount if amount is not None else 0))
    if value.is_nan():
        return f"{RUPEE}NaN"
    if value.is_infinite():
        return f"{'-' if value < 0 else ''}{RUPEE}∞"
    rounded = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{RUPEE}{_group_indian(str(abs(int(rounded))))}"


def _to_datetime(value) -> Optional[datetime]:
    """Read a datetime, date, millisecond timestamp or date string.

    Returns ``None`` when ``value`` is empty or cannot be parsed.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000)
        if isinstance(value, str):
            return date_parser.parse(value)
    except (ValueError, OverflowError, OSError):
        return None
    return None


def format_date_ddmmyyyy(value) -> str:
    """Format a timestamp as ``DD/MM/YYYY HH:MM:SS``.

    Strings that cannot be read as a date are returned unchanged.
    """

    moment = _to_datetime(value)
    if moment is None:
        if isinstance(value, str) and value:
            return value
        return "-"
    return moment.strftime("%d/%m/%Y %H:%M:%S")


def format_date(value, include_time: bool = True) -> str:
    """Format a date as ``MM/DD/YYYY``, optionally with a 12-hour time.

    Returns ``-`` for anything that cannot be read as a date.
    """

    moment = _to_datetime(value)
    if moment is None:
        return "-"
    if include_time:
        return moment.strftime("%m/%d/%Y, %I:%M:%S %p")
    return moment.strftime("%m/%d/%Y")
