"""Interest rate tiers from a loan plan.

Gold-loan plans step the annual rate up as the loan ages. A plan carries a
rate for the first three months, the plan rate for months three to six and a
six-month rate; past twelve months the loan's active rate applies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List

from dateutil.relativedelta import relativedelta

from interest import CENT, ZERO, daily_rate
from loan_snapshot import RELEASE_KEYS, parse_date, record_rate

DISPLAY_PLACES = Decimal("0.00001")
MONTHS_IN_YEAR = Decimal("12")


@dataclass
class RateTier:
    period: str
    annual_rate: Decimal
    monthly_rate: Decimal
    daily_rate: Decimal


def _decimal_or(value, fallback: Decimal) -> Decimal:
    """Read a plan rate; blank, zero or non-numeric values use ``fallback``."""

    if value is None or value == "":
        return fallback
    try:
        rate = Decimal(str(value))
    except InvalidOperation:
        return fallback
    if not rate.is_finite() or rate == 0:
        return fallback
    return rate


def _tier(period: str, annual: Decimal) -> RateTier:
    return RateTier(
        period=period,
        annual_rate=annual,
        monthly_rate=(annual / MONTHS_IN_YEAR).quantize(CENT, rounding=ROUND_HALF_UP),
        daily_rate=daily_rate(annual).quantize(DISPLAY_PLACES, rounding=ROUND_HALF_UP),
    )


def rate_schedule(record: dict) -> List[RateTier]:
    """Return the four rate tiers that apply to ``record``."""

    active = record_rate(record)
    if not record.get("lplan_month"):
        return [
            _tier(period, active)
            for period in ("0-3 months", "3-6 months", "6-12 months", "Over 12 months")
        ]

    months = int(record["lplan_month"])
    first = _decimal_or(
        record.get("lplan_interest_3m"),
        _decimal_or(record.get("interest_rate"), active),
    )
    return [
        _tier(f"0-{min(3, months)} months", first),
        _tier("3-6 months", _decimal_or(record.get("lplan_interest"), active)),
        _tier("6-12 months", _decimal_or(record.get("lplan_interest_6m"), active)),
        _tier("Over 12 months", active),
    ]


def loan_age_months(record: dict, as_of: date | None = None) -> int:
    """Whole months since the loan was released, or 0 without a release date."""

    if as_of is None:
        as_of = date.today()
    for key in RELEASE_KEYS:
        released = parse_date(record.get(key), key)
        if released is not None:
            age = relativedelta(as_of, released)
            return max(0, age.years * 12 + age.months)
    return 0


def rate_for_age(record: dict, as_of: date | None = None) -> Decimal:
    """Annual rate of the tier matching the loan's current age."""

    tiers = rate_schedule(record)
    months = loan_age_months(record, as_of)
    if months < 3:
        tier = tiers[0]
    elif months < 6:
        tier = tiers[1]
    elif months < 12:
        tier = tiers[2]
    else:
        tier = tiers[3]
    return max(ZERO, tier.annual_rate)
