"""Simple-interest accrual used to preview loan interest.

The figures produced here are estimates shown before the backend posts the
authoritative amount to the ledger. Interest accrues daily on the principal
outstanding at ``annual_rate / 100 / 365`` and is never charged for fewer
than ``MINIMUM_INTEREST_DAYS`` days.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

logger = logging.getLogger(__name__)

MINIMUM_INTEREST_DAYS = 15
DAYS_IN_YEAR = Decimal("365")
HUNDRED = Decimal("100")
RATE_BASIS = HUNDRED * DAYS_IN_YEAR
UNIT = Decimal("1")
CENT = Decimal("0.01")
ZERO = Decimal("0")


def _to_decimal(value) -> Decimal:
    """Convert ``value`` to ``Decimal`` the way money amounts are read in."""

    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    return Decimal(str(value))


def _non_negative(value: Decimal, name: str) -> Decimal:
    if value < 0:
        logger.debug("Negative %s %s treated as 0", name, value)
        return ZERO
    return value


def daily_rate(annual_rate_percent) -> Decimal:
    """Return the daily rate for an annual percentage rate."""

    rate = _to_decimal(annual_rate_percent)
    if rate.is_nan():
        return rate
    return _non_negative(rate, "rate") / RATE_BASIS


def accrue_interest(
    principal_outstanding,
    annual_rate_percent,
    elapsed_days,
    minimum_days: int = MINIMUM_INTEREST_DAYS,
) -> Decimal:
    """Return interest accrued on ``principal_outstanding`` after ``elapsed_days``.

    Negative principal or rate is treated as zero and fewer than
    ``minimum_days`` days are charged as ``minimum_days``. The result is
    rounded half-up to a whole currency unit and is never negative.

    The function never raises for numeric input: ``NaN`` (or an undefined
    product such as zero times infinity) comes back as ``Decimal("NaN")``.
    """

    principal = _to_decimal(principal_outstanding)
    rate = _to_decimal(annual_rate_percent)
    days = _to_decimal(elapsed_days)
    for value in (principal, rate, days):
        if value.is_nan():
            return Decimal("NaN")

    principal = _non_negative(principal, "principal")
    rate = _non_negative(rate, "rate")
    effective_days = max(days, Decimal(minimum_days))

    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        interest = principal * rate * effective_days / RATE_BASIS
        if not interest.is_finite():
            return interest
        interest = interest.quantize(UNIT, rounding=ROUND_HALF_UP)
    return max(ZERO, interest)


def daily_accrual(principal_outstanding, annual_rate_percent) -> Decimal:
    """One day of interest on the outstanding principal, to the cent."""

    principal = _to_decimal(principal_outstanding)
    rate = _to_decimal(annual_rate_percent)
    if principal.is_nan() or rate.is_nan():
        return Decimal("NaN")
    accrual = (
        _non_negative(principal, "principal") * _non_negative(rate, "rate") / RATE_BASIS
    )
    return accrual.quantize(CENT, rounding=ROUND_HALF_UP)


def advance_interest(
    principal_outstanding,
    annual_rate_percent,
    days: int = MINIMUM_INTEREST_DAYS,
) -> Decimal:
    """Interest collected up front for the first ``days`` days of a loan.

    This is the rounded daily accrual multiplied by ``days``, so it can differ
    by a few paise from ``accrue_interest`` over the same window.
    """

    accrual = daily_accrual(principal_outstanding, annual_rate_percent)
    if accrual.is_nan():
        return accrual
    return (accrual * days).quantize(CENT, rounding=ROUND_HALF_UP)
