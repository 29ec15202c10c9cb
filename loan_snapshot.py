"""Balance snapshots and interest previews for loan records.

Loan records arrive as dictionaries shaped like the backend's REST
responses. Field names have drifted between endpoints, so each value is read
from the first of several keys that is present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional

from dateutil import parser as date_parser

from interest import (
    CENT,
    MINIMUM_INTEREST_DAYS,
    ZERO,
    accrue_interest,
    advance_interest,
    daily_accrual,
)

logger = logging.getLogger(__name__)

DAYS_KEYS = ("days_overdue", "days_since_last_payment", "daysSinceLastPayment")
RATE_KEYS = ("active_interest_rate", "interest_rate", "activeInterestRate")
RELEASE_KEYS = ("date_released", "loan_release_date", "disbursed_date")


@dataclass
class LoanBalanceSnapshot:
    """Inputs to the interest estimate, recomputed on every render."""

    principal_outstanding: Decimal
    annual_rate_percent: Decimal
    elapsed_days: int


@dataclass
class LoanPreview:
    """Figures shown for a loan before the backend posts interest."""

    principal: Decimal
    interest: Decimal
    total_outstanding: Decimal
    daily_accrual: Decimal
    advance_interest: Decimal
    total_with_advance: Decimal


# ---------------------------------------------------------------------------
# Helpers


def parse_date(value: date | str | None, field: str = "date") -> Optional[date]:
    """Parse a ``date``, ``datetime`` or ISO/MySQL date string."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.parse(str(value)).date()
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc


def _amount(record: dict, key: str) -> Decimal:
    value = record.get(key)
    if value is None or value == "":
        return ZERO
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {key}: {value!r}") from exc


def _first_present(record: dict, keys: Iterable[str]):
    for key in keys:
        if record.get(key) is not None:
            return key
    return None


def _principal(record: dict) -> Decimal:
    if record.get("remaining_principal") is not None:
        principal = _amount(record, "remaining_principal")
    else:
        principal = _amount(record, "amount") - _amount(record, "total_principal_paid")
    return max(ZERO, principal)


def record_rate(record: dict) -> Decimal:
    """Active annual rate of ``record``, or 0 when none is set."""

    for key in RATE_KEYS:
        if record.get(key):
            return _amount(record, key)
    logger.warning("Loan %s has no interest rate", record.get("loan_id", "?"))
    return ZERO


def _elapsed_days(record: dict, as_of: date) -> int:
    key = _first_present(record, DAYS_KEYS)
    if key is not None:
        days = _amount(record, key)
        if not days.is_finite():
            raise ValueError(f"Invalid {key}: {record[key]!r}")
        return max(0, int(days))

    released = None
    release_key = next((k for k in RELEASE_KEYS if record.get(k)), None)
    if release_key is not None:
        released = parse_date(record[release_key], release_key)
    last_payment = parse_date(record.get("last_payment_date"), "last_payment_date")

    candidates = [d for d in (released, last_payment) if d is not None]
    if not candidates:
        return 0
    base = max(candidates)
    days = max(0, (as_of - base).days)
    logger.debug("Elapsed days for loan %s derived from %s: %d",
                 record.get("loan_id", "?"), base.isoformat(), days)
    return days


# ---------------------------------------------------------------------------
# Public API


def snapshot_from_record(record: dict, as_of: date | None = None) -> LoanBalanceSnapshot:
    """Build a :class:`LoanBalanceSnapshot` from a backend loan record.

    Raises ``ValueError`` if an amount or date field cannot be read.
    """

    if as_of is None:
        as_of = date.today()
    return LoanBalanceSnapshot(
        principal_outstanding=_principal(record),
        annual_rate_percent=record_rate(record),
        elapsed_days=_elapsed_days(record, as_of),
    )


def preview_loan(
    snapshot: LoanBalanceSnapshot, minimum_days: int = MINIMUM_INTEREST_DAYS
) -> LoanPreview:
    """Return the preview figures for ``snapshot``."""

    principal = snapshot.principal_outstanding
    rate = snapshot.annual_rate_percent
    interest = accrue_interest(
        principal, rate, snapshot.elapsed_days, minimum_days=minimum_days
    )
    advance = advance_interest(principal, rate, days=minimum_days)
    return LoanPreview(
        principal=principal,
        interest=interest,
        total_outstanding=principal + interest,
        daily_accrual=daily_accrual(principal, rate),
        advance_interest=advance,
        total_with_advance=(principal + advance).quantize(CENT, rounding=ROUND_HALF_UP),
    )
