"""Payment entry helpers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from interest import MINIMUM_INTEREST_DAYS, UNIT, ZERO, accrue_interest
from loan_snapshot import snapshot_from_record


def _amount(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    return Decimal(str(value))


def payment_total(actual_amount, interest_amount, reduction_amount=0) -> Decimal:
    """Return the amount collected for a payment, in whole units.

    The total is principal plus interest less any reduction, rounded half-up
    and never below zero.
    """

    total = _amount(actual_amount) + _amount(interest_amount) - _amount(reduction_amount)
    return max(ZERO, total.quantize(UNIT, rounding=ROUND_HALF_UP))


def suggested_payment(
    record: dict,
    as_of: date | None = None,
    minimum_days: int = MINIMUM_INTEREST_DAYS,
) -> dict:
    """Prefill values for a payment form from a loan ``record``."""

    snapshot = snapshot_from_record(record, as_of)
    return {
        "loan_id": record.get("loan_id") or record.get("loanId") or record.get("id"),
        "interest_amount": accrue_interest(
            snapshot.principal_outstanding,
            snapshot.annual_rate_percent,
            snapshot.elapsed_days,
            minimum_days=minimum_days,
        ),
        "principal_outstanding": snapshot.principal_outstanding,
    }
