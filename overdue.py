"""Repayment-cycle status for active loans.

Payments fall due every ``REPAYMENT_CYCLE_DAYS`` days after the last
payment. Loans past the cycle are grouped into age buckets for filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from loan_snapshot import DAYS_KEYS

REPAYMENT_CYCLE_DAYS = 30
SEVERE_OVERDUE_DAYS = 120

BUCKETS = (
    ("current", 30),
    ("overdue_1_3", 90),
    ("overdue_3_6", 180),
    ("overdue_6_12", 365),
)
ABOVE_12 = "overdue_above_12"
BUCKET_NAMES = tuple(name for name, _ in BUCKETS) + (ABOVE_12,)


@dataclass
class OverdueStatus:
    label: str
    severity: str  # "success", "warning" or "error"


def _days(value) -> int:
    if value is None:
        return 0
    return max(0, int(value))


def overdue_status(
    days_since_last_payment, cycle_days: int = REPAYMENT_CYCLE_DAYS
) -> OverdueStatus:
    """Return the label and severity shown next to an active loan."""

    days = _days(days_since_last_payment)
    if days < cycle_days:
        return OverdueStatus(f"Due in {cycle_days - days}d", "success")
    if days == cycle_days:
        return OverdueStatus("Due Today", "warning")
    severity = "warning" if days <= SEVERE_OVERDUE_DAYS else "error"
    return OverdueStatus(f"{days - cycle_days}d Overdue", severity)


def overdue_bucket(days_since_last_payment) -> str:
    """Return the age bucket for a loan's days since last payment."""

    days = _days(days_since_last_payment)
    for name, upper in BUCKETS:
        if days <= upper:
            return name
    return ABOVE_12


def bucket_counts(records: Iterable[dict]) -> Dict[str, int]:
    """Count loan ``records`` per age bucket."""

    counts = {name: 0 for name in BUCKET_NAMES}
    for record in records:
        days = next((record[k] for k in DAYS_KEYS if record.get(k) is not None), 0)
        counts[overdue_bucket(days)] += 1
    return counts
