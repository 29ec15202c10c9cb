import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from overdue import OverdueStatus, bucket_counts, overdue_bucket, overdue_status


def test_due_within_cycle():
    assert overdue_status(0) == OverdueStatus("Due in 30d", "success")
    assert overdue_status(29) == OverdueStatus("Due in 1d", "success")
    assert overdue_status(None) == OverdueStatus("Due in 30d", "success")
    assert overdue_status(-5) == OverdueStatus("Due in 30d", "success")


def test_due_today():
    assert overdue_status(30) == OverdueStatus("Due Today", "warning")


def test_overdue_severity():
    assert overdue_status(31) == OverdueStatus("1d Overdue", "warning")
    assert overdue_status(120) == OverdueStatus("90d Overdue", "warning")
    assert overdue_status(121) == OverdueStatus("91d Overdue", "error")


def test_custom_cycle():
    assert overdue_status(20, cycle_days=15) == OverdueStatus("5d Overdue", "warning")


def test_bucket_edges():
    cases = {
        0: "current",
        30: "current",
        31: "overdue_1_3",
        90: "overdue_1_3",
        91: "overdue_3_6",
        180: "overdue_3_6",
        181: "overdue_6_12",
        365: "overdue_6_12",
        366: "overdue_above_12",
    }
    for days, bucket in cases.items():
        assert overdue_bucket(days) == bucket


def test_bucket_counts_include_every_bucket():
    records = [
        {"days_since_last_payment": 10},
        {"days_overdue": 45},
        {"daysSinceLastPayment": 400},
        {},
    ]
    assert bucket_counts(records) == {
        "current": 2,
        "overdue_1_3": 1,
        "overdue_3_6": 0,
        "overdue_6_12": 0,
        "overdue_above_12": 1,
    }
