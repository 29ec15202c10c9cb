import os
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from payments import payment_total, suggested_payment


def test_payment_total_sums_and_rounds():
    assert payment_total(1000, 250.4, 50) == Decimal("1200")
    assert payment_total("100.5", 0) == Decimal("101")


def test_payment_total_never_negative():
    assert payment_total(100, 0, 500) == 0


def test_payment_total_blank_values():
    assert payment_total(None, "", None) == 0


def test_suggested_payment_prefills_interest():
    record = {
        "loanId": 7,
        "remaining_principal": 50000,
        "interest_rate": 12,
        "days_overdue": 5,
    }
    assert suggested_payment(record, date(2024, 1, 1)) == {
        "loan_id": 7,
        "interest_amount": Decimal("247"),
        "principal_outstanding": Decimal("50000"),
    }
