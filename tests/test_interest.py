import os
import sys
from decimal import Decimal
from pathlib import Path

# Ensure project root on path for direct module imports
sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from interest import (
    MINIMUM_INTEREST_DAYS,
    accrue_interest,
    advance_interest,
    daily_accrual,
    daily_rate,
)


def test_thirty_days_at_24_percent():
    assert accrue_interest(100000, 24, 30) == Decimal("1973")


def test_short_window_charged_as_fifteen_days():
    assert accrue_interest(50000, 12, 5) == Decimal("247")
    assert accrue_interest(50000, 12, 5) == accrue_interest(50000, 12, 15)


def test_floor_applies_to_every_day_below_minimum():
    floor = accrue_interest(75000, 18, MINIMUM_INTEREST_DAYS)
    for days in range(MINIMUM_INTEREST_DAYS):
        assert accrue_interest(75000, 18, days) == floor


def test_non_decreasing_after_floor():
    previous = accrue_interest(123456, 21.5, 15)
    for days in range(16, 400, 7):
        current = accrue_interest(123456, 21.5, days)
        assert current >= previous
        previous = current


def test_zero_principal_or_rate_accrues_nothing():
    assert accrue_interest(0, 24, 90) == 0
    assert accrue_interest(100000, 0, 90) == 0


def test_negative_inputs_treated_as_zero():
    assert accrue_interest(-5000, 12, 30) == 0
    assert accrue_interest(10000, -5, 30) == 0
    assert accrue_interest(50000, 12, -3) == accrue_interest(50000, 12, 15)


def test_result_is_whole_units_and_non_negative():
    for principal, rate, days in [(1, 1, 1), (999.99, 36, 17), (2500000, 9.75, 365)]:
        value = accrue_interest(principal, rate, days)
        assert value >= 0
        assert value == value.to_integral_value()


def test_accepts_floats_strings_and_decimals():
    assert accrue_interest(100000.0, 24.0, 30) == Decimal("1973")
    assert accrue_interest("100000", "24", "30") == Decimal("1973")
    assert accrue_interest(Decimal("100000"), Decimal("24"), 30) == Decimal("1973")


def test_nan_passes_through():
    assert accrue_interest(float("nan"), 12, 30).is_nan()
    assert accrue_interest(1000, Decimal("NaN"), 30).is_nan()


def test_undefined_product_does_not_raise():
    assert accrue_interest(Decimal("Infinity"), 0, 30).is_nan()


def test_custom_minimum_days():
    assert accrue_interest(100000, 24, 0, minimum_days=0) == 0
    assert accrue_interest(100000, 24, 5, minimum_days=30) == accrue_interest(100000, 24, 30)


def test_daily_rate():
    assert daily_rate(36.5) == Decimal("0.001")
    assert daily_rate(-10) == 0


def test_daily_accrual_and_advance_interest():
    assert daily_accrual(100000, 24) == Decimal("65.75")
    assert advance_interest(100000, 24) == Decimal("986.25")
    assert advance_interest(100000, 24, days=30) == Decimal("1972.50")
    assert daily_accrual(-100, 24) == Decimal("0.00")


def test_exact_half_unit_rounds_up():
    assert accrue_interest(250, 17, 73) == Decimal("9")
    assert accrue_interest(250, 19, 73) == Decimal("10")
    assert accrue_interest(1250, 3, 73) == Decimal("8")
    assert accrue_interest(1250, 21, 73) == Decimal("53")


def test_daily_accrual_half_cent_rounds_up():
    assert daily_accrual(182.5, 1) == Decimal("0.01")
