"""Command-line interface for managing loan records and previewing interest."""

from decimal import Decimal, InvalidOperation
from pathlib import Path
import json
from typing import Dict, List, Optional

from config import EstimatorConfig
from formatting import format_currency, format_date_ddmmyyyy
from interest import accrue_interest, advance_interest
from log_config import get_logger, setup_logging
from loan_snapshot import preview_loan, snapshot_from_record
from overdue import overdue_status
from rate_schedule import rate_schedule

logger = get_logger(__name__)

CONFIG = EstimatorConfig.from_env()
DATA_FILE: Path = CONFIG.data_file

LOAN_FIELDS = [
    ("ref_no", "Ref no", str),
    ("borrower_name", "Borrower", str),
    ("amount", "Loan amount", float),
    ("total_principal_paid", "Principal paid", float),
    ("interest_rate", "Annual rate %", float),
    ("date_released", "Release date (YYYY-MM-DD)", str),
    ("last_payment_date", "Last payment date (YYYY-MM-DD)", str),
]


def load_data() -> Dict:
    """Load loan records from ``DATA_FILE``."""
    if DATA_FILE.exists():
        with DATA_FILE.open() as f:
            return json.load(f)
    return {"loans": []}


def save_data(data: Dict) -> None:
    """Persist loan records to disk."""
    with DATA_FILE.open("w") as f:
        json.dump(data, f, indent=2)
    logger.debug("Saved %d loans to %s", len(data.get("loans", [])), DATA_FILE)


# ---------------------------------------------------------------------------
# Editing helpers


def _select(items: List[dict], prompt: str) -> Optional[int]:
    idx = input(prompt).strip()
    if idx.isdigit() and 1 <= int(idx) <= len(items):
        return int(idx) - 1
    return None


def _prompt_loan(existing: Optional[dict] = None) -> dict:
    """Ask for every loan field; blank input keeps the existing value."""
    loan = dict(existing or {})
    for key, label, cast in LOAN_FIELDS:
        current = loan.get(key, "")
        raw = input(f"{label} [{current}]: ").strip()
        if not raw:
            continue
        loan[key] = cast(raw)
    return loan


def _print_loans(loans: List[dict]) -> None:
    print("\nCurrent loans:")
    for i, loan in enumerate(loans, 1):
        print(
            f"{i}. {loan.get('ref_no', '-')} {loan.get('borrower_name', '')} "
            f"amount {format_currency(loan.get('amount', 0))} "
            f"rate {loan.get('interest_rate', 0)}% released {loan.get('date_released', '-')}"
        )


def edit_loans(data: Dict) -> None:
    """Add, edit or remove loan records."""
    loans = data.setdefault("loans", [])
    while True:
        _print_loans(loans)
        action = input("A)dd, E)dit, D)elete, B)ack: ").strip().lower()
        try:
            if action == "a":
                loan = _prompt_loan()
                loan.setdefault("loan_id", max((item.get("loan_id", 0) for item in loans), default=0) + 1)
                loans.append(loan)
                save_data(data)
            elif action == "e":
                idx = _select(loans, "Number to edit: ")
                if idx is not None:
                    loans[idx] = _prompt_loan(loans[idx])
                    save_data(data)
            elif action == "d":
                idx = _select(loans, "Number to delete: ")
                if idx is not None:
                    del loans[idx]
                    save_data(data)
            elif action == "b":
                break
        except ValueError as exc:
            print(f"Warning: {exc}")


# ---------------------------------------------------------------------------
# Previews


def preview_interest(data: Dict) -> None:
    """Print principal, interest and repayment status for every loan."""
    loans = data.get("loans", [])
    if not loans:
        print("No loans recorded.")
        return
    print("\n--- Interest Preview (estimate, not posted) ---")
    for loan in loans:
        try:
            snapshot = snapshot_from_record(loan)
        except ValueError as exc:
            print(f"Warning: {loan.get('ref_no', '?')}: {exc}")
            continue
        preview = preview_loan(snapshot, minimum_days=CONFIG.minimum_days)
        status = overdue_status(snapshot.elapsed_days, cycle_days=CONFIG.cycle_days)
        print(
            f"{loan.get('ref_no', '-')}: total={format_currency(preview.total_outstanding)} "
            f"(P: {format_currency(preview.principal)}, I: {format_currency(preview.interest)}) "
            f"{snapshot.elapsed_days} days [{status.label}] "
            f"released {format_date_ddmmyyyy(loan.get('date_released'))}"
        )


def quick_estimate() -> None:
    """Prompt for raw figures and print the accrued interest."""
    try:
        principal = Decimal(input("Principal outstanding: ").strip())
        rate = Decimal(input("Annual rate %: ").strip())
        days = int(input("Days since last payment: ").strip())
    except (InvalidOperation, ValueError):
        print("Warning: enter numeric values")
        return
    interest = accrue_interest(principal, rate, days, minimum_days=CONFIG.minimum_days)
    advance = advance_interest(principal, rate, days=CONFIG.minimum_days)
    print(f"Interest: {format_currency(interest)}")
    print(f"{CONFIG.minimum_days}-day advance interest: {format_currency(advance)}")


def show_rate_schedule(data: Dict) -> None:
    """Print the interest rate tiers for a chosen loan."""
    loans = data.get("loans", [])
    _print_loans(loans)
    idx = _select(loans, "Loan number: ")
    if idx is None:
        return
    try:
        tiers = rate_schedule(loans[idx])
    except ValueError as exc:
        print(f"Warning: {exc}")
        return
    for tier in tiers:
        print(
            f"  {tier.period}: {tier.annual_rate}% p.a., "
            f"{tier.monthly_rate}% per month, {tier.daily_rate} per day"
        )


# ---------------------------------------------------------------------------
# Menu


def main() -> None:
    """Display the main menu and handle user selections."""
    setup_logging(CONFIG.log_level, CONFIG.log_format)
    data = load_data()
    while True:
        print("\n--- Loan Interest Menu ---")
        print("1. Edit loans")
        print("2. Preview interest")
        print("3. Quick estimate")
        print("4. Rate schedule")
        print("5. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            edit_loans(data)
        elif choice == "2":
            preview_interest(data)
        elif choice == "3":
            quick_estimate()
        elif choice == "4":
            show_rate_schedule(data)
        elif choice == "5":
            break
        else:
            print("Invalid option.")


if __name__ == "__main__":
    main()
