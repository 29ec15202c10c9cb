"""Configuration for the loan interest preview tools."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from interest import MINIMUM_INTEREST_DAYS
from overdue import REPAYMENT_CYCLE_DAYS

DEFAULT_DATA_FILE = Path(__file__).with_name("loans_data.json")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass
class EstimatorConfig:
    """Settings shared by the CLI and the preview helpers."""

    minimum_days: int = MINIMUM_INTEREST_DAYS
    cycle_days: int = REPAYMENT_CYCLE_DAYS
    data_file: Path = field(default_factory=lambda: DEFAULT_DATA_FILE)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "EstimatorConfig":
        """Create config from environment variables."""
        data_file = os.getenv("LOAN_DATA_FILE")
        return cls(
            minimum_days=_int_env("LOAN_MINIMUM_DAYS", MINIMUM_INTEREST_DAYS),
            cycle_days=_int_env("LOAN_CYCLE_DAYS", REPAYMENT_CYCLE_DAYS),
            data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
