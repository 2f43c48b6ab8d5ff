"""Configuration constants for the weeklyallowance package."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

ALLOWANCE_PERIOD_DAYS = 7
ALLOWANCE_DESCRIPTION = os.environ.get("WEEKLY_ALLOWANCE_DESCRIPTION", "Allocation hebdomadaire")
DEFAULT_PAYMENT_DAY = int(os.environ.get("WEEKLY_ALLOWANCE_PAYMENT_DAY", "1"))
CURRENCY_SYMBOL = os.environ.get("WEEKLY_ALLOWANCE_CURRENCY", "€")

_log_path = os.environ.get("WEEKLY_ALLOWANCE_LOG_PATH", "").strip()
LOG_PATH: Optional[Path] = Path(_log_path) if _log_path else None

if not 1 <= DEFAULT_PAYMENT_DAY <= 7:
    raise RuntimeError(
        f"WEEKLY_ALLOWANCE_PAYMENT_DAY must be between 1 and 7, got {DEFAULT_PAYMENT_DAY}."
    )

__all__ = [
    "ALLOWANCE_PERIOD_DAYS",
    "ALLOWANCE_DESCRIPTION",
    "DEFAULT_PAYMENT_DAY",
    "CURRENCY_SYMBOL",
    "LOG_PATH",
]
