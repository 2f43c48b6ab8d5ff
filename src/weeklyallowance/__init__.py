"""Household ledger with weekly allowances paid into named accounts."""

from .account import Account
from .allowance import WeeklyAllowance
from .clock import FrozenClock, TimeProvider, system_now
from .exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidNameError,
    InvalidPaymentDayError,
    WeeklyAllowanceError,
)
from .manager import AllowanceManager
from .models import Transaction, TransactionType, Weekday
from .ops import StructuredLogger

__all__ = [
    "Account",
    "AllowanceManager",
    "FrozenClock",
    "StructuredLogger",
    "TimeProvider",
    "Transaction",
    "TransactionType",
    "Weekday",
    "WeeklyAllowance",
    "WeeklyAllowanceError",
    "AccountNotFoundError",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidNameError",
    "InvalidPaymentDayError",
    "system_now",
]
