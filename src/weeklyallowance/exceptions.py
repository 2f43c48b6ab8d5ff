"""Custom exception hierarchy for the weeklyallowance package."""

from __future__ import annotations


class WeeklyAllowanceError(Exception):
    """Base class for all weeklyallowance specific errors."""


class InvalidNameError(WeeklyAllowanceError, ValueError):
    """Raised when an account name is empty once surrounding whitespace is removed."""


class InvalidAmountError(WeeklyAllowanceError, ValueError):
    """Raised when an amount is not positive (or negative where zero is allowed)."""


class InvalidPaymentDayError(WeeklyAllowanceError, ValueError):
    """Raised when a payment day falls outside 1 (Monday) .. 7 (Sunday)."""


class InsufficientFundsError(WeeklyAllowanceError):
    """Raised when a withdrawal would result in a negative balance."""


class AccountNotFoundError(WeeklyAllowanceError, LookupError):
    """Raised when an account lookup fails."""


class DuplicateAccountError(WeeklyAllowanceError):
    """Raised when attempting to register an account name that already exists."""
