"""Recurring weekly allowance bound to a single account."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from . import config
from .account import Account
from .clock import TimeProvider, system_now
from .exceptions import InvalidPaymentDayError
from .models import Weekday
from .money import AmountLike, require_positive, to_decimal


class WeeklyAllowance:
    """Deposit a fixed amount into an account once a week.

    The allowance keeps a reference to an account it does not own; the
    account is registered with (and removed by) the caller or the
    :class:`~weeklyallowance.manager.AllowanceManager`.

    A new allowance is inactive. Once activated it is due immediately if it
    has never been paid, and otherwise once at least
    ``ALLOWANCE_PERIOD_DAYS`` whole days have elapsed since the last payment.
    """

    __slots__ = ("_account", "_amount", "_active", "_payment_day", "_last_payment_date", "_now")

    def __init__(
        self,
        account: Account,
        amount: AmountLike,
        *,
        time_provider: TimeProvider = system_now,
    ) -> None:
        self._account = account
        self._amount = self._validate_amount(amount)
        self._active = False
        self._payment_day = config.DEFAULT_PAYMENT_DAY
        self._last_payment_date: Optional[datetime] = None
        self._now = time_provider

    def __repr__(self) -> str:
        state = "active" if self._active else "inactive"
        return f"WeeklyAllowance(account={self._account.name!r}, amount={self._amount}, {state})"

    @property
    def account(self) -> Account:
        return self._account

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def payment_day(self) -> int:
        return self._payment_day

    @property
    def last_payment_date(self) -> Optional[datetime]:
        return self._last_payment_date

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def set_amount(self, amount: AmountLike) -> None:
        self._amount = self._validate_amount(amount)

    def set_payment_day(self, day: int) -> None:
        """Set the preferred payment day, 1 (Monday) .. 7 (Sunday)."""

        if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 7:
            raise InvalidPaymentDayError(
                f"Payment day must be between 1 (Monday) and 7 (Sunday), got {day!r}."
            )
        self._payment_day = int(day)

    def is_due(self) -> bool:
        if not self._active:
            return False
        if self._last_payment_date is None:
            return True
        elapsed = abs(self._now() - self._last_payment_date)
        return elapsed.days >= config.ALLOWANCE_PERIOD_DAYS

    def process(self) -> bool:
        """Pay the allowance now if active; returns whether a deposit was made.

        Processing is not gated on :meth:`is_due`, so callers can pay out on
        demand.
        """

        if not self._active:
            return False
        self._account.deposit(self._amount, config.ALLOWANCE_DESCRIPTION)
        self._last_payment_date = self._now()
        return True

    def get_next_payment_date(self) -> Optional[datetime]:
        # Payment day alignment only applies to the first payment; later
        # payments follow the last one by a fixed period.
        if not self._active:
            return None
        if self._last_payment_date is not None:
            return self._last_payment_date + timedelta(days=config.ALLOWANCE_PERIOD_DAYS)
        now = self._now()
        days_until = (self._payment_day - Weekday.from_datetime(now)) % 7
        return now + timedelta(days=days_until)

    @staticmethod
    def _validate_amount(amount: AmountLike) -> Decimal:
        value = to_decimal(amount)
        return require_positive(value, label="Allowance amount")
