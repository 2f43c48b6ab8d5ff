"""Domain models used by the weeklyallowance package."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional

from .money import to_decimal


class TransactionType(str, Enum):
    """Enumerates the supported types of account transactions."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class Weekday(IntEnum):
    """ISO days of the week, 1 = Monday .. 7 = Sunday."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Weekday":
        return cls(moment.isoweekday())


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represents a single ledger entry for an :class:`~weeklyallowance.account.Account`."""

    type: TransactionType
    amount: Decimal
    timestamp: datetime
    balance_after: Decimal
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "balance_after", to_decimal(self.balance_after))
