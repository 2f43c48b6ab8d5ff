"""Account object holding a balance and its transaction history."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from .clock import TimeProvider, system_now
from .exceptions import InsufficientFundsError, InvalidNameError
from .models import Transaction, TransactionType
from .money import AmountLike, format_currency, require_positive, to_decimal


class Account:
    """A named ledger with a non-negative balance and an append-only history."""

    __slots__ = ("_name", "_balance", "_transactions", "_now")

    def __init__(
        self,
        name: str,
        initial_balance: AmountLike = 0,
        *,
        time_provider: TimeProvider = system_now,
    ) -> None:
        trimmed = name.strip()
        if not trimmed:
            raise InvalidNameError("Account name cannot be empty.")
        starting_value = to_decimal(initial_balance)
        require_positive(starting_value, allow_zero=True, label="Initial balance")
        self._name = trimmed
        self._balance: Decimal = starting_value
        self._transactions: list[Transaction] = []
        self._now = time_provider

    def __repr__(self) -> str:
        return f"Account(name={self._name!r}, balance={self._balance})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> Decimal:
        """Return the current account balance."""

        return self._balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Return an immutable view of the transaction history."""

        return tuple(self._transactions)

    def get_transaction_history(self) -> Tuple[Transaction, ...]:
        return self.transactions

    def deposit(self, amount: AmountLike, description: Optional[str] = None) -> Decimal:
        """Add money to the account and return the new balance."""

        value = to_decimal(amount)
        require_positive(value, label="Deposit amount")
        self._balance += value
        self._log_transaction(TransactionType.DEPOSIT, value, description)
        return self._balance

    def withdraw(self, amount: AmountLike, description: Optional[str] = None) -> Decimal:
        """Remove money from the account if sufficient funds are available."""

        value = to_decimal(amount)
        require_positive(value, label="Withdrawal amount")
        if value > self._balance:
            raise InsufficientFundsError(
                f"Insufficient funds. Available balance: {format_currency(self._balance)}, "
                f"requested amount: {format_currency(value)}."
            )
        self._balance -= value
        self._log_transaction(TransactionType.WITHDRAWAL, value, description)
        return self._balance

    def generate_statement(self, *, max_transactions: int = 10) -> str:
        """Create a human-readable summary of the account state."""

        lines = [
            f"Account holder: {self._name}",
            f"Current balance: {format_currency(self._balance)}",
            "",
            "Recent transactions:",
        ]
        recent = self._transactions[-max_transactions:] if max_transactions > 0 else []
        if not recent:
            lines.append("  (no transactions yet)")
        for transaction in recent:
            label = transaction.type.value.title()
            if transaction.description:
                label = f"{label} ({transaction.description})"
            lines.append(
                "  "
                f"[{transaction.timestamp:%Y-%m-%d}] {label}: "
                f"{format_currency(transaction.amount)} "
                f"(balance {format_currency(transaction.balance_after)})"
            )
        return "\n".join(lines)

    def _log_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        description: Optional[str],
    ) -> Transaction:
        transaction = Transaction(
            type=transaction_type,
            amount=amount,
            timestamp=self._now(),
            balance_after=self._balance,
            description=description,
        )
        self._transactions.append(transaction)
        return transaction
