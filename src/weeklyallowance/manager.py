"""High level service coordinating accounts and their weekly allowances."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from . import config
from .account import Account
from .allowance import WeeklyAllowance
from .clock import TimeProvider, system_now
from .exceptions import AccountNotFoundError, DuplicateAccountError
from .money import AmountLike, ZERO, format_currency
from .ops import StructuredLogger


class AllowanceManager:
    """Own the accounts of a household and at most one allowance per account."""

    __slots__ = ("_accounts", "_allowances", "_now", "_logger")

    def __init__(
        self,
        *,
        time_provider: TimeProvider = system_now,
        logger: StructuredLogger | None = None,
    ) -> None:
        self._accounts: Dict[str, Account] = {}
        self._allowances: Dict[str, WeeklyAllowance] = {}
        self._now = time_provider
        self._logger = logger or StructuredLogger(path=config.LOG_PATH, time_provider=time_provider)

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def add_account(self, account: Account) -> None:
        name = account.name
        if name in self._accounts:
            raise DuplicateAccountError(f"An account named '{name}' already exists.")
        self._accounts[name] = account
        self._logger.log("account_created", account=name, balance=float(account.balance))

    def create_account(self, name: str, initial_balance: AmountLike = 0) -> Account:
        account = Account(name, initial_balance, time_provider=self._now)
        self.add_account(account)
        return account

    def create_account_with_allowance(
        self,
        name: str,
        initial_balance: AmountLike,
        allowance_amount: AmountLike,
    ) -> Account:
        account = self.create_account(name, initial_balance)
        self.set_allowance(account.name, allowance_amount)
        return account

    def get_account(self, name: str) -> Account:
        try:
            return self._accounts[name.strip()]
        except KeyError as exc:
            raise AccountNotFoundError(f"Account '{name}' does not exist.") from exc

    def has_account(self, name: str) -> bool:
        return name.strip() in self._accounts

    def remove_account(self, name: str) -> None:
        account = self.get_account(name)
        del self._accounts[account.name]
        self._allowances.pop(account.name, None)
        self._logger.log("account_removed", account=account.name)

    def get_accounts(self) -> Tuple[Account, ...]:
        return tuple(self._accounts.values())

    def list_accounts(self) -> Tuple[str, ...]:
        return tuple(self._accounts)

    def get_account_count(self) -> int:
        return len(self._accounts)

    # ------------------------------------------------------------------
    # Allowances
    # ------------------------------------------------------------------
    def set_allowance(self, name: str, amount: AmountLike) -> WeeklyAllowance:
        """Configure (or replace) the allowance for ``name``; it starts active."""

        account = self.get_account(name)
        allowance = WeeklyAllowance(account, amount, time_provider=self._now)
        allowance.activate()
        self._allowances[account.name] = allowance
        self._logger.log("allowance_configured", account=account.name, amount=float(allowance.amount))
        return allowance

    def get_allowance(self, name: str) -> Optional[WeeklyAllowance]:
        return self._allowances.get(name.strip())

    def activate_allowance(self, name: str) -> None:
        allowance = self.get_allowance(name)
        if allowance is not None:
            allowance.activate()
            self._logger.log("allowance_activated", account=allowance.account.name)

    def deactivate_allowance(self, name: str) -> None:
        allowance = self.get_allowance(name)
        if allowance is not None:
            allowance.deactivate()
            self._logger.log("allowance_deactivated", account=allowance.account.name)

    def process_allowance(self, name: str) -> bool:
        allowance = self.get_allowance(name)
        if allowance is None:
            return False
        return self._process(allowance)

    def process_all_due_allowances(self) -> int:
        processed = 0
        for allowance in list(self._allowances.values()):
            if allowance.is_due() and self._process(allowance):
                processed += 1
        self._logger.log("allowances_batch_processed", processed=processed)
        return processed

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def get_total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts.values()), ZERO)

    def get_total_weekly_allowances(self) -> Decimal:
        return sum(
            (allowance.amount for allowance in self._allowances.values() if allowance.is_active),
            ZERO,
        )

    def summary(self, *, detailed: bool = False) -> str:
        """Return balances and allowances per account; ``detailed`` appends each statement."""

        lines = ["Weekly allowance summary:"]
        if not self._accounts:
            lines.append("  (no accounts yet)")
        for name, account in self._accounts.items():
            line = f"  {name}: {format_currency(account.balance)}"
            allowance = self._allowances.get(name)
            if allowance is not None:
                state = "active" if allowance.is_active else "inactive"
                line += f" | allowance {format_currency(allowance.amount)} ({state})"
                next_payment = allowance.get_next_payment_date()
                if next_payment is not None:
                    line += f", next on {next_payment:%Y-%m-%d}"
            lines.append(line)
        lines.append(f"Total balance: {format_currency(self.get_total_balance())}")
        lines.append(f"Total weekly allowances: {format_currency(self.get_total_weekly_allowances())}")
        if detailed:
            for account in self._accounts.values():
                lines.append("")
                lines.append(account.generate_statement())
        return "\n".join(lines)

    def _process(self, allowance: WeeklyAllowance) -> bool:
        paid = allowance.process()
        if paid:
            self._logger.log(
                "allowance_processed",
                account=allowance.account.name,
                amount=float(allowance.amount),
                balance=float(allowance.account.balance),
            )
        return paid
