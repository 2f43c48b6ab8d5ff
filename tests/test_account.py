from datetime import datetime
from decimal import Decimal

import pytest

from weeklyallowance.account import Account
from weeklyallowance.clock import FrozenClock
from weeklyallowance.exceptions import InsufficientFundsError, InvalidAmountError, InvalidNameError
from weeklyallowance.models import TransactionType


def test_name_is_trimmed_and_balance_defaults_to_zero() -> None:
    account = Account("  Lucas  ")

    assert account.name == "Lucas"
    assert account.balance == Decimal("0.00")
    assert account.transactions == ()


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_name_is_rejected(name: str) -> None:
    with pytest.raises(InvalidNameError):
        Account(name)


def test_negative_initial_balance_is_rejected() -> None:
    with pytest.raises(InvalidAmountError):
        Account("Lucas", -1)


def test_initial_balance_is_not_recorded_as_transaction() -> None:
    account = Account("Lucas", 50)

    assert account.balance == Decimal("50.00")
    assert account.get_transaction_history() == ()


def test_deposit_records_transaction() -> None:
    clock = FrozenClock(datetime(2024, 3, 4, 10, 30))
    account = Account("Lucas", Decimal("50.00"), time_provider=clock)

    new_balance = account.deposit(Decimal("25.00"), "Birthday money")

    assert new_balance == Decimal("75.00")
    assert account.balance == Decimal("75.00")
    (transaction,) = account.transactions
    assert transaction.type is TransactionType.DEPOSIT
    assert transaction.amount == Decimal("25.00")
    assert transaction.balance_after == Decimal("75.00")
    assert transaction.description == "Birthday money"
    assert transaction.timestamp == datetime(2024, 3, 4, 10, 30)


def test_withdraw_reduces_balance() -> None:
    account = Account("Lucas", 20)

    new_balance = account.withdraw("5.50")

    assert new_balance == Decimal("14.50")
    transaction = account.transactions[-1]
    assert transaction.type is TransactionType.WITHDRAWAL
    assert transaction.amount == Decimal("5.50")
    assert transaction.balance_after == Decimal("14.50")
    assert transaction.description is None


def test_withdraw_entire_balance_is_allowed() -> None:
    account = Account("Lucas", 10)

    assert account.withdraw(10) == Decimal("0.00")


def test_withdraw_raises_when_insufficient_funds() -> None:
    account = Account("Lucas", Decimal("30.00"))

    with pytest.raises(InsufficientFundsError) as excinfo:
        account.withdraw(Decimal("50.00"))

    message = str(excinfo.value)
    assert "30.00" in message
    assert "50.00" in message
    assert account.balance == Decimal("30.00")
    assert account.transactions == ()


@pytest.mark.parametrize("amount", [0, -1, "-0.01"])
def test_non_positive_amounts_never_mutate_account(amount: object) -> None:
    account = Account("Lucas", 10)

    with pytest.raises(InvalidAmountError):
        account.deposit(amount)
    with pytest.raises(InvalidAmountError):
        account.withdraw(amount)

    assert account.balance == Decimal("10.00")
    assert account.transactions == ()


def test_balance_after_tracks_every_transaction() -> None:
    account = Account("Lucas")

    for amount in (10, 5, 2.5):
        account.deposit(amount)
    account.withdraw(7)

    running = Decimal("0.00")
    for transaction in account.transactions:
        if transaction.type is TransactionType.DEPOSIT:
            running += transaction.amount
        else:
            running -= transaction.amount
        assert transaction.balance_after == running
    assert running == account.balance == Decimal("10.50")


def test_deposit_then_withdraw_restores_balance() -> None:
    account = Account("Lucas", 12)

    account.deposit(8)
    account.withdraw(8)

    assert account.balance == Decimal("12.00")
    assert len(account.transactions) == 2


def test_history_view_is_read_only() -> None:
    account = Account("Lucas")
    account.deposit(1)

    history = account.get_transaction_history()

    assert isinstance(history, tuple)
    with pytest.raises(AttributeError):
        history[0].amount = Decimal("99")  # type: ignore[misc]


def test_statement_lists_recent_transactions() -> None:
    account = Account("Lucas", time_provider=FrozenClock(datetime(2024, 3, 4)))
    account.deposit(20, "Allocation hebdomadaire")

    statement = account.generate_statement()

    assert "Account holder: Lucas" in statement
    assert "20.00" in statement
    assert "2024-03-04" in statement
    assert "Allocation hebdomadaire" in statement


def test_sub_cent_amounts_are_rejected_not_rounded() -> None:
    account = Account("Lucas", 30)

    with pytest.raises(InvalidAmountError):
        account.withdraw(30.004)
    with pytest.raises(InvalidAmountError):
        account.deposit(0.004)
    with pytest.raises(InvalidAmountError):
        account.deposit("0.005")

    assert account.balance == Decimal("30.00")
    assert account.transactions == ()


def test_withdraw_one_cent_over_balance_raises() -> None:
    account = Account("Lucas", 30)

    with pytest.raises(InsufficientFundsError):
        account.withdraw("30.01")
    assert account.balance == Decimal("30.00")
