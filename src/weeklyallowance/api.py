"""JSON export helpers and the HTTP API for an :class:`AllowanceManager`."""

from __future__ import annotations

import json
import threading
from decimal import Decimal
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from .account import Account
from .allowance import WeeklyAllowance
from .exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    WeeklyAllowanceError,
)
from .manager import AllowanceManager
from .models import Transaction


class ApiExporter:
    """Convert ledger data structures to JSON friendly dictionaries."""

    def account_snapshot(self, account: Account, allowance: Optional[WeeklyAllowance] = None) -> Dict[str, Any]:
        return {
            "name": account.name,
            "balance": float(account.balance),
            "transactions": [self._serialise_transaction(tx) for tx in account.transactions],
            "allowance": self.allowance_snapshot(allowance) if allowance is not None else None,
        }

    def allowance_snapshot(self, allowance: WeeklyAllowance) -> Dict[str, Any]:
        next_payment = allowance.get_next_payment_date()
        last_payment = allowance.last_payment_date
        return {
            "account": allowance.account.name,
            "amount": float(allowance.amount),
            "active": allowance.is_active,
            "payment_day": allowance.payment_day,
            "due": allowance.is_due(),
            "last_payment_date": last_payment.isoformat() if last_payment else None,
            "next_payment_date": next_payment.isoformat() if next_payment else None,
        }

    def manager_snapshot(self, manager: AllowanceManager) -> Dict[str, Any]:
        return {
            "accounts": [
                self.account_snapshot(account, manager.get_allowance(account.name))
                for account in manager.get_accounts()
            ],
            "total_balance": float(manager.get_total_balance()),
            "total_weekly_allowances": float(manager.get_total_weekly_allowances()),
        }

    def to_json(self, payload: Dict[str, Any]) -> str:
        return json.dumps(payload, sort_keys=True)

    def _serialise_transaction(self, transaction: Transaction) -> Dict[str, Any]:
        return {
            "timestamp": transaction.timestamp.isoformat(),
            "type": transaction.type.value,
            "amount": float(transaction.amount),
            "balance_after": float(transaction.balance_after),
            "description": transaction.description,
        }


class AccountCreate(BaseModel):
    name: str
    initial_balance: Decimal = Decimal("0")
    allowance_amount: Optional[Decimal] = None


class MovementRequest(BaseModel):
    amount: Decimal
    description: Optional[str] = None


class AllowanceRequest(BaseModel):
    amount: Decimal
    payment_day: Optional[int] = Field(default=None, ge=1, le=7)


_ERROR_STATUS = {
    AccountNotFoundError: 404,
    DuplicateAccountError: 409,
    InsufficientFundsError: 400,
}


def create_app(manager: AllowanceManager | None = None) -> FastAPI:
    """Build a FastAPI application serving a single manager instance."""

    ledger = manager or AllowanceManager()
    exporter = ApiExporter()
    lock = threading.Lock()
    app = FastAPI(title="Weekly Allowance")
    app.state.manager = ledger

    @app.exception_handler(WeeklyAllowanceError)
    async def ledger_error_handler(_request: Request, exc: WeeklyAllowanceError) -> JSONResponse:
        status_code = next(
            (code for error_type, code in _ERROR_STATUS.items() if isinstance(exc, error_type)),
            422,
        )
        return JSONResponse({"detail": str(exc), "error": type(exc).__name__}, status_code=status_code)

    def _account_payload(name: str) -> Dict[str, Any]:
        account = ledger.get_account(name)
        return exporter.account_snapshot(account, ledger.get_allowance(account.name))

    @app.get("/accounts")
    def list_accounts() -> Dict[str, Any]:
        with lock:
            return exporter.manager_snapshot(ledger)

    @app.post("/accounts", status_code=201)
    def create_account(payload: AccountCreate) -> Dict[str, Any]:
        with lock:
            if payload.allowance_amount is None:
                account = ledger.create_account(payload.name, payload.initial_balance)
            else:
                account = ledger.create_account_with_allowance(
                    payload.name, payload.initial_balance, payload.allowance_amount
                )
            return _account_payload(account.name)

    @app.get("/accounts/{name}")
    def get_account(name: str) -> Dict[str, Any]:
        with lock:
            return _account_payload(name)

    @app.delete("/accounts/{name}", status_code=204)
    def delete_account(name: str) -> Response:
        with lock:
            ledger.remove_account(name)
        return Response(status_code=204)

    @app.post("/accounts/{name}/deposit")
    def deposit(name: str, payload: MovementRequest) -> Dict[str, Any]:
        with lock:
            ledger.get_account(name).deposit(payload.amount, payload.description)
            return _account_payload(name)

    @app.post("/accounts/{name}/withdraw")
    def withdraw(name: str, payload: MovementRequest) -> Dict[str, Any]:
        with lock:
            ledger.get_account(name).withdraw(payload.amount, payload.description)
            return _account_payload(name)

    @app.put("/accounts/{name}/allowance")
    def set_allowance(name: str, payload: AllowanceRequest) -> Dict[str, Any]:
        with lock:
            allowance = ledger.set_allowance(name, payload.amount)
            if payload.payment_day is not None:
                allowance.set_payment_day(payload.payment_day)
            return exporter.allowance_snapshot(allowance)

    @app.post("/accounts/{name}/allowance/activate")
    def activate_allowance(name: str) -> Dict[str, Any]:
        with lock:
            ledger.activate_allowance(name)
            return _account_payload(name)

    @app.post("/accounts/{name}/allowance/deactivate")
    def deactivate_allowance(name: str) -> Dict[str, Any]:
        with lock:
            ledger.deactivate_allowance(name)
            return _account_payload(name)

    @app.post("/accounts/{name}/allowance/process")
    def process_allowance(name: str) -> Dict[str, Any]:
        with lock:
            processed = ledger.process_allowance(name)
            return {"processed": processed, "account": _account_payload(name)}

    @app.post("/allowances/process-due")
    def process_due() -> Dict[str, int]:
        with lock:
            return {"processed": ledger.process_all_due_allowances()}

    return app


__all__ = ["ApiExporter", "create_app"]
