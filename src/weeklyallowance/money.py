"""Utilities for working with monetary values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from . import config
from .exceptions import InvalidAmountError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """Convert ``value`` to a :class:`~decimal.Decimal` with two decimal places.

    Sub-cent values are rejected rather than rounded.
    """

    if isinstance(value, bool):
        raise TypeError(f"Unsupported amount type: {type(value)!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"'{value}' is not a valid amount.") from exc
    else:
        raise TypeError(f"Unsupported amount type: {type(value)!r}")

    if not result.is_finite():
        raise InvalidAmountError(f"'{value}' is not a valid amount.")
    quantized = result.quantize(CENT, rounding=ROUND_HALF_UP)
    if quantized != result:
        raise InvalidAmountError(f"'{value}': amounts are limited to two decimal places.")
    return quantized


def require_positive(amount: Decimal, *, allow_zero: bool = False, label: str = "Amount") -> Decimal:
    """Ensure ``amount`` is positive (or non-negative when ``allow_zero`` is true)."""

    if allow_zero:
        if amount < ZERO:
            raise InvalidAmountError(f"{label} cannot be negative.")
    elif amount <= ZERO:
        raise InvalidAmountError(f"{label} must be greater than zero.")
    return amount


def format_currency(amount: Decimal) -> str:
    """Return ``amount`` with two decimals and the configured symbol (e.g. ``12.34€``)."""

    return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):.2f}{config.CURRENCY_SYMBOL}"
