from __future__ import annotations

from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from typing import Union

from .errors import InvalidAmountError

MoneyInput = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
CURRENCY_SYMBOL = "$"

# Normalizing may round sub-cent input; balance arithmetic must never round.
MONEY_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Overflow, DivisionByZero],
)
EXACT_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Overflow, DivisionByZero, Inexact],
)


def as_money(value: MoneyInput) -> Decimal:
    """Normalize ``value`` to a two-place Decimal.

    Floats go through ``str()`` first so ``300.30`` stays ``300.30`` instead of
    picking up binary noise. Values with more than 28 significant digits once
    expressed in cents are rejected.
    """
    try:
        amount = Decimal(str(value))
        if not amount.is_finite():
            raise InvalidAmountError(f"Amount {value!r} is not a finite number")
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN, context=MONEY_CONTEXT)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount {value!r} is not a supported number") from exc


def require_positive(amount: MoneyInput) -> Decimal:
    normalized = as_money(amount)
    if normalized <= 0:
        raise InvalidAmountError("Amount must be greater than zero")
    return normalized


def add_money(balance: Decimal, amount: Decimal) -> Decimal:
    try:
        return EXACT_CONTEXT.add(balance, amount)
    except DecimalException as exc:
        raise InvalidAmountError("Resulting balance exceeds supported precision") from exc


def subtract_money(balance: Decimal, amount: Decimal) -> Decimal:
    try:
        return EXACT_CONTEXT.subtract(balance, amount)
    except DecimalException as exc:
        raise InvalidAmountError("Resulting balance exceeds supported precision") from exc


def format_money(value: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{as_money(value):.2f}"
