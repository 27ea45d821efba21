"""Automated-teller account registry with per-account transaction ledgers."""

from .core.errors import (
    AccountExistsError,
    AccountNotFoundError,
    AtmLedgerError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidRequestError,
)
from .models import Account, AccountKey
from .services import AccountRegistry

__all__ = [
    "Account",
    "AccountKey",
    "AccountRegistry",
    "AtmLedgerError",
    "InvalidRequestError",
    "AccountExistsError",
    "AccountNotFoundError",
    "InvalidAmountError",
    "InsufficientFundsError",
]
