from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple


class AccountKey(NamedTuple):
    """Identity of an account. Compares and sorts by card number, then pin."""

    card_number: int
    pin: int


@dataclass(frozen=True)
class Account:
    owner_name: str
    balance: Decimal


TransactionLog = tuple[str, ...]
