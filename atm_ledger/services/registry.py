from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from os import PathLike
from typing import Dict, List, Union

from ..core.errors import (
    AccountExistsError,
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
)
from ..core.money import (
    MoneyInput,
    add_money,
    as_money,
    format_money,
    require_positive,
    subtract_money,
)
from ..models import Account, AccountKey, TransactionLog


logger = logging.getLogger(__name__)

DEPOSIT = "Deposit"
WITHDRAWAL = "Withdrawal"


@dataclass
class _AccountRecord:
    owner_name: str
    balance: Decimal


def format_ledger_line(kind: str, amount: Decimal, balance: Decimal) -> str:
    return f"{kind} - Amount: {format_money(amount)}, Updated Balance: {format_money(balance)}"


class AccountRegistry:
    """In-memory account table plus one transaction log per account.

    Both tables are keyed by :class:`AccountKey` and always hold the same key
    set. Every public mutator validates first and only then touches state, so a
    raised error never leaves a partial update behind.

    Not thread-safe; wrap it in a lock if several threads share one instance.
    """

    def __init__(self) -> None:
        self._accounts: Dict[AccountKey, _AccountRecord] = {}
        self._transactions: Dict[AccountKey, List[str]] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, key: object) -> bool:
        return key in self._accounts

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_record(self, key: AccountKey) -> _AccountRecord:
        try:
            return self._accounts[key]
        except KeyError as exc:
            raise AccountNotFoundError(
                f"Account for card {key.card_number} not found"
            ) from exc

    def _append_line(self, key: AccountKey, line: str) -> None:
        self._transactions[key].append(line)

    @staticmethod
    def _snapshot(record: _AccountRecord) -> Account:
        return Account(owner_name=record.owner_name, balance=record.balance)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register_account(
        self,
        card_number: int,
        pin: int,
        owner_name: str,
        initial_balance: MoneyInput,
    ) -> None:
        key = AccountKey(card_number, pin)
        if key in self._accounts:
            raise AccountExistsError(f"Account for card {card_number} already exists")

        balance = as_money(initial_balance)
        if balance < 0:
            raise InvalidAmountError("Initial balance cannot be negative")

        self._accounts[key] = _AccountRecord(owner_name=owner_name, balance=balance)
        self._transactions[key] = []
        logger.info(
            "account.registered",
            extra={"card_number": card_number, "owner_name": owner_name, "balance": str(balance)},
        )

    def deposit_cash(self, card_number: int, pin: int, amount: MoneyInput) -> None:
        key = AccountKey(card_number, pin)
        record = self._get_record(key)
        amt = require_positive(amount)

        new_balance = add_money(record.balance, amt)
        line = format_ledger_line(DEPOSIT, amt, new_balance)

        record.balance = new_balance
        self._append_line(key, line)
        logger.info(
            "account.deposit",
            extra={"card_number": card_number, "amount": str(amt), "balance": str(record.balance)},
        )

    def withdraw_cash(self, card_number: int, pin: int, amount: MoneyInput) -> None:
        key = AccountKey(card_number, pin)
        record = self._get_record(key)
        amt = require_positive(amount)

        if amt > record.balance:
            logger.warning(
                "account.withdraw.rejected",
                extra={"card_number": card_number, "amount": str(amt), "balance": str(record.balance)},
            )
            raise InsufficientFundsError("Insufficient funds for withdrawal")

        new_balance = subtract_money(record.balance, amt)
        line = format_ledger_line(WITHDRAWAL, amt, new_balance)

        record.balance = new_balance
        self._append_line(key, line)
        logger.info(
            "account.withdraw",
            extra={"card_number": card_number, "amount": str(amt), "balance": str(record.balance)},
        )

    def append_ledger_line(self, card_number: int, pin: int, line: str) -> None:
        """Append ``line`` verbatim to an account's log without touching its balance.

        Used to seed ledgers with already-formatted history.
        """
        key = AccountKey(card_number, pin)
        self._get_record(key)
        self._append_line(key, line)

    def get_account(self, card_number: int, pin: int) -> Account:
        return self._snapshot(self._get_record(AccountKey(card_number, pin)))

    def get_transaction_log(self, card_number: int, pin: int) -> TransactionLog:
        key = AccountKey(card_number, pin)
        self._get_record(key)
        return tuple(self._transactions[key])

    def get_accounts(self) -> Dict[AccountKey, Account]:
        return {key: self._snapshot(record) for key, record in self._accounts.items()}

    def get_transactions(self) -> Dict[AccountKey, TransactionLog]:
        return {key: tuple(lines) for key, lines in self._transactions.items()}

    def render_ledger(self, card_number: int, pin: int) -> str:
        key = AccountKey(card_number, pin)
        record = self._get_record(key)
        lines = [f"{record.owner_name}'s Ledger", *self._transactions[key]]
        return "".join(f"{line}\n" for line in lines)

    def print_ledger(
        self,
        destination_path: Union[str, "PathLike[str]"],
        card_number: int,
        pin: int,
    ) -> None:
        # Render before opening so an unknown account never creates the file.
        text = self.render_ledger(card_number, pin)
        with open(destination_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        logger.info(
            "ledger.exported",
            extra={
                "card_number": card_number,
                "path": str(destination_path),
                "lines": len(self._transactions[AccountKey(card_number, pin)]),
            },
        )
