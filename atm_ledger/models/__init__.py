from .domain import Account, AccountKey, TransactionLog
from .schemas import (
    AccountCreate,
    AccountResponse,
    CashRequest,
    LedgerExportResponse,
    TransactionLogResponse,
)

__all__ = [
    "Account",
    "AccountKey",
    "TransactionLog",
    "AccountCreate",
    "AccountResponse",
    "CashRequest",
    "LedgerExportResponse",
    "TransactionLogResponse",
]
