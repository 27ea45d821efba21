import hashlib
import hmac
from pathlib import Path

from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import PlainTextResponse

from ..core.config import Settings, get_settings
from ..core.dependencies import get_account_registry
from ..models import (
    AccountCreate,
    AccountResponse,
    CashRequest,
    LedgerExportResponse,
    TransactionLogResponse,
)
from ..services import AccountRegistry


router = APIRouter(prefix="/accounts", tags=["accounts"])

def ledger_file_name(card_number: int, pin: int, secret: str) -> str:
    """File name unique to the card/pin pair that does not reveal the pin."""
    digest = hmac.new(
        secret.encode(), f"{card_number}:{pin}".encode(), hashlib.sha256
    ).hexdigest()
    return f"{card_number}-{digest[:16]}.txt"

def _account_response(registry: AccountRegistry, card_number: int, pin: int) -> AccountResponse:
    account = registry.get_account(card_number, pin)
    return AccountResponse(
        card_number=card_number,
        owner_name=account.owner_name,
        balance=account.balance,
    )

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def register_account(
    payload: AccountCreate,
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    registry.register_account(
        payload.card_number,
        payload.pin,
        payload.owner_name,
        payload.initial_balance,
    )
    return _account_response(registry, payload.card_number, payload.pin)

@router.get("/{card_number}", response_model=AccountResponse)
async def get_account(
    card_number: int,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    return _account_response(registry, card_number, pin)

@router.post("/{card_number}/deposit", response_model=AccountResponse)
async def deposit(
    card_number: int,
    payload: CashRequest,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    registry.deposit_cash(card_number, pin, payload.amount)
    return _account_response(registry, card_number, pin)

@router.post("/{card_number}/withdraw", response_model=AccountResponse)
async def withdraw(
    card_number: int,
    payload: CashRequest,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    registry.withdraw_cash(card_number, pin, payload.amount)
    return _account_response(registry, card_number, pin)

@router.get("/{card_number}/transactions", response_model=TransactionLogResponse)
async def get_transactions(
    card_number: int,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
) -> TransactionLogResponse:
    account = registry.get_account(card_number, pin)
    return TransactionLogResponse(
        card_number=card_number,
        owner_name=account.owner_name,
        items=list(registry.get_transaction_log(card_number, pin)),
    )

@router.get("/{card_number}/ledger", response_class=PlainTextResponse)
async def read_ledger(
    card_number: int,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
) -> str:
    return registry.render_ledger(card_number, pin)

@router.post(
    "/{card_number}/ledger",
    response_model=LedgerExportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def export_ledger(
    card_number: int,
    pin: int = Header(..., alias="X-Account-Pin"),
    registry: AccountRegistry = Depends(get_account_registry),
    settings: Settings = Depends(get_settings),
) -> LedgerExportResponse:
    # Look the account up first so an unknown card never creates the directory.
    lines = registry.get_transaction_log(card_number, pin)
    ledger_dir = Path(settings.ledger_dir)
    ledger_dir.mkdir(parents=True, exist_ok=True)
    destination = ledger_dir / ledger_file_name(card_number, pin, settings.ledger_name_secret)
    registry.print_ledger(destination, card_number, pin)
    return LedgerExportResponse(card_number=card_number, path=str(destination), lines=len(lines))

__all__ = ["router"]
