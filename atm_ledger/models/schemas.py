from decimal import Decimal

from pydantic import BaseModel, Field

CARD_NUMBER_MIN = 10_000_000
CARD_NUMBER_MAX = 99_999_999
PIN_MAX = 9_999


class AccountCreate(BaseModel):
    card_number: int = Field(
        ..., ge=CARD_NUMBER_MIN, le=CARD_NUMBER_MAX, description="8-digit card number"
    )
    pin: int = Field(..., ge=0, le=PIN_MAX, description="4-digit pin")
    owner_name: str = Field(..., min_length=1, description="Name of the account holder")
    initial_balance: Decimal = Field(
        default=Decimal("0.00"), ge=0, description="Opening balance in dollars"
    )

class AccountResponse(BaseModel):
    card_number: int
    owner_name: str
    balance: Decimal = Field(..., ge=0, description="Balance in dollars, two decimals")

class CashRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, description="Amount in dollars (must be > 0)")

class TransactionLogResponse(BaseModel):
    card_number: int
    owner_name: str
    items: list[str]

class LedgerExportResponse(BaseModel):
    card_number: int
    path: str
    lines: int = Field(..., ge=0, description="Ledger lines written after the header")
