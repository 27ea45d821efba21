class AtmLedgerError(Exception):
    """Base class for every error raised by the account registry."""

class InvalidRequestError(AtmLedgerError, ValueError):
    """Raised when caller input is unusable regardless of account state."""

class AccountNotFoundError(InvalidRequestError):
    """Raised when a card/pin pair is missing from the registry."""

class AccountExistsError(InvalidRequestError):
    """Raised when registering a card/pin pair that is already taken."""

class InvalidAmountError(InvalidRequestError):
    """Raised when a cash amount is zero, negative or not a number."""

class InsufficientFundsError(AtmLedgerError, RuntimeError):
    """Raised when a withdrawal would drop balance below zero."""
