"""
Domain errors for the ledger service.

Each exception carries a fixed, enumerated ``kind`` so callers (the API
layer, tests) can branch on the reason without parsing messages.
"""

import enum
from typing import Optional


class AccountErrorKind(str, enum.Enum):
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"


class TransferErrorKind(str, enum.Enum):
    INVALID_TRANSFER_ID = "INVALID_TRANSFER_ID"
    SAME_ACCOUNT_TRANSFER = "SAME_ACCOUNT_TRANSFER"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    TRANSFER_TIMEOUT = "TRANSFER_TIMEOUT"


_DEFAULT_MESSAGES = {
    AccountErrorKind.ACCOUNT_NOT_FOUND: "Account not found",
    TransferErrorKind.INVALID_TRANSFER_ID: "Transfer not found",
    TransferErrorKind.SAME_ACCOUNT_TRANSFER: "Sender and receiver must be different accounts",
    TransferErrorKind.INSUFFICIENT_BALANCE: "Insufficient balance",
    TransferErrorKind.INVALID_AMOUNT: "Transfer amount must be positive",
    TransferErrorKind.TRANSFER_TIMEOUT: "Transfer did not complete in time",
}


class LedgerError(Exception):
    """
    Base class for all ledger domain errors.
    """

    def __init__(self, kind: enum.Enum, message: Optional[str] = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES.get(kind, kind.value)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value}: {self.message})"


class AccountException(LedgerError):
    """
    Raised when an account lookup fails.
    """


class TransferException(LedgerError):
    """
    Raised when a transfer lookup fails or a transfer request is not legal.
    """
