from .accounts import AccountService
from .errors import (
    AccountErrorKind,
    AccountException,
    LedgerError,
    TransferErrorKind,
    TransferException,
)
from .transfers import DeleteOutcome, DeleteResult, TransferService

__all__ = [
    "AccountErrorKind",
    "AccountException",
    "AccountService",
    "DeleteOutcome",
    "DeleteResult",
    "LedgerError",
    "TransferErrorKind",
    "TransferException",
    "TransferService",
]
