"""
Transfer Service: the sole authority for moving money between two accounts.

A transfer runs as one unit of work on the caller's session:

1. lock both account rows (ascending id order) and resolve them,
2. check legality (distinct accounts, positive amount, sufficient balance),
3. move the balances through AccountService,
4. persist a SUCCESSFUL Transfer record with post-transfer snapshots.

Any failure rolls the whole unit back, so a stored Transfer always means
both balances were updated.
"""

import asyncio
import enum
import os
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.db import crud
from ledger_service.db.models import Transfer, TransferStatus
from ledger_service.db.session import atomic
from ledger_service.logging_config import get_logger
from .accounts import CENTS, AccountService
from .errors import LedgerError, TransferErrorKind, TransferException

logger = get_logger("ledger_service.services.transfers")

TRANSFER_TIMEOUT_SECONDS = float(os.getenv("TRANSFER_TIMEOUT_SECONDS", "5"))


class DeleteOutcome(str, enum.Enum):
    DELETED = "DELETED"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(frozen=True)
class DeleteResult:
    outcome: DeleteOutcome
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is DeleteOutcome.DELETED

    def __bool__(self) -> bool:
        return self.ok


def _to_amount(amount: Union[Decimal, int, float, str]) -> Decimal:
    """
    Parse a transfer amount into cents. Sub-cent digits are rounded half-even.
    """
    try:
        value = Decimal(str(amount))
        if not value.is_finite():
            raise InvalidOperation(amount)
        return value.quantize(CENTS)
    except (InvalidOperation, ValueError):
        raise TransferException(TransferErrorKind.INVALID_AMOUNT, f"Invalid amount: {amount!r}")


class TransferService:
    def __init__(
        self,
        db: AsyncSession,
        account_service: Optional[AccountService] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.db = db
        self.accounts = account_service or AccountService(db)
        self.timeout_seconds = TRANSFER_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds

    async def get_transfer_by_id(self, transfer_id: int) -> Transfer:
        transfer = await crud.get_transfer_by_id(self.db, transfer_id)
        if transfer is None:
            logger.warning("Transfer not found id=%s", transfer_id)
            raise TransferException(
                TransferErrorKind.INVALID_TRANSFER_ID, f"Transfer {transfer_id} not found"
            )
        return transfer

    async def list_transfers_for_account(self, account_id: int, limit: int = 20) -> List[Transfer]:
        """
        Transfers where the account is sender or receiver, newest first.
        """
        await self.accounts.get_account_by_id(account_id)
        return await crud.get_transfers_for_account(self.db, account_id, limit=limit)

    async def transfer_money(
        self,
        sender_id: int,
        receiver_id: int,
        amount: Union[Decimal, int, float, str],
        reason: str = "",
    ) -> Transfer:
        logger.info(
            "Transfer request sender=%s receiver=%s amount=%s reason=%r",
            sender_id,
            receiver_id,
            amount,
            reason,
        )
        try:
            # Only lock, checks and writes are bounded; commit runs outside the timeout
            async with atomic(self.db):
                transfer = await asyncio.wait_for(
                    self._apply_transfer(sender_id, receiver_id, amount, reason),
                    timeout=self.timeout_seconds,
                )
        except asyncio.TimeoutError:
            logger.error(
                "Transfer timed out after %ss sender=%s receiver=%s",
                self.timeout_seconds,
                sender_id,
                receiver_id,
            )
            raise TransferException(
                TransferErrorKind.TRANSFER_TIMEOUT,
                f"Transfer did not complete within {self.timeout_seconds}s",
            )
        except LedgerError as e:
            logger.warning(
                "Transfer rejected sender=%s receiver=%s kind=%s: %s",
                sender_id,
                receiver_id,
                e.kind.value,
                e.message,
            )
            raise
        except SQLAlchemyError:
            logger.exception("Transfer failed (DB error) sender=%s receiver=%s", sender_id, receiver_id)
            raise

        logger.info(
            "Transfer success id=%s sender=%s receiver=%s amount=%s",
            transfer.id,
            sender_id,
            receiver_id,
            transfer.amount,
        )
        return transfer

    async def _apply_transfer(self, sender_id, receiver_id, amount, reason) -> Transfer:
        await self.accounts.lock_accounts(sender_id, receiver_id)

        sender = await self.accounts.get_account_by_id(sender_id)
        receiver = await self.accounts.get_account_by_id(receiver_id)

        # Separate loads of one row may be distinct objects; compare ids
        if sender.id == receiver.id:
            raise TransferException(TransferErrorKind.SAME_ACCOUNT_TRANSFER)

        value = _to_amount(amount)
        if value <= 0:
            raise TransferException(
                TransferErrorKind.INVALID_AMOUNT, f"Transfer amount must be positive, got {value}"
            )

        if Decimal(sender.balance) < value:
            raise TransferException(
                TransferErrorKind.INSUFFICIENT_BALANCE,
                f"Account {sender.id} balance {sender.balance} is below {value}",
            )

        new_sender_balance = (Decimal(sender.balance) - value).quantize(CENTS)
        updated_sender = await self.accounts.update_account_balance(sender, new_sender_balance)

        new_receiver_balance = (Decimal(receiver.balance) + value).quantize(CENTS)
        updated_receiver = await self.accounts.update_account_balance(receiver, new_receiver_balance)

        transfer = Transfer(
            sender=updated_sender,
            receiver=updated_receiver,
            amount=value,
            reason=reason,
            date=datetime.utcnow(),
            status=TransferStatus.SUCCESSFUL,
            sender_balance_after=updated_sender.balance,
            receiver_balance_after=updated_receiver.balance,
        )
        return await crud.create_transfer(self.db, transfer)

    async def delete_by_id(self, transfer_id: int) -> DeleteResult:
        """
        Delete a transfer record. Never raises: the outcome says whether the row
        was removed, did not exist, or the store failed.
        """
        try:
            async with atomic(self.db):
                deleted = await crud.delete_transfer(self.db, transfer_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete transfer id=%s", transfer_id)
            return DeleteResult(DeleteOutcome.STORAGE_FAILURE, detail=str(e))
        except Exception as e:
            logger.exception("Unexpected error deleting transfer id=%s", transfer_id)
            return DeleteResult(DeleteOutcome.STORAGE_FAILURE, detail=f"{type(e).__name__}: {e}")

        if not deleted:
            logger.warning("Delete requested for unknown transfer id=%s", transfer_id)
            return DeleteResult(DeleteOutcome.NOT_FOUND, detail=f"Transfer {transfer_id} not found")

        logger.info("Deleted transfer id=%s", transfer_id)
        return DeleteResult(DeleteOutcome.DELETED)
