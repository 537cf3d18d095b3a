from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.db.deps import get_db
from ledger_service.services import AccountService, TransferService


def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_transfer_service(db: AsyncSession = Depends(get_db)) -> TransferService:
    return TransferService(db)
