# Account Store and Transfer Store: plain CRUD over the ORM models.
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Account, Transfer


async def create_account(db: AsyncSession, fields: Dict[str, Any]) -> Account:
    account = Account(**fields)
    db.add(account)
    await db.flush()
    return account


async def get_account_by_id(db: AsyncSession, account_id: int) -> Optional[Account]:
    q = select(Account).where(Account.id == account_id)
    res = await db.execute(q)
    return res.scalars().first()


def lock_accounts_stmt(account_ids: Iterable[int]) -> Select:
    """
    One SELECT ... FOR UPDATE over the given rows, in ascending id order, so
    transfers crossing the same pair of accounts take their locks alike.
    """
    ids = sorted(set(account_ids))
    return select(Account).where(Account.id.in_(ids)).order_by(Account.id).with_for_update()


async def lock_accounts(db: AsyncSession, account_ids: Iterable[int]) -> List[Account]:
    q = lock_accounts_stmt(account_ids)
    res = await db.execute(q)
    return list(res.scalars().all())


async def create_transfer(db: AsyncSession, transfer: Transfer) -> Transfer:
    db.add(transfer)
    await db.flush()
    return transfer


async def get_transfer_by_id(db: AsyncSession, transfer_id: int) -> Optional[Transfer]:
    q = select(Transfer).where(Transfer.id == transfer_id)
    res = await db.execute(q)
    return res.scalars().first()


async def get_transfers_for_account(db: AsyncSession, account_id: int, limit: int = 20) -> List[Transfer]:
    q = (
        select(Transfer)
        .where(or_(Transfer.sender_id == account_id, Transfer.receiver_id == account_id))
        .order_by(Transfer.date.desc(), Transfer.id.desc())
        .limit(limit)
    )
    res = await db.execute(q)
    return list(res.scalars().all())


async def delete_transfer(db: AsyncSession, transfer_id: int) -> bool:
    """
    Returns True when a row was removed.
    """
    res = await db.execute(delete(Transfer).where(Transfer.id == transfer_id))
    return bool(res.rowcount)
