"""
Account Service: "fetch or fail" lookups and the only sanctioned path
for changing an account's stored balance.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.db import crud
from ledger_service.db.models import Account
from ledger_service.db.session import atomic
from ledger_service.logging_config import get_logger
from .errors import AccountErrorKind, AccountException

logger = get_logger("ledger_service.services.accounts")

CENTS = Decimal("0.01")

# Fields a caller may change through update_account_details
DETAIL_FIELDS = ("first_name", "last_name", "email", "phone_number", "pin")


class AccountService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_account(self, fields: Dict[str, Any]) -> Account:
        """
        Persist a new account. The store assigns the id; balance defaults to 0.00.
        """
        values = {k: v for k, v in fields.items() if k != "id"}
        values["balance"] = Decimal(values.get("balance") or 0).quantize(CENTS)
        now_ts = datetime.utcnow()
        values.setdefault("created_at", now_ts)
        values.setdefault("updated_at", now_ts)

        async with atomic(self.db):
            account = await crud.create_account(self.db, values)
        logger.info("Created account id=%s balance=%s", account.id, account.balance)
        return account

    async def get_account_by_id(self, account_id: int) -> Account:
        account = await crud.get_account_by_id(self.db, account_id)
        if account is None:
            logger.warning("Account not found id=%s", account_id)
            raise AccountException(
                AccountErrorKind.ACCOUNT_NOT_FOUND, f"Account {account_id} not found"
            )
        return account

    async def lock_accounts(self, *account_ids: int) -> List[Account]:
        """
        Row-lock the given accounts for the rest of the current transaction.
        Unknown ids are ignored here; get_account_by_id reports them.
        """
        return await crud.lock_accounts(self.db, account_ids)

    async def update_account_balance(self, account: Account, new_balance: Decimal) -> Account:
        """
        Set a new balance on an existing account and flush it to the store.
        Sign and sufficiency checks are the caller's job.
        """
        account.balance = Decimal(new_balance).quantize(CENTS)
        account.updated_at = datetime.utcnow()
        await self.db.flush()
        return account

    async def update_account_details(self, account_id: int, fields: Dict[str, Any]) -> Account:
        async with atomic(self.db):
            account = await self.get_account_by_id(account_id)
            for name in DETAIL_FIELDS:
                if name in fields and fields[name] is not None:
                    setattr(account, name, fields[name])
            account.updated_at = datetime.utcnow()
            await self.db.flush()
        logger.info("Updated details for account id=%s fields=%s", account_id, sorted(fields))
        return account
