"""Tests for AccountService: lookups, balance mutation, detail updates."""

from decimal import Decimal

import pytest

from ledger_service.services import AccountErrorKind, AccountException


async def test_create_account_assigns_id_and_zero_balance(make_account):
    account = await make_account("Jane", "Doe")

    assert account.id is not None
    assert account.balance == Decimal("0.00")
    assert account.created_at is not None


async def test_create_account_ignores_caller_supplied_id(accounts):
    account = await accounts.create_account({"id": 999, "first_name": "Ann", "last_name": "Lee"})

    assert account.id != 999


async def test_get_account_by_id_returns_stored_account(accounts, make_account):
    created = await make_account("Jane", "Doe", balance="12.50")

    found = await accounts.get_account_by_id(created.id)

    assert found.id == created.id
    assert found.first_name == "Jane"
    assert found.last_name == "Doe"
    assert found.balance == Decimal("12.50")


async def test_get_account_by_id_unknown_raises_account_not_found(accounts):
    with pytest.raises(AccountException) as exc_info:
        await accounts.get_account_by_id(424242)

    assert exc_info.value.kind is AccountErrorKind.ACCOUNT_NOT_FOUND


async def test_update_account_balance_persists_value(db, accounts, make_account):
    account = await make_account(balance="10.00")

    updated = await accounts.update_account_balance(account, Decimal("-3.456"))
    await db.commit()

    assert updated is account
    assert (await accounts.get_account_by_id(account.id)).balance == Decimal("-3.46")


async def test_update_account_details_never_touches_balance(accounts, make_account):
    account = await make_account("Jane", "Doe", balance="20.00")

    updated = await accounts.update_account_details(
        account.id, {"email": "jane@new.example.com", "pin": 4321, "balance": Decimal("999")}
    )

    assert updated.email == "jane@new.example.com"
    assert updated.pin == 4321
    assert (await accounts.get_account_by_id(account.id)).balance == Decimal("20.00")


async def test_update_account_details_unknown_account(accounts):
    with pytest.raises(AccountException) as exc_info:
        await accounts.update_account_details(77, {"email": "x@example.com"})

    assert exc_info.value.kind is AccountErrorKind.ACCOUNT_NOT_FOUND
