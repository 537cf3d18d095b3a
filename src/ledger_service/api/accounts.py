from typing import List

from fastapi import APIRouter, Depends, Query

from ledger_service.logging_config import get_logger
from ledger_service.services import AccountService, TransferService
from .deps import get_account_service, get_transfer_service
from .schemas import AccountCreate, AccountOut, AccountUpdate, ErrorOut, TransferOut
from .serializers import serialize_account, serialize_transfer

logger = get_logger("ledger_service.api.accounts")

router = APIRouter(prefix="/account", tags=["accounts"])


@router.post("/create", response_model=AccountOut)
async def create_account(payload: AccountCreate, accounts: AccountService = Depends(get_account_service)):
    """
    Create an account. The id is assigned by the store; balance defaults to 0.
    """
    logger.info("Create account request first_name=%s last_name=%s", payload.first_name, payload.last_name)
    account = await accounts.create_account(payload.model_dump(exclude_none=True))
    return serialize_account(account)


@router.get("/{account_id}", response_model=AccountOut, responses={404: {"model": ErrorOut}})
async def get_account(account_id: int, accounts: AccountService = Depends(get_account_service)):
    account = await accounts.get_account_by_id(account_id)
    return serialize_account(account)


@router.put("/{account_id}", response_model=AccountOut, responses={404: {"model": ErrorOut}})
async def update_account(
    account_id: int,
    payload: AccountUpdate,
    accounts: AccountService = Depends(get_account_service),
):
    """
    Update contact details and PIN. Balance cannot be changed here.
    """
    account = await accounts.update_account_details(account_id, payload.model_dump(exclude_unset=True))
    return serialize_account(account)


@router.get(
    "/{account_id}/transfers",
    response_model=List[TransferOut],
    responses={404: {"model": ErrorOut}},
)
async def get_account_transfers(
    account_id: int,
    limit: int = Query(20, ge=1, le=200),
    transfers: TransferService = Depends(get_transfer_service),
):
    """
    Return recent transfers sent or received by an account.
    """
    logger.info("Fetching transfers for account_id=%s limit=%s", account_id, limit)
    items = await transfers.list_transfers_for_account(account_id, limit=limit)
    return [serialize_transfer(t) for t in items]
