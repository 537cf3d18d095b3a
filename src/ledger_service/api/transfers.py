from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from ledger_service.logging_config import get_logger
from ledger_service.services import DeleteOutcome, TransferService
from .deps import get_transfer_service
from .schemas import ErrorOut, TransferIn, TransferOut
from .serializers import serialize_transfer

logger = get_logger("ledger_service.api.transfers")

router = APIRouter(prefix="/transfer", tags=["transfers"])

_ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    409: {"model": ErrorOut},
    503: {"model": ErrorOut},
}


@router.post("", response_model=TransferOut, status_code=201, responses=_ERROR_RESPONSES)
async def create_transfer(payload: TransferIn, transfers: TransferService = Depends(get_transfer_service)):
    """
    Move money from sender to receiver in a single DB transaction.
    """
    transfer = await transfers.transfer_money(
        payload.sender_id, payload.receiver_id, payload.amount, payload.reason
    )
    return serialize_transfer(transfer)


@router.get("/{transfer_id}", response_model=TransferOut, responses={404: {"model": ErrorOut}})
async def get_transfer(transfer_id: int, transfers: TransferService = Depends(get_transfer_service)):
    transfer = await transfers.get_transfer_by_id(transfer_id)
    return serialize_transfer(transfer)


@router.delete("/{transfer_id}", status_code=204, responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}})
async def delete_transfer(transfer_id: int, transfers: TransferService = Depends(get_transfer_service)):
    result = await transfers.delete_by_id(transfer_id)
    if result.outcome is DeleteOutcome.DELETED:
        return Response(status_code=204)
    status_code = 404 if result.outcome is DeleteOutcome.NOT_FOUND else 500
    return JSONResponse(
        status_code=status_code,
        content={"error": result.outcome.value, "detail": result.detail or ""},
    )
