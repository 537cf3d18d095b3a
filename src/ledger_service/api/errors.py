"""
Maps ledger domain errors to HTTP responses.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.requests import Request

from ledger_service.logging_config import get_logger
from ledger_service.services.errors import AccountErrorKind, LedgerError, TransferErrorKind

logger = get_logger("ledger_service.api.errors")

STATUS_BY_KIND = {
    AccountErrorKind.ACCOUNT_NOT_FOUND: 404,
    TransferErrorKind.INVALID_TRANSFER_ID: 404,
    TransferErrorKind.SAME_ACCOUNT_TRANSFER: 400,
    TransferErrorKind.INVALID_AMOUNT: 400,
    TransferErrorKind.INSUFFICIENT_BALANCE: 409,
    TransferErrorKind.TRANSFER_TIMEOUT: 503,
}


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 400)
    logger.info(
        "HTTP %s %s -> %s (%s)", request.method, request.url.path, status_code, exc.kind.value
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.kind.value, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
