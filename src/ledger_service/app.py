"""
FastAPI application entrypoint for the ledger service.

This module wires together:
- Logging configuration (file-based under LOG_DIR)
- Request logging middleware
- Domain routers under api/ (accounts, transfers)
- Mapping of ledger domain errors to HTTP responses
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.requests import Request

from ledger_service.db.session import engine, init_db
from ledger_service.logging_config import get_logger, setup_logging
from ledger_service.api.accounts import router as accounts_router
from ledger_service.api.errors import register_exception_handlers
from ledger_service.api.transfers import router as transfers_router

# Load environment variables early
load_dotenv()

# Configure logging before creating the app
setup_logging()
logger = get_logger("ledger_service")

AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "true").lower() in ("1", "true", "yes")

app = FastAPI(title="Ledger Service API", version="1.0.0")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Lightweight request logger to help trace ledger traffic.
    """
    try:
        body = await request.body()
        logger.info(
            "HTTP %s %s from %s body=%s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
            body.decode(errors="ignore")[:200],
        )
    except Exception:
        logger.exception("Failed to read request body for logging")
    response = await call_next(request)
    return response


@app.get("/api/health")
async def health():
    """
    Simple health check endpoint.
    """
    return {"status": "healthy"}


# Log effective DB URL once at import time, without credentials
logger.info("Effective DATABASE_URL: %s", engine.url.render_as_string(hide_password=True))

register_exception_handlers(app)

# Include domain routers
app.include_router(accounts_router, prefix="/api")
app.include_router(transfers_router, prefix="/api")


@app.on_event("startup")
async def on_startup():
    if AUTO_CREATE_TABLES:
        await init_db()
        logger.info("Tables ensured on %s", engine.url.get_backend_name())
    logger.info("Ledger service starting up")


@app.on_event("shutdown")
async def on_shutdown():
    try:
        await engine.dispose()
    except Exception:
        logger.exception("Error disposing engine on shutdown")
    logger.info("Ledger service shutting down")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8001")))
