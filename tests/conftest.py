import os
import tempfile

# Must be set before ledger_service.db.session is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "ledger_service_test_logs"))
os.environ["AUTO_CREATE_TABLES"] = "false"

from decimal import Decimal

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ledger_service.db.deps import get_db
from ledger_service.db.session import init_db
from ledger_service.services import AccountService, TransferService


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def accounts(db):
    return AccountService(db)


@pytest.fixture
def transfers(db, accounts):
    return TransferService(db, accounts)


@pytest.fixture
def make_account(accounts):
    async def _make(first_name="Jane", last_name="Doe", balance="0.00", **extra):
        fields = {
            "first_name": first_name,
            "last_name": last_name,
            "email": f"{first_name.lower()}.{last_name.lower()}@example.com",
            "phone_number": "555-0100",
            "pin": 1234,
            "balance": Decimal(balance),
        }
        fields.update(extra)
        return await accounts.create_account(fields)

    return _make


@pytest_asyncio.fixture
async def client(session_factory):
    from ledger_service.app import app

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
