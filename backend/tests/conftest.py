"""
Pytest configuration and fixtures (API back-office sur SQLite en mémoire).
"""

import os

# Variables d’environnement de test avant l’import de l’app
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_KEY"] = ""
os.environ["AUTH_REQUIRED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["S3_BUCKET"] = ""
os.environ["S3_PUBLIC_BASE_URL"] = ""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

import backoffice.models  # noqa: F401
from backoffice.db.base import Base
from backoffice.db.session import build_engine, get_db
from backoffice.main import app

from auth_utils import ADMIN_CM


@pytest_asyncio.fixture
async def engine():
    """Engine SQLite partagé (StaticPool) avec clés étrangères actives."""
    eng = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """Client HTTP sur l’app ASGI, get_db redirigé vers la base de test."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def vehicle_payload():
    return {
        "licensePlate": "LT-1234-AB",
        "brand": "Toyota",
        "model": "Hilux",
        "type": "TRUCK",
        "fuelType": "DIESEL",
        "status": "AVAILABLE",
    }


@pytest_asyncio.fixture
async def vehicle(client, vehicle_payload):
    r = await client.post("/vehicles", json=vehicle_payload, headers=ADMIN_CM)
    assert r.status_code == 201, r.text
    return r.json()


@pytest_asyncio.fixture
async def employee(client):
    r = await client.post(
        "/personnel-users",
        json={
            "firstName": "Aminata",
            "lastName": "Traoré",
            "email": "aminata.traore@example.com",
            "employeeNumber": "CAM-0001",
        },
        headers=ADMIN_CM,
    )
    assert r.status_code == 201, r.text
    return r.json()
