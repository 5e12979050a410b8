import asyncio
import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

import lockbox.models  # noqa: F401
from lockbox.main import app
from lockbox.database import Base, get_db


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'lockbox.db'}",
        poolclass=NullPool,
    )
    TestingSessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def init_db():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    asyncio.run(init_db())

    yield TestingSessionLocal
    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Register a user (if needed) and return bearer headers for it."""

    def _login(email="a@x.com", password="pw1"):
        client.post("/api/register", json={"email": email, "password": password})
        r = client.post("/api/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}

    return _login


@pytest.fixture
def default_vault_id(client):
    def _vault_id(headers):
        r = client.get("/api/vaults", headers=headers)
        assert r.status_code == 200
        return r.json()[0]["id"]

    return _vault_id


@pytest.fixture
def make_item(client, default_vault_id):
    def _make_item(headers, name="site", type="login", data=None, favorite=None, vault_id=None):
        body = {"type": type, "name": name, "data": data if data is not None else {"u": "a", "p": "b"}}
        if favorite is not None:
            body["favorite"] = favorite
        vault_id = vault_id or default_vault_id(headers)
        r = client.post(f"/api/vaults/{vault_id}/items", json=body, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()

    return _make_item
