from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from folio.config import Settings
from folio.database import build_engine, build_session_factory, create_tables
from folio.main import create_app


class FakeRedis:
    """In-memory stand-in for the handful of ``redis.asyncio`` calls the app makes."""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = str(value)
        if ex is not None:
            self.ttls[key] = ex
        return True

    async def incr(self, key):
        value = int(self.store.get(key, 0)) + 1
        self.store[key] = str(value)
        return value

    async def expire(self, key, seconds):
        self.ttls[key] = seconds
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    async def exists(self, *keys):
        return sum(1 for key in keys if key in self.store)

    async def aclose(self):
        pass


class BrokenRedis(FakeRedis):
    async def get(self, key):
        raise ConnectionError("redis unavailable")

    async def incr(self, key):
        raise ConnectionError("redis unavailable")

    async def exists(self, *keys):
        raise ConnectionError("redis unavailable")


class RecordingNotifier:
    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    async def send_password_reset(self, email: str, reset_token: str) -> None:
        self.sent.append((email, reset_token))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'folio.db'}")
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("CREATE_TABLES", "true")
    monkeypatch.delenv("REDIS_URL", raising=False)
    return monkeypatch


@pytest.fixture
def settings(env) -> Settings:
    return Settings()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def app(settings, fake_redis, notifier):
    return create_app(settings, redis=fake_redis, notifier=notifier)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def session_factory(settings):
    engine = build_engine(settings)
    await create_tables(engine)
    yield build_session_factory(engine)
    await engine.dispose()


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register(
    client: TestClient,
    email: str = "alice@example.com",
    password: str = "secret",
    name: Optional[str] = "Alice",
) -> Tuple[dict, str]:
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password_hash": password, "name": name},
    )
    assert response.status_code == 200, response.text
    body = response.json()
    return body["user"], body["token"]


@pytest.fixture
def alice(client):
    return register(client, "alice@example.com", "secret", "Alice")


@pytest.fixture
def bob(client):
    return register(client, "bob@example.com", "hunter2", "Bob")
