import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ADMIN_CODES = {"alpha-code": "Alpha", "beta-code": "Beta"}


def _configure_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("ADMIN_CODES", json.dumps(ADMIN_CODES))
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "false")
    monkeypatch.setenv("JWT_SECRET", "test-secret")


@pytest.fixture()
def db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_env(tmp_path, monkeypatch)

    from app import models as _models  # noqa: F401
    from app.core.config import clear_settings_cache
    from app.db.base import Base
    from app.db.session import get_engine, get_session_factory, reset_engine

    clear_settings_cache()
    reset_engine()
    Base.metadata.create_all(bind=get_engine())

    with get_session_factory()() as session:
        yield session

    Base.metadata.drop_all(bind=get_engine())
    reset_engine()


@pytest.fixture()
def app_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _configure_env(tmp_path, monkeypatch)

    from app import models as _models  # noqa: F401
    from app.core.config import clear_settings_cache
    from app.db.base import Base
    from app.db.session import get_engine, reset_engine
    from app.main import create_app

    clear_settings_cache()
    reset_engine()
    Base.metadata.create_all(bind=get_engine())

    app = create_app()
    with TestClient(app) as client:
        yield client

    Base.metadata.drop_all(bind=get_engine())
    reset_engine()


def anonymous_headers(client: TestClient) -> dict[str, str]:
    response = client.post("/auth/anonymous", json={})
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def admin_headers(client: TestClient, code: str = "alpha-code") -> dict[str, str]:
    headers = anonymous_headers(client)
    response = client.post("/auth/admin/verify", headers=headers, json={"code": code})
    assert response.status_code == 200, response.text
    return headers
