from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from coursework_api.app.core.config import settings
from coursework_api.app.main import create_app


@pytest.fixture
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    db_path = tmp_path / "coursework.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    return db_path


@pytest.fixture
def client(database: Path) -> Iterator[TestClient]:
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
