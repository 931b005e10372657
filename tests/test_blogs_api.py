from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from coursework_api.app.core import errors
from coursework_api.app.core.config import settings
from coursework_api.app.schemas.blog import BlogCreate
from coursework_api.app.services import blog_service


def test_empty_list(client: TestClient) -> None:
    resp = client.get("/api/blogs/")

    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_list(client: TestClient) -> None:
    payload = {"title": "T", "author": "A", "url": "U", "likes": 5}

    created = client.post("/api/blogs/", json=payload)
    assert created.status_code == 201
    body = created.json()
    assert isinstance(body["id"], int)
    assert {k: body[k] for k in payload} == payload

    blogs = client.get("/api/blogs/").json()
    assert blogs == [body]


def test_likes_default_to_zero(client: TestClient) -> None:
    resp = client.post("/api/blogs/", json={"title": "T", "author": "A", "url": "U"})

    assert resp.status_code == 201
    assert resp.json()["likes"] == 0


def test_ids_are_unique(client: TestClient) -> None:
    first = client.post("/api/blogs/", json={"title": "a", "url": "x"}).json()
    second = client.post("/api/blogs/", json={"title": "b", "url": "y"}).json()

    assert first["id"] != second["id"]
    assert [b["id"] for b in client.get("/api/blogs/").json()] == [first["id"], second["id"]]


@pytest.mark.parametrize(
    "payload",
    [
        {"author": "A", "url": "U"},
        {"title": "T", "author": "A"},
        {"title": "T", "author": "A", "url": "U", "likes": -1},
    ],
)
def test_store_rejects_invalid_entry(client: TestClient, payload: dict) -> None:
    resp = client.post("/api/blogs/", json=payload)

    assert resp.status_code == 400
    assert "error" in resp.json()
    assert client.get("/api/blogs/").json() == []


def test_store_failure_is_translated(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_connection() -> sqlite3.Connection:
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        return conn  # no blogs table, so the insert fails

    monkeypatch.setattr(blog_service, "get_connection", broken_connection)

    resp = client.post("/api/blogs/", json={"title": "T", "author": "A", "url": "U"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "internal store error"}


def test_failure_classification() -> None:
    rejected = errors.failure_from_exception("op", sqlite3.IntegrityError("NOT NULL"))
    broken = errors.failure_from_exception("op", sqlite3.OperationalError("disk I/O error"))

    assert rejected.kind == errors.VALIDATION
    assert broken.kind == errors.STORE
    assert errors.failure_response(rejected).status_code == 400
    assert errors.failure_response(broken).status_code == 500


def test_unopenable_store_on_create(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "gone" / "coursework.db"))

    resp = client.post("/api/blogs/", json={"title": "T", "author": "A", "url": "U"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "internal store error"}


def test_unopenable_store_on_list(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "gone" / "coursework.db"))

    resp = client.get("/api/blogs/")
    assert resp.status_code == 500
    assert resp.json() == {"error": "internal store error"}


def test_connection_error_is_raised_as_store_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse() -> sqlite3.Connection:
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(blog_service, "get_connection", refuse)

    with pytest.raises(errors.StoreError) as ei:
        asyncio.run(blog_service.BlogService.list_blogs())
    assert ei.value.failure.kind == errors.STORE

    failure = asyncio.run(blog_service.BlogService.create_blog(BlogCreate(title="T", url="U")))
    assert failure == errors.StoreFailure(
        kind=errors.STORE, operation="create_blog", message="unable to open database file"
    )


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"title": "T", "url": "U", "likes": "x"}, "likes"),
        ({"title": 5, "url": "U"}, "title"),
    ],
)
def test_wrong_types_use_error_body(client: TestClient, payload: dict, field: str) -> None:
    resp = client.post("/api/blogs/", json=payload)

    assert resp.status_code == 400
    assert resp.json()["error"].startswith(f"{field}: ")
