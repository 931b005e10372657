from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from coursework_api.app.services.contact_service import SEED_CONTACTS, ContactBook


def test_list_returns_seeded_contacts_in_order(client: TestClient) -> None:
    resp = client.get("/api/persons")

    assert resp.status_code == 200
    assert resp.json() == SEED_CONTACTS
    assert [p["id"] for p in resp.json()] == [1, 2, 3, 4]


def test_get_single_contact(client: TestClient) -> None:
    resp = client.get("/api/persons/2")

    assert resp.status_code == 200
    assert resp.json() == {"name": "Ada Lovelace", "number": "39-44-5323523", "id": 2}


def test_missing_contact_is_404(client: TestClient) -> None:
    resp = client.get("/api/persons/99")

    assert resp.status_code == 404
    assert resp.json() == {"error": "contact not found"}


def test_info_page_counts_contacts(client: TestClient) -> None:
    resp = client.get("/info")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("Phonebook has info for 4 people\n")


def test_unknown_endpoint(client: TestClient) -> None:
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json() == {"error": "unknown endpoint"}


def test_contact_book_rejects_duplicate_ids() -> None:
    records = [
        {"name": "A", "number": "1", "id": 1},
        {"name": "B", "number": "2", "id": 1},
    ]
    with pytest.raises(ValueError):
        ContactBook(records)
