"""
Service layer for the phonebook.

Contacts live in memory.  The collection is built from ``SEED_CONTACTS``
when the application starts and is read‑only afterwards, so lookups
need no locking.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from coursework_api.app.schemas.contact import ContactRead


SEED_CONTACTS: List[Dict[str, object]] = [
    {"name": "Arto Hellas", "number": "040-123456", "id": 1},
    {"name": "Ada Lovelace", "number": "39-44-5323523", "id": 2},
    {"name": "Dan Abramov", "number": "12-43-234345", "id": 3},
    {"name": "asdq", "number": "-2323-232-3", "id": 4},
]


class ContactBook:
    """Ordered, read‑only collection of contacts."""

    def __init__(self, records: Iterable[Dict[str, object]] = SEED_CONTACTS) -> None:
        contacts = [self._record_to_contact_read(r) for r in records]
        ids = [c.id for c in contacts]
        if len(ids) != len(set(ids)):
            raise ValueError("Contact ids must be unique")
        self._contacts = tuple(contacts)

    def list_contacts(self) -> List[ContactRead]:
        """Return every contact in storage order."""
        return list(self._contacts)

    def get_contact(self, contact_id: int) -> Optional[ContactRead]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def __len__(self) -> int:
        return len(self._contacts)

    @staticmethod
    def _record_to_contact_read(record: Dict[str, object]) -> ContactRead:
        """Convert a raw seed record to a ContactRead schema instance."""
        return ContactRead(name=record["name"], number=record["number"], id=record["id"])
