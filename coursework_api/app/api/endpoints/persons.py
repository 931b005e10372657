"""
Phonebook endpoints.

The contact collection is seeded at start‑up and exposed read‑only.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from coursework_api.app.schemas.contact import ContactRead
from coursework_api.app.services.contact_service import ContactBook

router = APIRouter()


def get_contact_book(request: Request) -> ContactBook:
    """Return the contact book owned by the running application."""
    return request.app.state.contacts


@router.get("", response_model=List[ContactRead])
async def list_persons(book: ContactBook = Depends(get_contact_book)) -> List[ContactRead]:
    """Return every contact in storage order."""
    return book.list_contacts()


@router.get("/{person_id}", response_model=ContactRead)
async def get_person(person_id: int, book: ContactBook = Depends(get_contact_book)) -> ContactRead:
    """Retrieve a single contact by ID.

    Returns HTTP 404 if the contact does not exist.
    """
    contact = book.get_contact(person_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="contact not found")
    return contact
