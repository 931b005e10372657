"""
Information page for the phonebook.

Returns a short plain‑text summary with the number of stored contacts
and the time the request was served.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from coursework_api.app.api.endpoints.persons import get_contact_book
from coursework_api.app.services.contact_service import ContactBook

router = APIRouter()


@router.get("/info", response_class=PlainTextResponse)
async def get_info(book: ContactBook = Depends(get_contact_book)) -> str:
    now = datetime.now().astimezone()
    return f"Phonebook has info for {len(book)} people\n{now.strftime('%a %b %d %Y %H:%M:%S %Z')}"
