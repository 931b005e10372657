"""
Pydantic schemas for phonebook contacts.

Contacts are seeded at start‑up and never change afterwards, so only a
read schema exists.
"""

from pydantic import BaseModel, Field


class ContactRead(BaseModel):
    """Schema for reading a contact."""

    name: str = Field(..., min_length=1, description="Display name of the person")
    number: str = Field(..., description="Phone number as entered; not validated")
    id: int
