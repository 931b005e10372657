"""
Pydantic schemas for blog list entries.

The create schema deliberately leaves every field optional: whether a
title or URL is present is checked by the ``blogs`` table constraints,
and a rejected insert is reported back as a validation failure.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    """Schema for creating a new blog entry."""

    title: Optional[str] = Field(None, description="Title of the post")
    author: Optional[str] = Field(None, description="Author of the post")
    url: Optional[str] = Field(None, description="Where the post can be read")
    likes: Optional[int] = Field(None, description="Number of likes; defaults to 0")


class BlogRead(BaseModel):
    """Schema for reading a blog entry."""

    title: str
    author: Optional[str]
    url: str
    likes: int
    id: int
