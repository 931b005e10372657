"""
Blog list endpoints.

``GET /`` lists every stored entry and ``POST /`` creates one.  A
failed creation is handed to ``failure_response`` which decides the
status code and error body.
"""

from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from coursework_api.app.core.errors import StoreFailure, failure_response
from coursework_api.app.schemas.blog import BlogCreate, BlogRead
from coursework_api.app.services.blog_service import BlogService

router = APIRouter()


@router.get("/", response_model=List[BlogRead])
async def list_blogs() -> List[BlogRead]:
    """Return all blog entries."""
    return await BlogService.list_blogs()


@router.post(
    "/",
    response_model=BlogRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Rejected by the store"}, 500: {"description": "Store failure"}},
)
async def create_blog(blog_in: BlogCreate):
    """Create a new blog entry and return it as stored."""
    result = await BlogService.create_blog(blog_in)
    if isinstance(result, StoreFailure):
        return failure_response(result)
    return result
