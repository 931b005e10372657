"""
Top‑level API router.

This router aggregates the routers of each exercise under a single
prefix.  The ``/info`` page is not part of it; ``main`` mounts that one
at the application root.
"""

from fastapi import APIRouter

from .endpoints import blogs, feedback, persons

router = APIRouter()

router.include_router(persons.router, prefix="/persons", tags=["persons"])
router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
