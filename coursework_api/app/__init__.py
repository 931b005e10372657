"""
Application package initializer.

Each exercise (feedback, contacts, blogs) lives in its own service and
schema module and exposes a router defined in ``api/endpoints``.  The
routers are aggregated in ``api/router.py`` and mounted by
``main.create_app``.
"""

from .main import app  # noqa: F401
