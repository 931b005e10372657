"""
Service layer for the blog list.

Blog entries are stored in the ``blogs`` table.  Creation performs no
checks of its own: the table's ``NOT NULL`` and ``CHECK`` constraints
decide whether an entry is acceptable.  Instead of raising, a rejected
or failed insert is returned to the caller as a ``StoreFailure``.
Listing has no result to pair a failure with, so it raises
``StoreError`` and leaves the response to the registered handler.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Union

from coursework_api.app.core.db import get_connection
from coursework_api.app.core.errors import (
    VALIDATION,
    StoreError,
    StoreFailure,
    failure_from_exception,
)
from coursework_api.app.schemas.blog import BlogCreate, BlogRead


class BlogService:
    """Service class for listing and creating blog entries."""

    @classmethod
    async def list_blogs(cls) -> List[BlogRead]:
        """Return all blog entries in insertion order.

        Raises ``StoreError`` if the store cannot be read.
        """
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = get_connection()
            rows = conn.execute(
                "SELECT id, title, author, url, likes FROM blogs ORDER BY id ASC"
            ).fetchall()
        except sqlite3.Error as exc:
            logging.getLogger(__name__).error("Failed to list blog entries: %s", exc)
            raise StoreError(failure_from_exception("list_blogs", exc)) from exc
        finally:
            if conn is not None:
                conn.close()
        return [cls._row_to_blog_read(row) for row in rows]

    @classmethod
    async def create_blog(cls, data: BlogCreate) -> Union[BlogRead, StoreFailure]:
        """Insert a new blog entry.

        Returns the stored entry on success.  If the store rejects the
        insert (missing title or URL, negative likes) or cannot be
        reached at all, the corresponding ``StoreFailure`` is returned
        instead.  ``likes`` defaults to 0 when omitted.
        """
        logger = logging.getLogger(__name__)
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = get_connection()
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO blogs (title, author, url, likes) VALUES (?, ?, ?, ?)",
                (data.title, data.author, data.url, data.likes if data.likes is not None else 0),
            )
            blog_id = cursor.lastrowid
            conn.commit()
            row = cursor.execute(
                "SELECT id, title, author, url, likes FROM blogs WHERE id = ?",
                (blog_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            if conn is not None:
                conn.rollback()
            failure = failure_from_exception("create_blog", exc)
            if failure.kind == VALIDATION:
                logger.warning("Rejected blog entry: %s", failure.message)
            else:
                logger.error("Failed to store blog entry: %s", failure.message)
            return failure
        finally:
            if conn is not None:
                conn.close()
        logger.info("Created blog %s", blog_id)
        return cls._row_to_blog_read(row)

    @staticmethod
    def _row_to_blog_read(row: sqlite3.Row) -> BlogRead:
        """Convert a database row to a BlogRead schema instance."""
        return BlogRead(
            title=row["title"],
            author=row["author"],
            url=row["url"],
            likes=row["likes"],
            id=row["id"],
        )
