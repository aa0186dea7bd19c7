"""Data access for the bookmarks table. No business rules live here."""
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate


async def get_bookmarks(db: AsyncSession) -> Sequence[Bookmark]:
    """All bookmarks in storage order."""
    result = await db.execute(select(Bookmark).order_by(Bookmark.id))
    return result.scalars().all()


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """A single bookmark, or None if no row has that id."""
    result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    return result.scalar_one_or_none()


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """Insert a bookmark and return it with its storage-assigned id."""
    bookmark = Bookmark(**data.model_dump())
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> int:
    """Delete a bookmark. Returns the number of rows removed (0 or 1)."""
    result = await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))
    return result.rowcount


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    fields: Mapping[str, Any],
) -> int:
    """
    Overwrite the given columns on one bookmark.

    Returns the number of rows affected, which is 0 when the id does not exist.
    An empty `fields` mapping is a no-op.
    """
    if not fields:
        return 0
    result = await db.execute(
        update(Bookmark)
        .where(Bookmark.id == bookmark_id)
        .values(**fields)
        .execution_options(synchronize_session=False),
    )
    return result.rowcount
