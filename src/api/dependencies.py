"""FastAPI dependencies for injection."""
import json
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import verify_api_token
from core.config import get_settings
from core.exceptions import BookmarkNotFoundError, InvalidRequestError
from db.session import get_async_session
from models.bookmark import Bookmark
from services import bookmark_service


async def get_json_body(request: Request) -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body or a JSON value that is not an object yields `{}`, so the
    endpoint's own field checks decide what to report.
    """
    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestError("Malformed JSON in request body") from e
    return payload if isinstance(payload, dict) else {}


async def get_bookmark_or_404(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> Bookmark:
    """Load the bookmark named in the path, or fail with 404."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(f"Bookmark with id {bookmark_id} not found")
    return bookmark


__all__ = [
    "get_async_session",
    "get_bookmark_or_404",
    "get_json_body",
    "get_settings",
    "verify_api_token",
]
