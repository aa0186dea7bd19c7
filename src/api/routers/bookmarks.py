"""Bookmark CRUD endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import (
    get_async_session,
    get_bookmark_or_404,
    get_json_body,
    verify_api_token,
)
from core.exceptions import BookmarkNotFoundError, InvalidRequestError
from models.bookmark import Bookmark
from schemas.bookmark import (
    NO_UPDATE_FIELDS_MESSAGE,
    BookmarkCreate,
    BookmarkRecord,
    BookmarkResponse,
    BookmarkUpdate,
    first_create_error,
    supplied_update_fields,
)
from services import bookmark_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(verify_api_token)],
)


def _serialized(bookmark: Bookmark) -> dict[str, Any]:
    """Wire form of a single bookmark, with title and description sanitized."""
    return BookmarkResponse.model_validate(bookmark).model_dump()


@router.get("", response_model=list[BookmarkRecord])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkRecord]:
    """List every bookmark as stored."""
    bookmarks = await bookmark_service.get_bookmarks(db)
    return [BookmarkRecord.model_validate(b) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"description": "A required field is missing or rating is out of range"}},
)
async def create_bookmark(
    payload: dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """
    Create a new bookmark.

    All of title, url, description and rating (1-5) are required. The first
    missing or invalid field is reported as a plain-text 400.
    """
    try:
        data = BookmarkCreate.model_validate(payload)
    except ValidationError as exc:
        message = first_create_error(exc)
        logger.error(message)
        return PlainTextResponse(message, status_code=400)

    bookmark = await bookmark_service.create_bookmark(db, data)
    logger.info("Bookmark with id %s created", bookmark.id)
    return JSONResponse(
        status_code=201,
        content=_serialized(bookmark),
        headers={"Location": f"/bookmarks/{bookmark.id}"},
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark: Bookmark = Depends(get_bookmark_or_404),
) -> Response:
    """Get a single bookmark by ID, with title and description sanitized."""
    return JSONResponse(content=_serialized(bookmark))


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """Delete a bookmark."""
    deleted = await bookmark_service.delete_bookmark(db, bookmark_id)
    if deleted == 0:
        raise BookmarkNotFoundError(f"bookmark with id {bookmark_id} not found")
    logger.info("Bookmark with id %s deleted", bookmark_id)
    return Response(status_code=204)


@router.patch("/{bookmark_id}", status_code=204)
async def update_bookmark(
    bookmark_id: int,
    payload: dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """
    Update some fields of a bookmark.

    Responds 204 whether or not the bookmark exists. Empty strings and zero
    count as "not supplied".
    """
    fields = supplied_update_fields(payload)
    if not fields:
        raise InvalidRequestError(NO_UPDATE_FIELDS_MESSAGE)

    try:
        data = BookmarkUpdate.model_validate(fields)
    except ValidationError as exc:
        field = exc.errors()[0]["loc"][0]
        raise InvalidRequestError(f"Invalid value for '{field}'") from exc

    updated = await bookmark_service.update_bookmark(db, bookmark_id, data.changed_fields())
    logger.info("Bookmark with id %s updated (%s rows)", bookmark_id, updated)
    return Response(status_code=204)
