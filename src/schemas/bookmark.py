"""Pydantic schemas for bookmark endpoints."""
from typing import Any

import bleach
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer


BOOKMARK_FIELDS = ("title", "url", "description", "rating")

# Plain-text 400 messages for POST /bookmarks, keyed by the first failing field
CREATE_ERROR_MESSAGES = {
    "title": "Missing title",
    "url": "Missing URL",
    "description": "Missing Description",
    "rating": "Rating between 1 and 5 is required",
}

NO_UPDATE_FIELDS_MESSAGE = (
    "Request body must contain either 'title' 'url' 'rating' or 'description'"
)


def sanitize_text(value: str) -> str:
    """
    Neutralize executable markup before echoing user text back to a client.

    Disallowed tags (script, img, iframe, ...) are escaped rather than removed,
    so `<script>` comes back as `&lt;script&gt;`. Bare ampersands are left as
    typed. Stored data is never touched.
    """
    return bleach.clean(value).replace("&amp;", "&")


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Field order matters: validation errors are reported in declaration order and
    only the first one is surfaced to the client.
    """

    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)


def first_create_error(exc: ValidationError) -> str:
    """Map a BookmarkCreate validation failure to its client-facing message."""
    for error in exc.errors():
        if error["loc"] and error["loc"][0] in CREATE_ERROR_MESSAGES:
            return CREATE_ERROR_MESSAGES[error["loc"][0]]
    return CREATE_ERROR_MESSAGES["title"]


class BookmarkUpdate(BaseModel):
    """Schema for partially updating a bookmark. Ranges are not checked here."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    url: str | None = None
    description: str | None = None
    rating: int | None = None

    def changed_fields(self) -> dict[str, Any]:
        """Fields that were actually supplied, ready for an UPDATE statement."""
        return self.model_dump(exclude_none=True)


def supplied_update_fields(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Pick the bookmark fields from a PATCH body that hold a truthy value.

    Falsy values ("" or 0) count as not supplied.
    """
    return {field: payload[field] for field in BOOKMARK_FIELDS if payload.get(field)}


class BookmarkRecord(BaseModel):
    """A bookmark exactly as stored. Used by the collection endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str
    rating: int


class BookmarkResponse(BookmarkRecord):
    """
    Serialized bookmark for single-item responses.

    `title` and `description` pass through `sanitize_text` on the way out;
    `id`, `url` and `rating` are returned unchanged.
    """

    @field_serializer("title", "description")
    def sanitize_markup(self, value: str) -> str:
        return sanitize_text(value)
