"""Bearer-token authentication for the bookmarks API."""
import logging
import secrets

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings
from core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def verify_api_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Require `Authorization: Bearer <api_token>` on the request.

    Dev mode skips the check entirely. Outside dev mode an unset `api_token`
    rejects every request rather than accepting everything.
    """
    if settings.dev_mode:
        return

    if (
        credentials is None
        or not settings.api_token
        or not secrets.compare_digest(credentials.credentials, settings.api_token)
    ):
        logger.error("Unauthorized request to path: %s", request.url.path)
        raise UnauthorizedError
