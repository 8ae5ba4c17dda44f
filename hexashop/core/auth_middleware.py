"""HexaShop — JWT auth middleware: extracts the bearer token, sets request.state.user."""
import logging
from typing import Callable
from uuid import UUID

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from hexashop.api.deps import CurrentUser
from hexashop.core.security import decode_token

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "access_token"


class JWTAuthMiddleware(BaseHTTPMiddleware):
    """Read a JWT from the Authorization header (or the access_token cookie) and populate request.state.user.

    Routes decide for themselves whether a user is required (see require_auth).
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.user = None

        token = None
        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            token = auth[7:].strip()
        elif request.cookies.get(ACCESS_TOKEN_COOKIE):
            token = request.cookies[ACCESS_TOKEN_COOKIE]

        if token:
            payload = decode_token(token)
            if payload and payload.get("type") == "access" and payload.get("sub"):
                try:
                    request.state.user = CurrentUser(
                        id=UUID(payload["sub"]),
                        username=payload.get("username") or "unknown",
                    )
                except ValueError:
                    logger.warning("Rejected token with malformed subject: %r", payload.get("sub"))
            else:
                logger.debug("Ignoring invalid or expired access token on %s", request.url.path)

        return await call_next(request)
