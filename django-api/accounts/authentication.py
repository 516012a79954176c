"""Bearer-token authentication for the REST API.

A request is authenticated when its ``Authorization: Bearer <token>`` header
carries a token signed with ``JWT_SECRET`` that is still held by a Session.
"""

import typing as t

import jwt
import structlog
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from accounts.models import Session
from accounts.services import decode_token

logger = structlog.get_logger(__name__)

KEYWORD = "Bearer"


class BearerSessionAuthentication(BaseAuthentication):
    """Resolve a bearer token to the user owning its session."""

    def authenticate(self, request: Request) -> tuple[t.Any, str] | None:
        header = get_authorization_header(request).split()
        if not header or header[0].lower() != KEYWORD.lower().encode():
            return None
        if len(header) != 2:
            raise AuthenticationFailed("Invalid authorization header.")

        try:
            token = header[1].decode()
        except UnicodeError as exc:
            raise AuthenticationFailed("Invalid token.") from exc

        try:
            payload = decode_token(token)
        except jwt.InvalidTokenError as exc:
            logger.info("auth_token_rejected", reason="invalid_token")
            raise AuthenticationFailed("Invalid token.") from exc

        session = Session.objects.select_related("user").filter(token=token).first()
        if session is None:
            logger.info("auth_token_rejected", reason="no_session", user_id=payload.get("userId"))
            raise AuthenticationFailed("No active session.")

        if session.user.pk != payload.get("userId") or not session.user.is_active:
            logger.info("auth_token_rejected", reason="user_mismatch", user_id=payload.get("userId"))
            raise AuthenticationFailed("Invalid token.")

        return session.user, token

    def authenticate_header(self, request: Request) -> str:
        return KEYWORD
