import typing as t
import uuid
from datetime import datetime, timezone

import jwt
import structlog
from django.conf import settings

from accounts.models import Session

logger = structlog.get_logger(__name__)


def encode_token(user_id: int) -> str:
    """Sign a bearer token for ``user_id``.

    ``jti`` keeps tokens unique across sessions of the same user.
    """
    payload = {
        "userId": user_id,
        "iat": datetime.now(timezone.utc),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, t.Any]:
    """Verify and decode a bearer token.

    Raises:
        jwt.InvalidTokenError: If the signature or payload is invalid.
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


def create_session(user: t.Any) -> Session:
    """Issue a token for ``user`` and persist it as a Session."""
    session = Session.objects.create(user=user, token=encode_token(user.pk))
    logger.info("session_created", user_id=user.pk, session_id=session.pk)
    return session
