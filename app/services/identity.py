"""Bearer-credential parsing and Supabase Auth user resolution."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from supabase import AuthError, Client

from app.core.constants import BEARER_PREFIX
from app.core.exceptions import AuthenticationInvalid, AuthenticationMissing
from app.db.supabase import get_supabase

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header.

    Raises ``AuthenticationMissing`` when the header is absent, uses another
    scheme or carries an empty token.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationMissing()
    token = authorization[len(BEARER_PREFIX):]
    if not token:
        raise AuthenticationMissing()
    return token


def resolve_user(token: str, client: Client | None = None) -> Any:
    """Resolve *token* to a Supabase Auth user.

    Raises ``AuthenticationInvalid`` for unknown, expired or malformed tokens.
    """
    client = client or get_supabase()
    try:
        response = client.auth.get_user(token)
    except (AuthError, httpx.HTTPError) as exc:
        logger.warning(
            "token_resolution_failed",
            extra={"error_message": str(exc)},
        )
        raise AuthenticationInvalid() from exc

    user = response.user if response is not None else None
    if user is None:
        raise AuthenticationInvalid()
    return user


def get_session_user(authorization: str | None) -> tuple[Any, str] | None:
    """Return ``(user, token)`` for a valid session header, else ``None``."""
    try:
        token = extract_bearer_token(authorization)
        user = resolve_user(token)
    except (AuthenticationMissing, AuthenticationInvalid):
        return None
    return user, token
