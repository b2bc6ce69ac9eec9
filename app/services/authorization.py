"""Authorization gate for destructive admin operations.

Establishes the caller's identity and role before anything touches the
target row, so a rejected caller learns nothing about whether the candidate
exists.  Every failure is raised as a ``GateError`` subclass; the router
turns it into an HTTP status.
"""

from __future__ import annotations

import logging
from typing import Any

from app.core.constants import ADMIN_ROLE
from app.core.exceptions import AuthorizationDenied, StoreError, ValidationFailed
from app.db.supabase import get_supabase_admin
from app.services.identity import extract_bearer_token, resolve_user
from app.services.store import CandidateStore

logger = logging.getLogger(__name__)


def require_admin(store: CandidateStore, user_id: str) -> None:
    """Raise ``AuthorizationDenied`` unless *user_id* has the admin role.

    A missing profile or a failed lookup counts as a denial.
    """
    try:
        role = store.get_role(user_id)
    except StoreError as exc:
        logger.warning(
            "admin_role_lookup_failed",
            extra={"user_id": user_id, "error_message": exc.message},
        )
        raise AuthorizationDenied() from exc

    if role != ADMIN_ROLE:
        logger.warning(
            "admin_delete_denied",
            extra={"user_id": user_id, "role": role},
        )
        raise AuthorizationDenied()


def delete_candidate_as_admin(
    authorization: str | None,
    candidate_id: str | None,
) -> dict[str, Any]:
    """Delete one candidate on behalf of a verified admin caller.

    Check order: bearer header, candidate id, token, service-role
    configuration, caller role.  Only then is the row deleted.  Store failures
    during the delete propagate as ``StoreError``.
    """
    token = extract_bearer_token(authorization)

    if not candidate_id or not candidate_id.strip():
        raise ValidationFailed()

    caller = resolve_user(token)

    store = CandidateStore(get_supabase_admin())
    require_admin(store, str(caller.id))

    store.delete_candidate(candidate_id)
    logger.info(
        "admin_candidate_deleted",
        extra={"candidate_id": candidate_id, "caller_id": str(caller.id)},
    )
    return {"ok": True}
