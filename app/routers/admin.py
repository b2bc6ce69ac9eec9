"""Admin-only candidate endpoints.

DELETE /api/admin/candidates/{candidate_id} -- removes one candidate after
verifying the caller's bearer token and admin role.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Header, HTTPException

from app.core.exceptions import GateError
from app.services.authorization import delete_candidate_as_admin

logger = logging.getLogger(__name__)

router = APIRouter()


def _delete(authorization: str | None, candidate_id: str) -> dict[str, Any]:
    try:
        return delete_candidate_as_admin(authorization, candidate_id)
    except GateError as exc:
        logger.error(
            "admin_delete_failed",
            extra={
                "candidate_id": candidate_id,
                "status_code": exc.status_code,
                "error_message": exc.message,
            },
        )
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


@router.delete("/candidates/{candidate_id}", status_code=200)
async def delete_candidate(
    candidate_id: str,
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Delete a candidate as an admin.

    401 without a valid bearer token, 400 without a candidate id, 403 for
    non-admin callers, 500 for misconfiguration or store failures.
    """
    return _delete(authorization, candidate_id)


@router.delete("/candidates/", status_code=200, include_in_schema=False)
async def delete_candidate_without_id(
    authorization: str | None = Header(default=None),
) -> dict[str, Any]:
    """Reject a delete whose path carries no candidate id (400)."""
    return _delete(authorization, "")
