"""Row-level access to the ``jobs``, ``candidates`` and ``profiles`` tables.

``CandidateStore`` wraps a supabase-py ``Client`` (anon, user-scoped or
service-role) and exposes exactly the single-row operations the board and
the admin gate need.  Backend and transport failures surface as
``StoreError`` carrying the backend's message.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from app.core.constants import CANDIDATE_COLUMNS, JOB_COLUMNS
from app.core.exceptions import StoreError
from app.models.candidate import Candidate, CandidateCreate
from app.models.enums import Stage
from app.models.job import Job

logger = logging.getLogger(__name__)


def _execute(query: Any, operation: str) -> Any:
    """Run a PostgREST query builder, translating failures into ``StoreError``."""
    try:
        return query.execute()
    except PostgrestAPIError as exc:
        logger.error(
            "store_operation_failed",
            extra={"operation": operation, "error_message": exc.message},
        )
        raise StoreError(exc.message) from exc
    except httpx.HTTPError as exc:
        logger.error(
            "store_transport_failed",
            extra={"operation": operation, "error_message": str(exc)},
        )
        raise StoreError(str(exc)) from exc


def _single_row(result: Any) -> dict[str, Any] | None:
    """Extract the row from a ``maybe_single()`` result.

    Depending on the postgrest version a missing row is reported either as a
    ``None`` response or as a response whose ``data`` is ``None``.
    """
    if result is None:
        return None
    return result.data or None


class CandidateStore:
    """Single-row operations on the recruiting tables."""

    def __init__(self, client: Client) -> None:
        self._client = client

    # -- jobs ---------------------------------------------------------------

    def list_jobs(self) -> list[Job]:
        """Return every visible job ordered by title."""
        result = _execute(
            self._client.table("jobs").select(JOB_COLUMNS).order("title"),
            "list_jobs",
        )
        return [Job(**row) for row in result.data or []]

    def get_job(self, job_id: UUID) -> Job | None:
        """Return the job with *job_id*, or ``None`` when it does not exist."""
        result = _execute(
            self._client.table("jobs")
            .select(JOB_COLUMNS)
            .eq("id", str(job_id))
            .maybe_single(),
            "get_job",
        )
        row = _single_row(result)
        return Job(**row) if row else None

    # -- candidates ---------------------------------------------------------

    def list_candidates(self, job_id: UUID) -> list[Candidate]:
        """Return the job's candidates in ascending creation order."""
        result = _execute(
            self._client.table("candidates")
            .select(CANDIDATE_COLUMNS)
            .eq("job_id", str(job_id))
            .order("created_at", desc=False),
            "list_candidates",
        )
        return [Candidate(**row) for row in result.data or []]

    def insert_candidate(self, payload: CandidateCreate) -> Candidate:
        """Insert a candidate and return the stored row."""
        result = _execute(
            self._client.table("candidates").insert(payload.model_dump(mode="json")),
            "insert_candidate",
        )
        if not result.data:
            raise StoreError("Insert returned no row")
        return Candidate(**result.data[0])

    def update_stage(self, candidate_id: UUID, stage: Stage) -> None:
        """Set only the ``stage`` column of one candidate."""
        _execute(
            self._client.table("candidates")
            .update({"stage": stage.value})
            .eq("id", str(candidate_id)),
            "update_stage",
        )

    def delete_candidate(self, candidate_id: str) -> None:
        """Remove one candidate row by id."""
        _execute(
            self._client.table("candidates").delete().eq("id", candidate_id),
            "delete_candidate",
        )

    # -- profiles -----------------------------------------------------------

    def get_role(self, user_id: str) -> str | None:
        """Return the ``profiles.role`` of *user_id*, or ``None`` without a profile."""
        result = _execute(
            self._client.table("profiles")
            .select("role")
            .eq("id", user_id)
            .maybe_single(),
            "get_role",
        )
        row = _single_row(result)
        return row.get("role") if row else None
