"""Unit tests for the Supabase-backed ``CandidateStore``.

Verifies the PostgREST query chains issued per operation and the
translation of backend failures into ``StoreError``.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock
from uuid import UUID

import httpx
import pytest
from supabase import PostgrestAPIError

from app.core.exceptions import StoreError
from app.models.candidate import CandidateCreate
from app.models.enums import Stage, parse_stage
from app.services.store import CandidateStore

JOB_ID = UUID("11111111-1111-1111-1111-111111111111")
CANDIDATE_ID = UUID("22222222-2222-2222-2222-222222222222")

CANDIDATE_ROW = {
    "id": str(CANDIDATE_ID),
    "job_id": str(JOB_ID),
    "name": "Ada Lovelace",
    "linkedin_url": None,
    "stage": "Applied",
    "created_at": "2026-03-01T09:00:00+00:00",
}


def _mock_supabase_chain(data: Any = None) -> tuple[MagicMock, MagicMock]:
    """Setup a chained mock for client.table(...).method(...).execute().

    Returns ``(client, table)`` for further assertions.
    """
    client = MagicMock()
    table = MagicMock()
    client.table.return_value = table
    for method_name in (
        "select", "insert", "update", "delete", "eq", "order", "maybe_single",
    ):
        getattr(table, method_name).return_value = table
    table.execute.return_value = MagicMock(data=data)
    return client, table


def _api_error(message: str) -> PostgrestAPIError:
    return PostgrestAPIError(
        {"message": message, "code": "42501", "hint": None, "details": None}
    )


class TestStageEnum:

    def test_pipeline_order(self) -> None:
        assert [s.value for s in Stage] == [
            "Applied", "Screening", "Interview", "Offer", "Hired",
        ]
        assert Stage.first() is Stage.applied

    def test_parse_stage(self) -> None:
        assert parse_stage("Offer") is Stage.offer
        assert parse_stage("offer") is None
        assert parse_stage(None) is None


class TestCandidateCreate:

    def test_blank_url_becomes_none(self) -> None:
        payload = CandidateCreate(job_id=JOB_ID, name=" Ada ", linkedin_url="  ")
        assert payload.name == "Ada"
        assert payload.linkedin_url is None
        assert payload.stage is Stage.applied

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            CandidateCreate(job_id=JOB_ID, name="   ")


class TestReads:

    def test_list_candidates_ordered_by_creation(self) -> None:
        client, table = _mock_supabase_chain([CANDIDATE_ROW])

        rows = CandidateStore(client).list_candidates(JOB_ID)

        client.table.assert_called_once_with("candidates")
        table.eq.assert_called_once_with("job_id", str(JOB_ID))
        table.order.assert_called_once_with("created_at", desc=False)
        assert rows[0].id == CANDIDATE_ID
        assert rows[0].stage is Stage.applied

    def test_list_candidates_empty(self) -> None:
        client, _ = _mock_supabase_chain(None)
        assert CandidateStore(client).list_candidates(JOB_ID) == []

    def test_get_job(self) -> None:
        client, table = _mock_supabase_chain({"id": str(JOB_ID), "title": "Data Engineer"})

        job = CandidateStore(client).get_job(JOB_ID)

        assert job is not None
        assert job.title == "Data Engineer"
        table.maybe_single.assert_called_once()

    def test_get_job_missing_none_response(self) -> None:
        """Given postgrest returns no response for zero rows, the job is None."""
        client, table = _mock_supabase_chain()
        table.execute.return_value = None

        assert CandidateStore(client).get_job(JOB_ID) is None

    def test_get_job_missing_empty_data(self) -> None:
        client, _ = _mock_supabase_chain(None)
        assert CandidateStore(client).get_job(JOB_ID) is None

    def test_list_jobs(self) -> None:
        client, table = _mock_supabase_chain([{"id": str(JOB_ID), "title": "QA"}])

        jobs = CandidateStore(client).list_jobs()

        table.order.assert_called_once_with("title")
        assert [j.title for j in jobs] == ["QA"]

    def test_get_role(self) -> None:
        client, table = _mock_supabase_chain({"role": "admin"})

        assert CandidateStore(client).get_role("user-1") == "admin"
        client.table.assert_called_once_with("profiles")
        table.eq.assert_called_once_with("id", "user-1")

    def test_get_role_without_profile(self) -> None:
        client, table = _mock_supabase_chain()
        table.execute.return_value = None

        assert CandidateStore(client).get_role("user-1") is None


class TestWrites:

    def test_insert_returns_stored_row(self) -> None:
        client, table = _mock_supabase_chain([CANDIDATE_ROW])
        payload = CandidateCreate(job_id=JOB_ID, name="Ada Lovelace")

        created = CandidateStore(client).insert_candidate(payload)

        table.insert.assert_called_once_with({
            "job_id": str(JOB_ID),
            "name": "Ada Lovelace",
            "linkedin_url": None,
            "stage": "Applied",
        })
        assert created.id == CANDIDATE_ID

    def test_insert_without_row_is_error(self) -> None:
        client, _ = _mock_supabase_chain([])
        with pytest.raises(StoreError):
            CandidateStore(client).insert_candidate(
                CandidateCreate(job_id=JOB_ID, name="Ada")
            )

    def test_update_stage_sets_single_field(self) -> None:
        client, table = _mock_supabase_chain([])

        CandidateStore(client).update_stage(CANDIDATE_ID, Stage.offer)

        table.update.assert_called_once_with({"stage": "Offer"})
        table.eq.assert_called_once_with("id", str(CANDIDATE_ID))

    def test_delete_by_id(self) -> None:
        client, table = _mock_supabase_chain([])

        CandidateStore(client).delete_candidate(str(CANDIDATE_ID))

        table.delete.assert_called_once_with()
        table.eq.assert_called_once_with("id", str(CANDIDATE_ID))


class TestErrors:

    def test_api_error_carries_backend_message(self) -> None:
        client, table = _mock_supabase_chain()
        table.execute.side_effect = _api_error("permission denied for table candidates")

        with pytest.raises(StoreError) as exc_info:
            CandidateStore(client).update_stage(CANDIDATE_ID, Stage.hired)

        assert exc_info.value.message == "permission denied for table candidates"
        assert exc_info.value.status_code == 500

    def test_transport_error(self) -> None:
        client, table = _mock_supabase_chain()
        table.execute.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(StoreError) as exc_info:
            CandidateStore(client).list_candidates(JOB_ID)

        assert "connection refused" in exc_info.value.message
