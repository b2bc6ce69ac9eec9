"""Job listing and candidate board endpoints.

Every route treats the ``Authorization: Bearer <token>`` header as the
browser session.  Without a valid session the caller is redirected to the
login page.  Reads and writes go through a client carrying the caller's
token so the store's row-level policies apply.

Board responses carry the rendered board.  Whenever a store operation
failed during the request the board's ``error`` is set and the status is
502.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Header, HTTPException
from starlette.responses import JSONResponse, RedirectResponse

from app.core.config import settings
from app.core.exceptions import StoreError
from app.db.supabase import create_user_client
from app.models.board import BoardView, CandidateFormInput, DragEndEvent, MoveRequest
from app.models.job import Job
from app.services.board import BoardController
from app.services.identity import get_session_user
from app.services.store import CandidateStore

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _login_redirect() -> RedirectResponse:
    return RedirectResponse(url=settings.LOGIN_PATH, status_code=307)


def _session_store(authorization: str | None) -> tuple[Any, CandidateStore] | None:
    """Return ``(user, store)`` for a valid session, else ``None``."""
    session = get_session_user(authorization)
    if session is None:
        return None
    user, token = session
    return user, CandidateStore(create_user_client(token))


def _board_response(controller: BoardController, ok_status: int = 200) -> JSONResponse:
    view = controller.render()
    status_code = 502 if view.error else ok_status
    return JSONResponse(status_code=status_code, content=view.model_dump(mode="json"))


# ---------------------------------------------------------------------------
# GET /api/v1/jobs
# ---------------------------------------------------------------------------

@router.get("", response_model=list[Job])
async def list_jobs(
    authorization: str | None = Header(default=None),
) -> Any:
    """Return the jobs visible to the caller, ordered by title."""
    session = _session_store(authorization)
    if session is None:
        return _login_redirect()

    _, store = session
    try:
        return store.list_jobs()
    except StoreError as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc


# ---------------------------------------------------------------------------
# GET /api/v1/jobs/{job_id}/board
# ---------------------------------------------------------------------------

@router.get("/{job_id}/board", response_model=BoardView)
async def get_board(
    job_id: UUID,
    authorization: str | None = Header(default=None),
) -> Any:
    """Render the job's candidates grouped into stage columns."""
    session = _session_store(authorization)
    if session is None:
        return _login_redirect()

    user, store = session
    controller = BoardController(store, job_id)
    controller.initialize(user)
    return _board_response(controller)


# ---------------------------------------------------------------------------
# POST /api/v1/jobs/{job_id}/candidates
# ---------------------------------------------------------------------------

@router.post("/{job_id}/candidates", response_model=BoardView, status_code=201)
async def create_candidate(
    job_id: UUID,
    body: CandidateFormInput,
    authorization: str | None = Header(default=None),
) -> Any:
    """Add a candidate to the job's first stage.

    422 for a blank name (the store is not contacted), 201 with the updated
    board on success, 502 with the unchanged board when the store fails.
    A board that could not be loaded is answered with 502 and no insert.
    """
    session = _session_store(authorization)
    if session is None:
        return _login_redirect()

    if not body.name.strip():
        raise HTTPException(status_code=422, detail="Candidate name is required")

    user, store = session
    controller = BoardController(store, job_id)
    controller.initialize(user)
    if controller.error:
        logger.error(
            "create_candidate_board_unavailable",
            extra={"job_id": str(job_id), "error_message": controller.error},
        )
        return _board_response(controller)

    controller.set_form(name=body.name, linkedin_url=body.linkedin_url)
    if controller.submit_create() is None:
        logger.error(
            "create_candidate_failed",
            extra={"job_id": str(job_id), "error_message": controller.error},
        )
    return _board_response(controller, ok_status=201)


# ---------------------------------------------------------------------------
# POST /api/v1/jobs/{job_id}/board/moves
# ---------------------------------------------------------------------------

@router.post("/{job_id}/board/moves", response_model=BoardView)
async def move_candidate(
    job_id: UUID,
    body: MoveRequest,
    authorization: str | None = Header(default=None),
) -> Any:
    """Apply a drag-and-drop of one card onto a stage column.

    Returns the board after the move.  When the store rejects the new stage
    the card is back in its previous column and ``error`` is set.
    """
    session = _session_store(authorization)
    if session is None:
        return _login_redirect()

    user, store = session
    controller = BoardController(store, job_id)
    controller.initialize(user)

    controller.handle_drag_end(
        DragEndEvent(active_id=body.candidate_id, over_id=body.over_id)
    )
    return _board_response(controller)
