"""Request and response models for the candidate board.

These are API-layer schemas, not direct table mappings.
"""

from uuid import UUID

from pydantic import BaseModel

from app.models.candidate import Candidate
from app.models.enums import Stage


# --- Drag events ---

class DragStartEvent(BaseModel):
    """A card was picked up."""
    active_id: UUID


class DragEndEvent(BaseModel):
    """A card was released.

    ``over_id`` is the identifier of the drop target under the pointer, or
    ``None`` when the card was dropped outside every column.
    """
    active_id: UUID
    over_id: str | None = None


# --- Requests ---

class CandidateFormInput(BaseModel):
    """Creation form contents as typed by the user."""
    name: str = ""
    linkedin_url: str = ""


class MoveRequest(BaseModel):
    """Body for POST /api/v1/jobs/{job_id}/board/moves."""
    candidate_id: UUID
    over_id: str | None = None


# --- Board view ---

class BoardColumn(BaseModel):
    """One stage column and its cards in display order."""
    stage: Stage
    candidates: list[Candidate] = []


class BoardView(BaseModel):
    """Full rendered board for one job."""
    job_id: UUID
    title: str
    columns: list[BoardColumn] = []
    error: str | None = None
    empty_message: str | None = None
