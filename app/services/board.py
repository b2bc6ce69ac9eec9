"""Candidate board state and interactions for a single job.

``BoardController`` owns the state a board view needs: the job, its
candidates in display order, the card being dragged, the creation form, and
the loading/creating/error flags.  Store failures never escape a controller
method; they land in ``error`` and the local state is either left untouched
(creation) or rolled back for the affected candidate (stage moves).

Stage moves are optimistic: the local stage changes before the store is
asked to persist it, and the captured prior stage is restored for that
candidate alone if the store rejects the write.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from app.core.config import settings
from app.core.constants import EMPTY_BOARD_MESSAGE, MISSING_JOB_TITLE
from app.core.exceptions import StoreError
from app.models.board import (
    BoardColumn,
    BoardView,
    CandidateFormInput,
    DragEndEvent,
    DragStartEvent,
)
from app.models.candidate import Candidate, CandidateCreate
from app.models.enums import Stage, parse_stage
from app.models.job import Job
from app.services.store import CandidateStore

logger = logging.getLogger(__name__)


def partition_by_stage(candidates: list[Candidate]) -> dict[Stage, list[Candidate]]:
    """Bucket *candidates* by stage, keeping their relative order.

    Every stage gets a bucket, in pipeline order, even when it is empty.
    """
    buckets: dict[Stage, list[Candidate]] = {stage: [] for stage in Stage}
    for candidate in candidates:
        buckets[candidate.stage].append(candidate)
    return buckets


class BoardController:
    """Board state for one job, driven by user actions."""

    def __init__(self, store: CandidateStore, job_id: UUID) -> None:
        self._store = store
        self.job_id = job_id

        self.job: Job | None = None
        self.candidates: list[Candidate] = []
        self.active_candidate: Candidate | None = None
        self.form = CandidateFormInput()

        self.loading = True
        self.creating = False
        self.error: str | None = None
        self.redirect_to: str | None = None

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, session_user: Any | None) -> bool:
        """Load the job and its candidates.

        Returns False (and sets ``redirect_to``) when there is no
        authenticated session.
        """
        if session_user is None:
            self.redirect_to = settings.LOGIN_PATH
            return False

        try:
            self.job = self._store.get_job(self.job_id)
        except StoreError as exc:
            logger.warning(
                "board_job_fetch_failed",
                extra={"job_id": str(self.job_id), "error_message": exc.message},
            )
            self.job = None

        try:
            candidates = self._store.list_candidates(self.job_id)
        except StoreError as exc:
            self.error = exc.message
            self.candidates = []
        else:
            self.error = None
            self.candidates = candidates

        self.loading = False
        return True

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def set_form(self, name: str = "", linkedin_url: str = "") -> None:
        self.form = CandidateFormInput(name=name, linkedin_url=linkedin_url)

    @property
    def can_submit(self) -> bool:
        """Whether the creation form may be submitted right now."""
        return not self.creating and bool(self.form.name.strip())

    def submit_create(self) -> Candidate | None:
        """Insert a candidate from the form into the entry stage.

        A blank name is rejected without contacting the store.  On success the
        stored row is appended to the board; on failure ``error`` carries the
        store message.  The form is cleared after every attempt.
        """
        name = self.form.name.strip()
        if not name:
            return None

        self.creating = True
        self.error = None

        payload = CandidateCreate(
            job_id=self.job_id,
            name=name,
            linkedin_url=self.form.linkedin_url.strip() or None,
            stage=Stage.first(),
        )
        try:
            inserted = self._store.insert_candidate(payload)
        except StoreError as exc:
            self.error = exc.message
            inserted = None
        finally:
            self.creating = False
            self.form = CandidateFormInput()

        if inserted is not None:
            self.candidates = [*self.candidates, inserted]
            logger.info(
                "candidate_created",
                extra={"candidate_id": str(inserted.id), "job_id": str(self.job_id)},
            )
        return inserted

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------

    def find_candidate(self, candidate_id: UUID) -> Candidate | None:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    def handle_drag_start(self, event: DragStartEvent) -> None:
        candidate = self.find_candidate(event.active_id)
        if candidate is not None:
            self.active_candidate = candidate

    def handle_drag_end(self, event: DragEndEvent) -> bool:
        """Move the dragged candidate to the column it was dropped on.

        Returns True only when the store accepted the new stage.  Drops with
        no target, onto the card itself, onto a non-column, or onto the
        candidate's current column do nothing.
        """
        self.active_candidate = None
        if event.over_id is None or event.over_id == str(event.active_id):
            return False

        target = parse_stage(event.over_id)
        if target is None:
            return False

        candidate = self.find_candidate(event.active_id)
        if candidate is None or candidate.stage == target:
            return False

        previous = candidate.stage
        self._set_stage(candidate.id, target)

        try:
            self._store.update_stage(candidate.id, target)
        except StoreError as exc:
            self.error = exc.message
            self._set_stage(candidate.id, previous)
            logger.warning(
                "candidate_stage_rollback",
                extra={
                    "candidate_id": str(candidate.id),
                    "from_stage": previous.value,
                    "to_stage": target.value,
                    "error_message": exc.message,
                },
            )
            return False

        logger.info(
            "candidate_stage_changed",
            extra={
                "candidate_id": str(candidate.id),
                "from_stage": previous.value,
                "to_stage": target.value,
            },
        )
        return True

    def _set_stage(self, candidate_id: UUID, stage: Stage) -> None:
        # Rebuild the list so only the matching candidate changes.
        self.candidates = [
            c.model_copy(update={"stage": stage}) if c.id == candidate_id else c
            for c in self.candidates
        ]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def columns(self) -> dict[Stage, list[Candidate]]:
        return partition_by_stage(self.candidates)

    def render(self) -> BoardView:
        """Return the board as one column per stage in pipeline order."""
        return BoardView(
            job_id=self.job_id,
            title=self.job.title if self.job else MISSING_JOB_TITLE,
            columns=[
                BoardColumn(stage=stage, candidates=cards)
                for stage, cards in self.columns().items()
            ],
            error=self.error,
            empty_message=EMPTY_BOARD_MESSAGE if not self.candidates else None,
        )
