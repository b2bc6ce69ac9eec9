"""Pydantic models for the ``candidates`` table.

``id`` and ``created_at`` are assigned by the database and are therefore
absent from the create model.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from app.models.enums import Stage


class CandidateCreate(BaseModel):
    """Payload for creating a candidate (insert)."""
    job_id: UUID
    name: str
    linkedin_url: str | None = None
    stage: Stage = Stage.first()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("linkedin_url")
    @classmethod
    def _blank_url_is_absent(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class Candidate(BaseModel):
    """Full candidate record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    job_id: UUID
    name: str
    linkedin_url: str | None = None
    stage: Stage
    created_at: datetime
