"""Pydantic model for the ``jobs`` table (read-only here)."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Job(BaseModel):
    """Job record as selected by the board."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
