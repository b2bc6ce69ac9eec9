"""Enum types mirroring the ``candidates.stage`` column values."""

from enum import Enum


class Stage(str, Enum):
    """Hiring stage, in pipeline order.

    Members are declared in the order candidates move through them; the
    first member is where every new candidate enters.
    """
    applied = "Applied"
    screening = "Screening"
    interview = "Interview"
    offer = "Offer"
    hired = "Hired"

    @classmethod
    def first(cls) -> "Stage":
        """Return the entry stage for new candidates."""
        return next(iter(cls))


def parse_stage(value: object) -> Stage | None:
    """Return the ``Stage`` whose value is *value*, or ``None``."""
    try:
        return Stage(value)
    except ValueError:
        return None
