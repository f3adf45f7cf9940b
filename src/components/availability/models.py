"""
Availability component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from .ports import Booking

B = TypeVar("B", bound=Booking)


@dataclass(frozen=True)
class BookingCandidate:
    """A proposed booking of one equipment unit and one operator."""

    equipment_id: UUID
    operator_id: UUID
    start: datetime
    end: datetime


# --- Input / Output Models ---


@dataclass(frozen=True)
class CheckAvailabilityInput(Generic[B]):
    """Input for checking a candidate against existing bookings."""

    candidate: BookingCandidate
    bookings: tuple[B, ...]


@dataclass(frozen=True)
class AvailabilityOutput(Generic[B]):
    """Output from an availability check."""

    conflicts: tuple[B, ...]
    available: bool
    error: str | None = None
