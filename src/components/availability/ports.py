"""
Availability component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities import Job


class Booking(Protocol):
    """Anything that holds one equipment unit and one operator over an interval."""

    @property
    def equipment_id(self) -> UUID: ...

    @property
    def operator_id(self) -> UUID: ...

    @property
    def start_date(self) -> datetime: ...

    @property
    def end_date(self) -> datetime: ...

    @property
    def status(self) -> str: ...


class BookingSourcePort(Protocol):
    """Read access to the current booking snapshot."""

    def list_all(self) -> Sequence[Job]:
        """List all jobs."""
        ...
