"""
Booking conflict detection - Functional Core.

A booking conflicts with a candidate when it shares the equipment or the
operator, is not resolved (completed / cancelled), and its half-open
interval [start, end) overlaps the candidate's.

Linear scan over the snapshot, preserving input order. Naive datetimes are
read as UTC, so naive and aware values can be mixed.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from src.domain.entities import RESOLVED_JOB_STATUSES
from src.domain.errors import InvalidInput

from .models import B, BookingCandidate


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def intervals_overlap(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """Half-open overlap test. Touching endpoints do not overlap."""
    return as_utc(a_start) < as_utc(b_end) and as_utc(a_end) > as_utc(b_start)


def holds_resources(booking: B) -> bool:
    return booking.status not in RESOLVED_JOB_STATUSES


def shares_resource(candidate: BookingCandidate, booking: B) -> bool:
    return (
        booking.equipment_id == candidate.equipment_id
        or booking.operator_id == candidate.operator_id
    )


def find_conflicts(candidate: BookingCandidate, existing: Iterable[B]) -> list[B]:
    """
    Return every existing booking that blocks the candidate.

    An empty list means both the equipment and the operator are free for
    the whole requested window. A zero-length candidate never conflicts.

    Raises:
        InvalidInput: if the candidate ends before it starts.
    """
    start, end = as_utc(candidate.start), as_utc(candidate.end)
    if end < start:
        raise InvalidInput("end", "must not be before start")
    if end == start:
        return []

    return [
        b
        for b in existing
        if shares_resource(candidate, b)
        and holds_resources(b)
        and intervals_overlap(start, end, b.start_date, b.end_date)
    ]


def is_available(candidate: BookingCandidate, existing: Iterable[B]) -> bool:
    return not find_conflicts(candidate, existing)
