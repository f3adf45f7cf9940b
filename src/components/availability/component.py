"""
Availability component - Equipment and operator conflict checks.

Shell Layer - reads the booking snapshot and converts errors.
"""

from __future__ import annotations

from src.domain.errors import InvalidInput

from ._impl import find_conflicts
from .models import AvailabilityOutput, BookingCandidate, CheckAvailabilityInput
from .ports import BookingSourcePort


def run_check(input_data: CheckAvailabilityInput) -> AvailabilityOutput:
    """Check a candidate against the bookings supplied with it."""
    try:
        conflicts = find_conflicts(input_data.candidate, input_data.bookings)
    except InvalidInput as e:
        return AvailabilityOutput(conflicts=(), available=False, error=str(e))

    return AvailabilityOutput(conflicts=tuple(conflicts), available=not conflicts)


def run_check_against_source(
    candidate: BookingCandidate,
    source: BookingSourcePort,
) -> AvailabilityOutput:
    """Check a candidate against a fresh snapshot from the booking source."""
    return run_check(CheckAvailabilityInput(candidate=candidate, bookings=tuple(source.list_all())))


def run(input_data: CheckAvailabilityInput) -> AvailabilityOutput:
    if isinstance(input_data, CheckAvailabilityInput):
        return run_check(input_data)

    raise TypeError(f"Unknown input type: {type(input_data)}")
