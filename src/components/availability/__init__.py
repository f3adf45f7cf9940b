"""
Availability component - Equipment and operator conflict checks.
"""

from ._impl import as_utc, find_conflicts, intervals_overlap, is_available
from .component import run, run_check, run_check_against_source
from .models import AvailabilityOutput, BookingCandidate, CheckAvailabilityInput
from .ports import Booking, BookingSourcePort

__all__ = [
    # Entry points
    "run",
    "run_check",
    "run_check_against_source",
    # Functional core
    "as_utc",
    "find_conflicts",
    "intervals_overlap",
    "is_available",
    # Models
    "AvailabilityOutput",
    "BookingCandidate",
    "CheckAvailabilityInput",
    # Ports
    "Booking",
    "BookingSourcePort",
]
