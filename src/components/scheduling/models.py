"""
Scheduling component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities import Job, JobStatus

# --- Validation Error ---


@dataclass(frozen=True)
class SchedulingValidationError:
    """Scheduling validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ScheduleJobInput:
    """Book one equipment unit and one operator for a lead."""

    lead_id: UUID
    equipment_id: UUID
    operator_id: UUID
    start_date: datetime
    end_date: datetime
    location: str = ""
    notes: str = ""
    customer_name: str | None = None


@dataclass(frozen=True)
class CheckJobAvailabilityInput:
    equipment_id: UUID
    operator_id: UUID
    start_date: datetime
    end_date: datetime
    exclude_job_id: UUID | None = None


@dataclass(frozen=True)
class UpdateJobStatusInput:
    job_id: UUID
    status: JobStatus


@dataclass(frozen=True)
class RescheduleJobInput:
    job_id: UUID
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class GetJobInput:
    job_id: UUID


@dataclass(frozen=True)
class ListJobsInput:
    status: JobStatus | None = None
    lead_id: UUID | None = None
    equipment_id: UUID | None = None
    operator_id: UUID | None = None


# --- Output Models ---


@dataclass(frozen=True)
class JobOutput:
    """
    Result of a job operation.

    conflicts is filled only when a booking was refused because the
    equipment or the operator is already taken.
    """

    job: Job | None
    errors: tuple[SchedulingValidationError, ...] = field(default_factory=tuple)
    conflicts: tuple[Job, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class JobListOutput:
    jobs: tuple[Job, ...]
    total: int


@dataclass(frozen=True)
class JobAvailabilityOutput:
    available: bool
    conflicts: tuple[Job, ...] = field(default_factory=tuple)
    errors: tuple[SchedulingValidationError, ...] = field(default_factory=tuple)
