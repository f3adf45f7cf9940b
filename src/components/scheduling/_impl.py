"""
JobScheduler - Booking cranes and operators onto jobs.

Key behaviors:
- A job holds one equipment unit and one operator over [start, end)
- Bookings are refused while any unresolved job shares a resource and overlaps
- Equipment under maintenance cannot be booked
- Status moves scheduled -> accepted -> in_progress -> completed, with
  rejected / cancelled as side exits; a rejected job holds its resources
  until it is cancelled
- Naive datetimes are read as UTC
- Conflict check and save run under one lock per scheduler, so concurrent
  requests cannot both claim the same window
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from threading import Lock
from uuid import UUID

from src.components.availability import BookingCandidate, as_utc, find_conflicts
from src.domain.entities import Job, JobStatus, NotificationType, User
from src.domain.errors import InvalidInput
from src.domain.state import can_transition_job, is_terminal_job_status

from .models import SchedulingValidationError
from .ports import (
    ClockPort,
    EquipmentRepoPort,
    JobRepoPort,
    LeadRepoPort,
    NotifierPort,
    OperatorRepoPort,
    UserRepoPort,
)

logger = logging.getLogger(__name__)


# --- Configuration ---


@dataclass(frozen=True)
class SchedulingConfig:
    """Scheduling configuration from rules."""

    max_booking_days: int = 365
    block_maintenance_equipment: bool = True


DEFAULT_CONFIG = SchedulingConfig()

Errors = list[SchedulingValidationError]


class JobScheduler:
    """Job booking service over the repository ports."""

    def __init__(
        self,
        jobs: JobRepoPort,
        leads: LeadRepoPort,
        equipment: EquipmentRepoPort,
        operators: OperatorRepoPort,
        clock: ClockPort,
        users: UserRepoPort | None = None,
        notifier: NotifierPort | None = None,
        config: SchedulingConfig | None = None,
    ) -> None:
        self._jobs = jobs
        self._leads = leads
        self._equipment = equipment
        self._operators = operators
        self._clock = clock
        self._users = users
        self._notifier = notifier
        self._config = config or DEFAULT_CONFIG
        self._lock = Lock()

    # --- Validation ---

    def _validate_window(self, start: datetime, end: datetime) -> Errors:
        if end <= start:
            return [
                SchedulingValidationError(
                    code="invalid_window",
                    message="End date must be after start date",
                    field="end_date",
                )
            ]
        if end - start > timedelta(days=self._config.max_booking_days):
            return [
                SchedulingValidationError(
                    code="booking_too_long",
                    message=f"Bookings are limited to {self._config.max_booking_days} days",
                    field="end_date",
                )
            ]
        return []

    def _validate_resources(self, equipment_id: UUID, operator_id: UUID) -> Errors:
        errors: Errors = []

        equipment = self._equipment.get_by_id(equipment_id)
        if equipment is None:
            errors.append(
                SchedulingValidationError(
                    code="equipment_not_found",
                    message=f"Equipment with ID {equipment_id} not found",
                    field="equipment_id",
                )
            )
        elif self._config.block_maintenance_equipment and equipment.status == "maintenance":
            errors.append(
                SchedulingValidationError(
                    code="equipment_unavailable",
                    message=f"{equipment.name} is under maintenance",
                    field="equipment_id",
                )
            )

        if self._operators.get_by_id(operator_id) is None:
            errors.append(
                SchedulingValidationError(
                    code="operator_not_found",
                    message=f"Operator with ID {operator_id} not found",
                    field="operator_id",
                )
            )

        return errors

    def _conflicts(
        self,
        candidate: BookingCandidate,
        exclude_job_id: UUID | None = None,
    ) -> list[Job]:
        snapshot = [j for j in self._jobs.list_all() if j.id != exclude_job_id]
        return find_conflicts(candidate, snapshot)

    @staticmethod
    def _conflict_error(conflicts: list[Job]) -> SchedulingValidationError:
        return SchedulingValidationError(
            code="booking_conflict",
            message=f"Equipment or operator already booked by {len(conflicts)} job(s)",
        )

    # --- Notifications ---

    def _operator_user(self, operator_id: UUID) -> User | None:
        if self._users is None:
            return None
        operator = self._operators.get_by_id(operator_id)
        if operator is None:
            return None
        return self._users.get_by_email(operator.email)

    def _managers(self) -> list[User]:
        if self._users is None:
            return []
        return [
            u for u in self._users.list_all()
            if u.role == "operations_manager" and u.status == "active"
        ]

    def _notify(
        self, users: list[User], type: NotificationType, title: str, message: str, job: Job
    ) -> None:
        if self._notifier is None:
            return
        for user in users:
            self._notifier.notify(user.id, type, title, message, link=f"/jobs/{job.id}")

    def _notify_operator(
        self, job: Job, type: NotificationType, title: str, message: str
    ) -> None:
        user = self._operator_user(job.operator_id)
        if user is not None:
            self._notify([user], type, title, message, job)

    # --- Operations ---

    def check(
        self,
        equipment_id: UUID,
        operator_id: UUID,
        start: datetime,
        end: datetime,
        exclude_job_id: UUID | None = None,
    ) -> tuple[list[Job], Errors]:
        candidate = BookingCandidate(
            equipment_id=equipment_id,
            operator_id=operator_id,
            start=as_utc(start),
            end=as_utc(end),
        )
        try:
            return self._conflicts(candidate, exclude_job_id), []
        except InvalidInput as e:
            return [], [
                SchedulingValidationError(code="invalid_window", message=str(e), field="end_date")
            ]

    def schedule(
        self,
        lead_id: UUID,
        equipment_id: UUID,
        operator_id: UUID,
        start: datetime,
        end: datetime,
        location: str = "",
        notes: str = "",
        customer_name: str | None = None,
    ) -> tuple[Job | None, Errors, list[Job]]:
        start, end = as_utc(start), as_utc(end)

        errors = self._validate_window(start, end)
        lead = self._leads.get_by_id(lead_id)
        if lead is None:
            errors.append(
                SchedulingValidationError(
                    code="lead_not_found",
                    message=f"Lead with ID {lead_id} not found",
                    field="lead_id",
                )
            )
        elif lead.status == "lost":
            errors.append(
                SchedulingValidationError(
                    code="lead_closed",
                    message="Cannot schedule work for a lost lead",
                    field="lead_id",
                )
            )
        errors.extend(self._validate_resources(equipment_id, operator_id))
        if errors or lead is None:
            return None, errors, []

        candidate = BookingCandidate(
            equipment_id=equipment_id, operator_id=operator_id, start=start, end=end
        )
        with self._lock:
            conflicts = self._conflicts(candidate)
            if not conflicts:
                now = self._clock.now_utc()
                job = Job(
                    lead_id=lead.id,
                    customer_name=customer_name or lead.customer_name,
                    equipment_id=equipment_id,
                    operator_id=operator_id,
                    start_date=start,
                    end_date=end,
                    location=location or lead.site_location,
                    notes=notes,
                    created_at=now,
                    updated_at=now,
                )
                self._jobs.save(job)

        if conflicts:
            logger.info(
                "Booking refused for equipment %s / operator %s: %d conflict(s)",
                equipment_id,
                operator_id,
                len(conflicts),
            )
            return None, [self._conflict_error(conflicts)], conflicts

        logger.info("Job %s scheduled %s -> %s", job.id, start.isoformat(), end.isoformat())

        self._notify_operator(
            job,
            "job_assigned",
            "New Job Assigned",
            f"You have been assigned to a job for {job.customer_name} "
            f"starting {start.date().isoformat()}",
        )
        return job, [], []

    def update_status(self, job_id: UUID, status: JobStatus) -> tuple[Job | None, Errors]:
        with self._lock:
            job = self._jobs.get_by_id(job_id)
            if job is None:
                return None, [
                    SchedulingValidationError(
                        code="job_not_found", message=f"Job with ID {job_id} not found"
                    )
                ]

            if not can_transition_job(job.status, status):
                return job, [
                    SchedulingValidationError(
                        code="invalid_transition",
                        message=f"Cannot move job from {job.status} to {status}",
                        field="status",
                    )
                ]
            if job.status == status:
                return job, []

            previous = job.status
            job.status = status
            job.updated_at = self._clock.now_utc()
            self._jobs.save(job)

        logger.info("Job %s moved %s -> %s", job.id, previous, status)

        if status == "rejected":
            self._notify(
                self._managers(),
                "job_rejected",
                "Job Rejected",
                f"The operator rejected the job for {job.customer_name}",
                job,
            )
        elif status == "completed":
            self._notify(
                self._managers(),
                "job_completed",
                "Job Completed",
                f"The job for {job.customer_name} has been completed",
                job,
            )
        return job, []

    def reschedule(
        self, job_id: UUID, start: datetime, end: datetime
    ) -> tuple[Job | None, Errors, list[Job]]:
        start, end = as_utc(start), as_utc(end)

        with self._lock:
            job = self._jobs.get_by_id(job_id)
            if job is None:
                return None, [
                    SchedulingValidationError(
                        code="job_not_found", message=f"Job with ID {job_id} not found"
                    )
                ], []
            if is_terminal_job_status(job.status) or job.status in ("in_progress", "rejected"):
                return job, [
                    SchedulingValidationError(
                        code="job_locked",
                        message=f"A job that is {job.status} cannot be rescheduled",
                        field="status",
                    )
                ], []

            errors = self._validate_window(start, end)
            if errors:
                return job, errors, []

            conflicts = self._conflicts(
                BookingCandidate(
                    equipment_id=job.equipment_id, operator_id=job.operator_id, start=start, end=end
                ),
                exclude_job_id=job.id,
            )
            if conflicts:
                return job, [self._conflict_error(conflicts)], conflicts

            job.start_date = start
            job.end_date = end
            job.updated_at = self._clock.now_utc()
            self._jobs.save(job)

        logger.info("Job %s rescheduled to %s -> %s", job.id, start.isoformat(), end.isoformat())

        self._notify_operator(
            job,
            "job_rescheduled",
            "Job Rescheduled",
            f"The job for {job.customer_name} now runs "
            f"{start.date().isoformat()} to {end.date().isoformat()}",
        )
        return job, [], []

    def get(self, job_id: UUID) -> Job | None:
        return self._jobs.get_by_id(job_id)

    def list_jobs(
        self,
        status: JobStatus | None = None,
        lead_id: UUID | None = None,
        equipment_id: UUID | None = None,
        operator_id: UUID | None = None,
    ) -> list[Job]:
        """Jobs ordered by start date."""
        jobs = self._jobs.list_all()
        if status is not None:
            jobs = [j for j in jobs if j.status == status]
        if lead_id is not None:
            jobs = [j for j in jobs if j.lead_id == lead_id]
        if equipment_id is not None:
            jobs = [j for j in jobs if j.equipment_id == equipment_id]
        if operator_id is not None:
            jobs = [j for j in jobs if j.operator_id == operator_id]
        jobs.sort(key=lambda j: j.start_date)
        return jobs
