"""
Scheduling component - Job booking and lifecycle.

Wraps JobScheduler and converts its results into output models.

Invariants:
- No two unresolved jobs share equipment or operator over overlapping windows
- Rescheduling never conflicts with the job's own previous window
- Status changes follow the job lifecycle; terminal states stay terminal
"""

from __future__ import annotations

from src.rules.models import SchedulingRules

from ._impl import JobScheduler, SchedulingConfig
from .models import (
    CheckJobAvailabilityInput,
    GetJobInput,
    JobAvailabilityOutput,
    JobListOutput,
    JobOutput,
    ListJobsInput,
    RescheduleJobInput,
    ScheduleJobInput,
    SchedulingValidationError,
    UpdateJobStatusInput,
)
from .ports import (
    ClockPort,
    EquipmentRepoPort,
    JobRepoPort,
    LeadRepoPort,
    NotifierPort,
    OperatorRepoPort,
    UserRepoPort,
)


def build_config(rules: SchedulingRules | None) -> SchedulingConfig:
    """Build scheduling config from the rules file section."""
    if rules is None:
        return SchedulingConfig()
    return SchedulingConfig(
        max_booking_days=rules.max_booking_days,
        block_maintenance_equipment=rules.block_maintenance_equipment,
    )


def create_scheduler(
    *,
    jobs: JobRepoPort,
    leads: LeadRepoPort,
    equipment: EquipmentRepoPort,
    operators: OperatorRepoPort,
    clock: ClockPort,
    users: UserRepoPort | None = None,
    notifier: NotifierPort | None = None,
    rules: SchedulingRules | None = None,
) -> JobScheduler:
    return JobScheduler(
        jobs=jobs,
        leads=leads,
        equipment=equipment,
        operators=operators,
        clock=clock,
        users=users,
        notifier=notifier,
        config=build_config(rules),
    )


# --- Component Entry Points ---


def run_schedule(inp: ScheduleJobInput, *, scheduler: JobScheduler) -> JobOutput:
    """
    Book equipment and an operator for a lead.

    Args:
        inp: Lead, resources, window and optional site details.
        scheduler: Job scheduler service.

    Returns:
        JobOutput with the new job, or errors plus any conflicting jobs.
    """
    job, errors, conflicts = scheduler.schedule(
        lead_id=inp.lead_id,
        equipment_id=inp.equipment_id,
        operator_id=inp.operator_id,
        start=inp.start_date,
        end=inp.end_date,
        location=inp.location,
        notes=inp.notes,
        customer_name=inp.customer_name,
    )
    return JobOutput(
        job=job,
        errors=tuple(errors),
        conflicts=tuple(conflicts),
        success=not errors,
    )


def run_check_availability(
    inp: CheckJobAvailabilityInput, *, scheduler: JobScheduler
) -> JobAvailabilityOutput:
    """Check a proposed window against the current job snapshot."""
    conflicts, errors = scheduler.check(
        inp.equipment_id,
        inp.operator_id,
        inp.start_date,
        inp.end_date,
        exclude_job_id=inp.exclude_job_id,
    )
    return JobAvailabilityOutput(
        available=not conflicts and not errors,
        conflicts=tuple(conflicts),
        errors=tuple(errors),
    )


def run_update_status(inp: UpdateJobStatusInput, *, scheduler: JobScheduler) -> JobOutput:
    job, errors = scheduler.update_status(inp.job_id, inp.status)
    return JobOutput(job=job, errors=tuple(errors), success=not errors)


def run_reschedule(inp: RescheduleJobInput, *, scheduler: JobScheduler) -> JobOutput:
    job, errors, conflicts = scheduler.reschedule(inp.job_id, inp.start_date, inp.end_date)
    return JobOutput(
        job=job,
        errors=tuple(errors),
        conflicts=tuple(conflicts),
        success=not errors,
    )


def run_get_job(inp: GetJobInput, *, scheduler: JobScheduler) -> JobOutput:
    job = scheduler.get(inp.job_id)
    if job is None:
        return JobOutput(
            job=None,
            errors=(
                SchedulingValidationError(
                    code="job_not_found",
                    message=f"Job with ID {inp.job_id} not found",
                ),
            ),
        )
    return JobOutput(job=job, success=True)


def run_list_jobs(inp: ListJobsInput, *, scheduler: JobScheduler) -> JobListOutput:
    jobs = scheduler.list_jobs(
        status=inp.status,
        lead_id=inp.lead_id,
        equipment_id=inp.equipment_id,
        operator_id=inp.operator_id,
    )
    return JobListOutput(jobs=tuple(jobs), total=len(jobs))


def run(
    inp: (
        ScheduleJobInput
        | CheckJobAvailabilityInput
        | UpdateJobStatusInput
        | RescheduleJobInput
        | GetJobInput
        | ListJobsInput
    ),
    *,
    scheduler: JobScheduler,
) -> JobOutput | JobAvailabilityOutput | JobListOutput:
    """
    Main entry point for the scheduling component.

    Raises:
        ValueError: If input type is unknown.
    """
    if isinstance(inp, ScheduleJobInput):
        return run_schedule(inp, scheduler=scheduler)

    elif isinstance(inp, CheckJobAvailabilityInput):
        return run_check_availability(inp, scheduler=scheduler)

    elif isinstance(inp, UpdateJobStatusInput):
        return run_update_status(inp, scheduler=scheduler)

    elif isinstance(inp, RescheduleJobInput):
        return run_reschedule(inp, scheduler=scheduler)

    elif isinstance(inp, GetJobInput):
        return run_get_job(inp, scheduler=scheduler)

    elif isinstance(inp, ListJobsInput):
        return run_list_jobs(inp, scheduler=scheduler)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
