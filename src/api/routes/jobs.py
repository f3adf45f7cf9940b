from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_context, get_current_user, require
from src.api.errors import raise_for_errors
from src.api.schemas import (
    AvailabilityRequest,
    AvailabilityResponse,
    JobCreateRequest,
    JobRescheduleRequest,
    JobStatusRequest,
)
from src.app_shell.context import ServiceContext
from src.components.scheduling import (
    CheckJobAvailabilityInput,
    GetJobInput,
    ListJobsInput,
    RescheduleJobInput,
    ScheduleJobInput,
    UpdateJobStatusInput,
    run_check_availability,
    run_get_job,
    run_list_jobs,
    run_reschedule,
    run_schedule,
    run_update_status,
)
from src.domain.entities import Job, JobStatus, Operator, User

router = APIRouter()


def _operator_for(user: User, ctx: ServiceContext) -> Operator | None:
    """Operator record linked to a login by email."""
    return ctx.operator_repo.get_by_email(user.email)


def _ensure_can_view(user: User, job: Job, ctx: ServiceContext) -> None:
    if ctx.policy.check_permission(user, "jobs:read"):
        return
    operator = _operator_for(user, ctx)
    if operator is None or operator.id != job.operator_id:
        raise HTTPException(status_code=403, detail="Access denied: jobs:read")


@router.get("", response_model=list[Job])
def list_jobs(
    status: JobStatus | None = None,
    lead_id: UUID | None = None,
    equipment_id: UUID | None = None,
    operator_id: UUID | None = None,
    _: User = Depends(require("jobs:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Job, ...]:
    inp = ListJobsInput(
        status=status, lead_id=lead_id, equipment_id=equipment_id, operator_id=operator_id
    )
    return run_list_jobs(inp, scheduler=ctx.scheduler).jobs


@router.get("/mine", response_model=list[Job])
def my_jobs(
    user: User = Depends(require("jobs:read_own")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Job, ...]:
    """Jobs assigned to the operator record matching the caller's email."""
    operator = _operator_for(user, ctx)
    if operator is None:
        return ()
    return run_list_jobs(ListJobsInput(operator_id=operator.id), scheduler=ctx.scheduler).jobs


@router.post("", response_model=Job, status_code=201)
def schedule_job(
    req: JobCreateRequest,
    _: User = Depends(require("jobs:schedule")),
    ctx: ServiceContext = Depends(get_context),
) -> Job | None:
    result = run_schedule(
        ScheduleJobInput(
            lead_id=req.lead_id,
            equipment_id=req.equipment_id,
            operator_id=req.operator_id,
            start_date=req.start_date,
            end_date=req.end_date,
            location=req.location,
            notes=req.notes,
            customer_name=req.customer_name,
        ),
        scheduler=ctx.scheduler,
    )
    if not result.success:
        raise_for_errors(result.errors, result.conflicts)
    return result.job


@router.post("/availability", response_model=AvailabilityResponse)
def check_availability(
    req: AvailabilityRequest,
    _: User = Depends(require("jobs:read")),
    ctx: ServiceContext = Depends(get_context),
) -> AvailabilityResponse:
    """Dry-run conflict check for a proposed booking window."""
    result = run_check_availability(
        CheckJobAvailabilityInput(
            equipment_id=req.equipment_id,
            operator_id=req.operator_id,
            start_date=req.start_date,
            end_date=req.end_date,
            exclude_job_id=req.exclude_job_id,
        ),
        scheduler=ctx.scheduler,
    )
    if result.errors:
        raise_for_errors(result.errors)
    return AvailabilityResponse(available=result.available, conflicts=list(result.conflicts))


@router.get("/{job_id}", response_model=Job)
def get_job(
    job_id: UUID,
    user: User = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> Job:
    result = run_get_job(GetJobInput(job_id=job_id), scheduler=ctx.scheduler)
    if not result.success or result.job is None:
        raise_for_errors(result.errors)
    _ensure_can_view(user, result.job, ctx)
    return result.job


@router.post("/{job_id}/status", response_model=Job)
def update_job_status(
    job_id: UUID,
    req: JobStatusRequest,
    user: User = Depends(require("jobs:update_status")),
    ctx: ServiceContext = Depends(get_context),
) -> Job | None:
    """
    Move a job along its lifecycle.

    Operators may only accept, reject, start or finish their own jobs;
    cancelling is left to whoever can schedule.
    """
    if not ctx.policy.check_permission(user, "jobs:schedule"):
        if req.status == "cancelled":
            raise HTTPException(status_code=403, detail="Access denied: jobs:schedule")
        current = run_get_job(GetJobInput(job_id=job_id), scheduler=ctx.scheduler)
        if not current.success or current.job is None:
            raise_for_errors(current.errors)
        operator = _operator_for(user, ctx)
        if operator is None or operator.id != current.job.operator_id:
            raise HTTPException(status_code=403, detail="Not your job")

    result = run_update_status(
        UpdateJobStatusInput(job_id=job_id, status=req.status), scheduler=ctx.scheduler
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.job


@router.post("/{job_id}/reschedule", response_model=Job)
def reschedule_job(
    job_id: UUID,
    req: JobRescheduleRequest,
    _: User = Depends(require("jobs:schedule")),
    ctx: ServiceContext = Depends(get_context),
) -> Job | None:
    result = run_reschedule(
        RescheduleJobInput(job_id=job_id, start_date=req.start_date, end_date=req.end_date),
        scheduler=ctx.scheduler,
    )
    if not result.success:
        raise_for_errors(result.errors, result.conflicts)
    return result.job
