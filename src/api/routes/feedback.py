"""
Job summary endpoints: safety checklist, customer feedback and discounts.

All of them address a completed job by its ID.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import (
    CustomerFeedbackRequest,
    DiscountDecisionRequest,
    DiscountRequestBody,
    SafetyChecklistRequest,
)
from src.app_shell.context import ServiceContext
from src.components.feedback import (
    DecideDiscountInput,
    GetReportInput,
    ReportOutput,
    RequestDiscountInput,
    RequestFeedbackInput,
    SubmitFeedbackInput,
    SubmitSafetyChecklistInput,
    run_decide_discount,
    run_get_report,
    run_request_discount,
    run_request_feedback,
    run_submit_feedback,
    run_submit_safety,
)
from src.domain.entities import JobReport, User

router = APIRouter()


def _report_or_raise(result: ReportOutput) -> JobReport | None:
    if not result.success:
        raise_for_errors(result.errors)
    return result.report


@router.get("/jobs/{job_id}", response_model=JobReport)
def get_report(
    job_id: UUID,
    _: User = Depends(require("feedback:read")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_get_report(
        GetReportInput(job_id=job_id), ctx.job_repo, ctx.report_repo, ctx.feedback_config
    )
    return _report_or_raise(result)


@router.post("/jobs/{job_id}/safety", response_model=JobReport)
def submit_safety(
    job_id: UUID,
    req: SafetyChecklistRequest,
    _: User = Depends(require("feedback:submit")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_submit_safety(
        SubmitSafetyChecklistInput(job_id=job_id, checks=req.checks, notes=req.notes),
        ctx.job_repo,
        ctx.report_repo,
        ctx.feedback_config,
        ctx.clock,
    )
    return _report_or_raise(result)


@router.post("/jobs/{job_id}/request", response_model=JobReport)
def request_feedback(
    job_id: UUID,
    user: User = Depends(require("feedback:request")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_request_feedback(
        RequestFeedbackInput(job_id=job_id, requested_by=user.id),
        ctx.job_repo,
        ctx.report_repo,
        ctx.lead_repo,
        ctx.feedback_config,
        ctx.clock,
        ctx.notifier,
    )
    return _report_or_raise(result)


@router.post("/jobs/{job_id}/customer", response_model=JobReport)
def submit_customer_feedback(
    job_id: UUID,
    req: CustomerFeedbackRequest,
    _: User = Depends(require("feedback:submit")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_submit_feedback(
        SubmitFeedbackInput(job_id=job_id, rating=req.rating, comments=req.comments),
        ctx.job_repo,
        ctx.report_repo,
        ctx.feedback_config,
        ctx.clock,
    )
    return _report_or_raise(result)


@router.post("/jobs/{job_id}/discount", response_model=JobReport)
def request_discount(
    job_id: UUID,
    req: DiscountRequestBody,
    user: User = Depends(require("feedback:request_discount")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_request_discount(
        RequestDiscountInput(
            job_id=job_id,
            percentage=req.percentage,
            reason=req.reason,
            requested_by=user.id,
        ),
        ctx.job_repo,
        ctx.report_repo,
        ctx.feedback_config,
        ctx.clock,
    )
    return _report_or_raise(result)


@router.post("/jobs/{job_id}/discount/decision", response_model=JobReport)
def decide_discount(
    job_id: UUID,
    req: DiscountDecisionRequest,
    user: User = Depends(require("feedback:decide_discount")),
    ctx: ServiceContext = Depends(get_context),
) -> JobReport | None:
    result = run_decide_discount(
        DecideDiscountInput(job_id=job_id, approve=req.decision == "approve", decided_by=user.id),
        ctx.job_repo,
        ctx.report_repo,
        ctx.feedback_config,
        ctx.clock,
    )
    return _report_or_raise(result)
