"""
Feedback component - Post-job summary.

Safety checklist, customer feedback and discount approval for completed
jobs. One report per job, created on first write.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.entities import CustomerFeedback, DiscountRequest, Job, JobReport

from ._impl import build_checklist, default_checklist, validate_discount, validate_rating
from .models import (
    DecideDiscountInput,
    FeedbackConfig,
    FeedbackValidationError,
    GetReportInput,
    ReportOutput,
    RequestDiscountInput,
    RequestFeedbackInput,
    SubmitFeedbackInput,
    SubmitSafetyChecklistInput,
)
from .ports import ClockPort, JobReportRepoPort, JobRepoPort, LeadRepoPort, NotifierPort

logger = logging.getLogger(__name__)


def _fail(code: str, message: str, field: str | None = None) -> ReportOutput:
    return ReportOutput(
        report=None,
        errors=(FeedbackValidationError(code=code, message=message, field=field),),
    )


def _load(
    job_id: UUID,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort | None = None,
) -> tuple[Job | None, JobReport | None, ReportOutput | None]:
    """Fetch a completed job and its report, starting a fresh report if none exists."""
    job = jobs.get_by_id(job_id)
    if job is None:
        return None, None, _fail("job_not_found", f"Job with ID {job_id} not found", "job_id")
    if job.status != "completed":
        return job, None, _fail(
            "job_not_completed", "Job summary is only available for completed jobs", "job_id"
        )

    report = reports.get_by_job(job_id)
    if report is None:
        report = JobReport(job_id=job_id, safety_checks=default_checklist(config))
        if clock is not None:
            report.created_at = report.updated_at = clock.now_utc()
    return job, report, None


def _save(report: JobReport, reports: JobReportRepoPort, clock: ClockPort) -> ReportOutput:
    report.updated_at = clock.now_utc()
    reports.save(report)
    return ReportOutput(report=report, success=True)


def run_get_report(
    inp: GetReportInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
) -> ReportOutput:
    """Return the job's report, or an unsaved default one."""
    _, report, failure = _load(inp.job_id, jobs, reports, config)
    if failure:
        return failure
    return ReportOutput(report=report, success=True)


def run_submit_safety(
    inp: SubmitSafetyChecklistInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort,
) -> ReportOutput:
    _, report, failure = _load(inp.job_id, jobs, reports, config, clock)
    if failure or report is None:
        return failure or _fail("job_not_found", "Job not found")

    checklist, errors = build_checklist(config, inp.checks)
    if errors:
        return ReportOutput(report=None, errors=tuple(errors))

    report.safety_checks = checklist
    report.safety_notes = inp.notes
    missed = [c.id for c in checklist if not c.checked]
    if missed:
        logger.warning("Job %s closed with unchecked safety items: %s", inp.job_id, ", ".join(missed))
    return _save(report, reports, clock)


def run_request_feedback(
    inp: RequestFeedbackInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    leads: LeadRepoPort,
    config: FeedbackConfig,
    clock: ClockPort,
    notifier: NotifierPort | None = None,
) -> ReportOutput:
    """Mark feedback as requested from the customer and tell the account owner."""
    job, report, failure = _load(inp.job_id, jobs, reports, config, clock)
    if failure or report is None or job is None:
        return failure or _fail("job_not_found", "Job not found")
    if report.feedback is not None:
        return _fail("feedback_exists", "Customer feedback has already been submitted")

    report.feedback_requested_at = clock.now_utc()
    result = _save(report, reports, clock)
    logger.info("Feedback requested for job %s by %s", job.id, inp.requested_by)

    lead = leads.get_by_id(job.lead_id)
    recipient = lead.assigned_to if lead and lead.assigned_to else inp.requested_by
    if notifier:
        notifier.notify(
            recipient,
            "feedback_requested",
            "Feedback Requested",
            f"Feedback has been requested from {job.customer_name}",
            link=f"/jobs/{job.id}/summary",
        )
    return result


def run_submit_feedback(
    inp: SubmitFeedbackInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort,
) -> ReportOutput:
    _, report, failure = _load(inp.job_id, jobs, reports, config, clock)
    if failure or report is None:
        return failure or _fail("job_not_found", "Job not found")

    errors = validate_rating(config, inp.rating)
    if errors:
        return ReportOutput(report=None, errors=tuple(errors))

    report.feedback = CustomerFeedback(
        rating=inp.rating, comments=inp.comments, submitted_at=clock.now_utc()
    )
    return _save(report, reports, clock)


def run_request_discount(
    inp: RequestDiscountInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort,
) -> ReportOutput:
    """Open a discount request. A rejected request may be replaced."""
    _, report, failure = _load(inp.job_id, jobs, reports, config, clock)
    if failure or report is None:
        return failure or _fail("job_not_found", "Job not found")

    errors = validate_discount(config, inp.percentage, inp.reason)
    if errors:
        return ReportOutput(report=None, errors=tuple(errors))

    if report.discount is not None and report.discount.status != "rejected":
        return _fail(
            "discount_exists",
            f"A discount request is already {report.discount.status}",
            "percentage",
        )

    report.discount = DiscountRequest(
        percentage=inp.percentage,
        reason=inp.reason.strip(),
        requested_by=inp.requested_by,
        requested_at=clock.now_utc(),
    )
    logger.info("Discount of %s%% requested for job %s", inp.percentage, inp.job_id)
    return _save(report, reports, clock)


def run_decide_discount(
    inp: DecideDiscountInput,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort,
) -> ReportOutput:
    """Approve or reject a pending discount request."""
    _, report, failure = _load(inp.job_id, jobs, reports, config, clock)
    if failure or report is None:
        return failure or _fail("job_not_found", "Job not found")

    discount = report.discount
    if discount is None or discount.status != "pending":
        return _fail("no_pending_discount", "There is no pending discount request")

    discount.status = "approved" if inp.approve else "rejected"
    discount.decided_by = inp.decided_by
    discount.decided_at = clock.now_utc()
    logger.info("Discount for job %s %s by %s", inp.job_id, discount.status, inp.decided_by)
    return _save(report, reports, clock)


def run(
    inp: (
        GetReportInput
        | SubmitSafetyChecklistInput
        | RequestFeedbackInput
        | SubmitFeedbackInput
        | RequestDiscountInput
        | DecideDiscountInput
    ),
    *,
    jobs: JobRepoPort,
    reports: JobReportRepoPort,
    config: FeedbackConfig,
    clock: ClockPort | None = None,
    leads: LeadRepoPort | None = None,
    notifier: NotifierPort | None = None,
) -> ReportOutput:
    if isinstance(inp, GetReportInput):
        return run_get_report(inp, jobs, reports, config)

    elif isinstance(inp, SubmitSafetyChecklistInput):
        assert clock
        return run_submit_safety(inp, jobs, reports, config, clock)

    elif isinstance(inp, RequestFeedbackInput):
        assert clock and leads
        return run_request_feedback(inp, jobs, reports, leads, config, clock, notifier)

    elif isinstance(inp, SubmitFeedbackInput):
        assert clock
        return run_submit_feedback(inp, jobs, reports, config, clock)

    elif isinstance(inp, RequestDiscountInput):
        assert clock
        return run_request_discount(inp, jobs, reports, config, clock)

    elif isinstance(inp, DecideDiscountInput):
        assert clock
        return run_decide_discount(inp, jobs, reports, config, clock)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
