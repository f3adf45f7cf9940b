"""
Quotations component - Versioned pricing proposals per lead.

Every negotiation round appends a new version; existing versions are never
rewritten. The total is always derived by the pricing component. Version
numbers are allocated and saved under a process-wide lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock
from uuid import UUID

from src.components.leads import ChangeLeadStatusInput, run_change_status
from src.components.pricing import INPUT_FIELDS, calculate_total_rent
from src.domain.entities import Lead, Quotation, QuotationInputs
from src.domain.errors import InvalidInput

from .models import (
    CreateQuotationInput,
    GetQuotationInput,
    ListQuotationsInput,
    QuotationListOutput,
    QuotationOutput,
    QuotationValidationError,
    ReviseQuotationInput,
)
from .ports import ClockPort, LeadRepoPort, NotifierPort, QuotationRepoPort

logger = logging.getLogger(__name__)

_version_lock = Lock()


def next_version(existing: Iterable[Quotation]) -> int:
    """Version numbers start at 1 and only grow."""
    return max((q.version for q in existing), default=0) + 1


def _error(code: str, message: str, field: str | None = None) -> QuotationOutput:
    return QuotationOutput(
        quotation=None,
        errors=(QuotationValidationError(code=code, message=message, field=field),),
        success=False,
    )


def _append_version(
    lead: Lead,
    inputs: QuotationInputs,
    created_by: UUID,
    repo: QuotationRepoPort,
    clock: ClockPort,
) -> QuotationOutput:
    try:
        total_rent = calculate_total_rent(inputs)
    except InvalidInput as e:
        return _error("invalid_input", e.message, e.field)

    with _version_lock:
        now = clock.now_utc()
        quotation = Quotation(
            **inputs.model_dump(),
            lead_id=lead.id,
            total_rent=total_rent,
            version=next_version(repo.list_by_lead(lead.id)),
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        repo.save(quotation)

    logger.info(
        "Quotation v%d for lead %s saved with total %d",
        quotation.version,
        lead.id,
        quotation.total_rent,
    )
    return QuotationOutput(quotation=quotation, success=True)


def _closed(lead: Lead) -> QuotationOutput | None:
    if lead.status in ("won", "lost"):
        return _error("lead_closed", f"Lead is already {lead.status}", "lead_id")
    return None


def _notify_created(lead: Lead, quotation: Quotation, notifier: NotifierPort | None) -> None:
    if notifier is None or lead.assigned_to is None:
        return
    notifier.notify(
        lead.assigned_to,
        "quotation_created",
        "Quotation Created",
        f"Quotation v{quotation.version} has been created for {lead.customer_name}",
        link=f"/quotations/{quotation.id}",
    )


def run_create(
    inp: CreateQuotationInput,
    repo: QuotationRepoPort,
    lead_repo: LeadRepoPort,
    clock: ClockPort,
    notifier: NotifierPort | None = None,
) -> QuotationOutput:
    """
    Price and store a quotation for a lead.

    The first quotation on a `new` lead opens negotiation.
    """
    lead = lead_repo.get_by_id(inp.lead_id)
    if lead is None:
        return _error("lead_not_found", f"Lead with ID {inp.lead_id} not found", "lead_id")
    closed = _closed(lead)
    if closed:
        return closed

    result = _append_version(lead, inp.inputs, inp.created_by, repo, clock)
    if not result.success or result.quotation is None:
        return result

    if lead.status == "new":
        run_change_status(
            ChangeLeadStatusInput(lead_id=lead.id, status="negotiation"),
            lead_repo,
            clock,
            notifier,
        )

    _notify_created(lead, result.quotation, notifier)
    return result


def run_revise(
    inp: ReviseQuotationInput,
    repo: QuotationRepoPort,
    lead_repo: LeadRepoPort,
    clock: ClockPort,
    notifier: NotifierPort | None = None,
) -> QuotationOutput:
    """
    Apply updates on top of an existing version and append the result.

    Won and lost leads take no further versions.
    """
    source = repo.get_by_id(inp.quotation_id)
    if source is None:
        return _error("quotation_not_found", f"Quotation with ID {inp.quotation_id} not found")

    unknown = sorted(set(inp.updates) - set(INPUT_FIELDS))
    if unknown:
        return _error("unknown_field", f"Unknown pricing fields: {', '.join(unknown)}", unknown[0])

    lead = lead_repo.get_by_id(source.lead_id)
    if lead is None:
        return _error("lead_not_found", f"Lead with ID {source.lead_id} not found", "lead_id")
    closed = _closed(lead)
    if closed:
        return closed

    inputs = source.inputs().model_copy(update=dict(inp.updates))
    result = _append_version(lead, inputs, inp.created_by, repo, clock)
    if result.success and result.quotation is not None:
        _notify_created(lead, result.quotation, notifier)
    return result


def run_get(inp: GetQuotationInput, repo: QuotationRepoPort) -> QuotationOutput:
    quotation = repo.get_by_id(inp.quotation_id)
    if quotation is None:
        return _error("quotation_not_found", f"Quotation with ID {inp.quotation_id} not found")
    return QuotationOutput(quotation=quotation, success=True)


def run_list(inp: ListQuotationsInput, repo: QuotationRepoPort) -> QuotationListOutput:
    quotations = sorted(repo.list_by_lead(inp.lead_id), key=lambda q: q.version)
    return QuotationListOutput(quotations=tuple(quotations), total=len(quotations))


def run_latest(inp: ListQuotationsInput, repo: QuotationRepoPort) -> QuotationOutput:
    latest = run_list(inp, repo).latest
    if latest is None:
        return _error("quotation_not_found", f"No quotations for lead {inp.lead_id}", "lead_id")
    return QuotationOutput(quotation=latest, success=True)


def run(
    inp: CreateQuotationInput | ReviseQuotationInput | GetQuotationInput | ListQuotationsInput,
    *,
    repo: QuotationRepoPort,
    lead_repo: LeadRepoPort | None = None,
    clock: ClockPort | None = None,
    notifier: NotifierPort | None = None,
) -> QuotationOutput | QuotationListOutput:
    if isinstance(inp, CreateQuotationInput):
        assert lead_repo and clock
        return run_create(inp, repo, lead_repo, clock, notifier)

    elif isinstance(inp, ReviseQuotationInput):
        assert lead_repo and clock
        return run_revise(inp, repo, lead_repo, clock, notifier)

    elif isinstance(inp, GetQuotationInput):
        return run_get(inp, repo)

    elif isinstance(inp, ListQuotationsInput):
        return run_list(inp, repo)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
