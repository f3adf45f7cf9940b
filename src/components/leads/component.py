"""
Leads component - Sales pipeline management.

Handles lead intake, edits and status transitions
(new -> negotiation -> won | lost).
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import Lead
from src.domain.state import can_transition_lead

from .models import (
    ChangeLeadStatusInput,
    CreateLeadInput,
    GetLeadInput,
    LeadListOutput,
    LeadOutput,
    LeadValidationError,
    ListLeadsInput,
    UpdateLeadInput,
)
from .ports import ClockPort, LeadRepoPort, NotifierPort

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = ("customer_name", "service_needed", "site_location")


def validate_lead_data(**values: Any) -> list[LeadValidationError]:
    """Validate the text fields that are present in values."""
    errors: list[LeadValidationError] = []
    for name in _REQUIRED_TEXT:
        if name not in values or values[name] is None:
            continue
        value = values[name]
        if not str(value).strip():
            errors.append(
                LeadValidationError(
                    code=f"{name}_required",
                    message=f"{name.replace('_', ' ').capitalize()} is required",
                    field=name,
                )
            )
        elif len(value) > 200:
            errors.append(
                LeadValidationError(
                    code=f"{name}_too_long",
                    message=f"{name.replace('_', ' ').capitalize()} must be 200 characters or less",
                    field=name,
                )
            )
    return errors


def _not_found(inp: GetLeadInput | UpdateLeadInput | ChangeLeadStatusInput) -> LeadOutput:
    return LeadOutput(
        lead=None,
        errors=(
            LeadValidationError(
                code="lead_not_found",
                message=f"Lead with ID {inp.lead_id} not found",
            ),
        ),
        success=False,
    )


def run_create(inp: CreateLeadInput, repo: LeadRepoPort, clock: ClockPort) -> LeadOutput:
    """Create a new lead in the `new` state."""
    errors = validate_lead_data(
        customer_name=inp.customer_name,
        service_needed=inp.service_needed,
        site_location=inp.site_location,
    )
    if errors:
        return LeadOutput(lead=None, errors=tuple(errors), success=False)

    now = clock.now_utc()
    lead = Lead(
        customer_name=inp.customer_name.strip(),
        service_needed=inp.service_needed.strip(),
        site_location=inp.site_location.strip(),
        assigned_to=inp.assigned_to,
        notes=inp.notes,
        files=list(inp.files),
        created_at=now,
        updated_at=now,
    )
    repo.save(lead)
    logger.info("Lead %s created for %s", lead.id, lead.customer_name)
    return LeadOutput(lead=lead, success=True)


def run_update(inp: UpdateLeadInput, repo: LeadRepoPort, clock: ClockPort) -> LeadOutput:
    """Update lead fields. Status changes go through run_change_status."""
    lead = repo.get_by_id(inp.lead_id)
    if lead is None:
        return _not_found(inp)

    updates: dict[str, Any] = {}
    if inp.customer_name is not None:
        updates["customer_name"] = inp.customer_name
    if inp.service_needed is not None:
        updates["service_needed"] = inp.service_needed
    if inp.site_location is not None:
        updates["site_location"] = inp.site_location
    if inp.assigned_to is not None:
        updates["assigned_to"] = inp.assigned_to
    if inp.notes is not None:
        updates["notes"] = inp.notes
    if inp.files is not None:
        updates["files"] = list(inp.files)

    errors = validate_lead_data(**updates)
    if errors:
        return LeadOutput(lead=None, errors=tuple(errors), success=False)

    updated = lead.model_copy(update={**updates, "updated_at": clock.now_utc()})
    repo.save(updated)
    return LeadOutput(lead=updated, success=True)


def run_change_status(
    inp: ChangeLeadStatusInput,
    repo: LeadRepoPort,
    clock: ClockPort,
    notifier: NotifierPort | None = None,
) -> LeadOutput:
    lead = repo.get_by_id(inp.lead_id)
    if lead is None:
        return _not_found(inp)

    if not can_transition_lead(lead.status, inp.status):
        return LeadOutput(
            lead=lead,
            errors=(
                LeadValidationError(
                    code="invalid_transition",
                    message=f"Cannot move lead from {lead.status} to {inp.status}",
                    field="status",
                ),
            ),
            success=False,
        )

    if lead.status == inp.status:
        return LeadOutput(lead=lead, success=True)

    previous = lead.status
    lead.status = inp.status
    lead.updated_at = clock.now_utc()
    repo.save(lead)
    logger.info("Lead %s moved %s -> %s", lead.id, previous, inp.status)

    if notifier and lead.assigned_to:
        notifier.notify(
            lead.assigned_to,
            "lead_status_change",
            "Lead Status Updated",
            f'Lead "{lead.customer_name}" has been marked as {inp.status.capitalize()}',
            link=f"/leads/{lead.id}",
        )

    return LeadOutput(lead=lead, success=True)


def run_get(inp: GetLeadInput, repo: LeadRepoPort) -> LeadOutput:
    lead = repo.get_by_id(inp.lead_id)
    if lead is None:
        return _not_found(inp)
    return LeadOutput(lead=lead, success=True)


def run_list(inp: ListLeadsInput, repo: LeadRepoPort) -> LeadListOutput:
    """List leads, newest first, optionally filtered by status or assignee."""
    leads = repo.list_all()
    if inp.status is not None:
        leads = [lead for lead in leads if lead.status == inp.status]
    if inp.assigned_to is not None:
        leads = [lead for lead in leads if lead.assigned_to == inp.assigned_to]
    leads.sort(key=lambda lead: lead.created_at, reverse=True)
    return LeadListOutput(leads=tuple(leads), total=len(leads))


def run(
    inp: CreateLeadInput | UpdateLeadInput | ChangeLeadStatusInput | GetLeadInput | ListLeadsInput,
    *,
    repo: LeadRepoPort,
    clock: ClockPort | None = None,
    notifier: NotifierPort | None = None,
) -> LeadOutput | LeadListOutput:
    if isinstance(inp, CreateLeadInput):
        assert clock
        return run_create(inp, repo, clock)

    elif isinstance(inp, UpdateLeadInput):
        assert clock
        return run_update(inp, repo, clock)

    elif isinstance(inp, ChangeLeadStatusInput):
        assert clock
        return run_change_status(inp, repo, clock, notifier)

    elif isinstance(inp, GetLeadInput):
        return run_get(inp, repo)

    elif isinstance(inp, ListLeadsInput):
        return run_list(inp, repo)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
