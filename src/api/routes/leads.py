from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import LeadCreateRequest, LeadStatusRequest, LeadUpdateRequest
from src.app_shell.context import ServiceContext
from src.components.leads import (
    ChangeLeadStatusInput,
    CreateLeadInput,
    GetLeadInput,
    ListLeadsInput,
    UpdateLeadInput,
    run_change_status,
    run_create,
    run_get,
    run_list,
    run_update,
)
from src.domain.entities import Lead, LeadStatus, User

router = APIRouter()


@router.get("", response_model=list[Lead])
def list_leads(
    status: LeadStatus | None = None,
    assigned_to: UUID | None = None,
    _: User = Depends(require("leads:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Lead, ...]:
    result = run_list(ListLeadsInput(status=status, assigned_to=assigned_to), ctx.lead_repo)
    return result.leads


@router.post("", response_model=Lead, status_code=201)
def create_lead(
    req: LeadCreateRequest,
    _: User = Depends(require("leads:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Lead | None:
    inp = CreateLeadInput(
        customer_name=req.customer_name,
        service_needed=req.service_needed,
        site_location=req.site_location,
        assigned_to=req.assigned_to,
        notes=req.notes,
        files=tuple(req.files),
    )
    result = run_create(inp, ctx.lead_repo, ctx.clock)
    if not result.success:
        raise_for_errors(result.errors)
    return result.lead


@router.get("/{lead_id}", response_model=Lead)
def get_lead(
    lead_id: UUID,
    _: User = Depends(require("leads:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Lead | None:
    result = run_get(GetLeadInput(lead_id=lead_id), ctx.lead_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.lead


@router.patch("/{lead_id}", response_model=Lead)
def update_lead(
    lead_id: UUID,
    req: LeadUpdateRequest,
    _: User = Depends(require("leads:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Lead | None:
    inp = UpdateLeadInput(
        lead_id=lead_id,
        customer_name=req.customer_name,
        service_needed=req.service_needed,
        site_location=req.site_location,
        assigned_to=req.assigned_to,
        notes=req.notes,
        files=tuple(req.files) if req.files is not None else None,
    )
    result = run_update(inp, ctx.lead_repo, ctx.clock)
    if not result.success:
        raise_for_errors(result.errors)
    return result.lead


@router.post("/{lead_id}/status", response_model=Lead)
def change_status(
    lead_id: UUID,
    req: LeadStatusRequest,
    _: User = Depends(require("leads:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Lead | None:
    result = run_change_status(
        ChangeLeadStatusInput(lead_id=lead_id, status=req.status),
        ctx.lead_repo,
        ctx.clock,
        ctx.notifier,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.lead
