from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import QuotationCreateRequest, QuotationReviseRequest
from src.app_shell.context import ServiceContext
from src.components.quotations import (
    CreateQuotationInput,
    GetQuotationInput,
    ListQuotationsInput,
    ReviseQuotationInput,
    run_create,
    run_get,
    run_latest,
    run_list,
    run_revise,
)
from src.domain.entities import Quotation, QuotationInputs, User

router = APIRouter()


@router.post("", response_model=Quotation, status_code=201)
def create_quotation(
    req: QuotationCreateRequest,
    user: User = Depends(require("quotations:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Quotation | None:
    inputs = QuotationInputs.model_validate(req.model_dump(exclude={"lead_id"}))
    result = run_create(
        CreateQuotationInput(lead_id=req.lead_id, inputs=inputs, created_by=user.id),
        ctx.quotation_repo,
        ctx.lead_repo,
        ctx.clock,
        ctx.notifier,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.quotation


@router.get("/lead/{lead_id}", response_model=list[Quotation])
def list_for_lead(
    lead_id: UUID,
    _: User = Depends(require("quotations:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Quotation, ...]:
    """All versions for a lead, oldest first."""
    return run_list(ListQuotationsInput(lead_id=lead_id), ctx.quotation_repo).quotations


@router.get("/lead/{lead_id}/latest", response_model=Quotation)
def latest_for_lead(
    lead_id: UUID,
    _: User = Depends(require("quotations:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Quotation | None:
    result = run_latest(ListQuotationsInput(lead_id=lead_id), ctx.quotation_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.quotation


@router.get("/{quotation_id}", response_model=Quotation)
def get_quotation(
    quotation_id: UUID,
    _: User = Depends(require("quotations:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Quotation | None:
    result = run_get(GetQuotationInput(quotation_id=quotation_id), ctx.quotation_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.quotation


@router.post("/{quotation_id}/revise", response_model=Quotation, status_code=201)
def revise_quotation(
    quotation_id: UUID,
    req: QuotationReviseRequest,
    user: User = Depends(require("quotations:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Quotation | None:
    """Store a new version with the given fields changed."""
    result = run_revise(
        ReviseQuotationInput(quotation_id=quotation_id, updates=req.updates, created_by=user.id),
        ctx.quotation_repo,
        ctx.lead_repo,
        ctx.clock,
        ctx.notifier,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.quotation
