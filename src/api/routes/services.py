from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import ServiceCreateRequest, ServiceUpdateRequest
from src.app_shell.context import ServiceContext
from src.components.catalog import (
    CreateServiceInput,
    DeleteServiceInput,
    GetServiceInput,
    ListServicesInput,
    UpdateServiceInput,
    run_create_service,
    run_delete_service,
    run_get_service,
    run_list_services,
    run_update_service,
)
from src.domain.entities import Service, ServiceType, User

router = APIRouter()


@router.get("", response_model=list[Service])
def list_services(
    type: ServiceType | None = None,
    active: bool | None = None,
    search: str | None = None,
    _: User = Depends(require("services:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Service, ...]:
    result = run_list_services(
        ListServicesInput(type=type, active=active, search=search), ctx.service_repo
    )
    return result.services


@router.post("", response_model=Service, status_code=201)
def create_service(
    req: ServiceCreateRequest,
    _: User = Depends(require("services:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Service | None:
    result = run_create_service(
        CreateServiceInput(
            name=req.name,
            type=req.type,
            base_rate=req.base_rate,
            unit=req.unit,
            description=req.description,
            is_active=req.is_active,
        ),
        ctx.service_repo,
        ctx.clock,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.service


@router.get("/{service_id}", response_model=Service)
def get_service(
    service_id: UUID,
    _: User = Depends(require("services:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Service | None:
    result = run_get_service(GetServiceInput(service_id=service_id), ctx.service_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.service


@router.patch("/{service_id}", response_model=Service)
def update_service(
    service_id: UUID,
    req: ServiceUpdateRequest,
    _: User = Depends(require("services:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Service | None:
    result = run_update_service(
        UpdateServiceInput(
            service_id=service_id,
            name=req.name,
            type=req.type,
            base_rate=req.base_rate,
            unit=req.unit,
            description=req.description,
            is_active=req.is_active,
        ),
        ctx.service_repo,
        ctx.clock,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.service


@router.delete("/{service_id}")
def delete_service(
    service_id: UUID,
    _: User = Depends(require("services:write")),
    ctx: ServiceContext = Depends(get_context),
) -> dict[str, str]:
    result = run_delete_service(DeleteServiceInput(service_id=service_id), ctx.service_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return {"status": "deleted"}
