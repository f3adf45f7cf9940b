from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import EquipmentCreateRequest, EquipmentUpdateRequest, OperatorCreateRequest
from src.app_shell.context import ServiceContext
from src.components.fleet import (
    CreateEquipmentInput,
    CreateOperatorInput,
    DeleteEquipmentInput,
    GetEquipmentInput,
    GetOperatorInput,
    ListEquipmentInput,
    ListOperatorsInput,
    UpdateEquipmentInput,
    run_create_equipment,
    run_create_operator,
    run_delete_equipment,
    run_get_equipment,
    run_get_operator,
    run_list_equipment,
    run_list_operators,
    run_update_equipment,
)
from src.domain.entities import Equipment, EquipmentStatus, Operator, User

router = APIRouter()


# --- Equipment ---


@router.get("/equipment", response_model=list[Equipment])
def list_equipment(
    status: EquipmentStatus | None = None,
    search: str | None = None,
    _: User = Depends(require("fleet:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Equipment, ...]:
    result = run_list_equipment(
        ListEquipmentInput(status=status, search=search), ctx.equipment_repo
    )
    return result.equipment


@router.post("/equipment", response_model=Equipment, status_code=201)
def create_equipment(
    req: EquipmentCreateRequest,
    _: User = Depends(require("fleet:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Equipment | None:
    result = run_create_equipment(
        CreateEquipmentInput(
            name=req.name,
            type=req.type,
            base_rate=req.base_rate,
            description=req.description,
            status=req.status,
        ),
        ctx.equipment_repo,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment


@router.get("/equipment/{equipment_id}", response_model=Equipment)
def get_equipment(
    equipment_id: UUID,
    _: User = Depends(require("fleet:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Equipment | None:
    result = run_get_equipment(GetEquipmentInput(equipment_id=equipment_id), ctx.equipment_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment


@router.patch("/equipment/{equipment_id}", response_model=Equipment)
def update_equipment(
    equipment_id: UUID,
    req: EquipmentUpdateRequest,
    _: User = Depends(require("fleet:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Equipment | None:
    result = run_update_equipment(
        UpdateEquipmentInput(
            equipment_id=equipment_id,
            name=req.name,
            type=req.type,
            description=req.description,
            base_rate=req.base_rate,
            status=req.status,
        ),
        ctx.equipment_repo,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.equipment


@router.delete("/equipment/{equipment_id}")
def delete_equipment(
    equipment_id: UUID,
    _: User = Depends(require("fleet:write")),
    ctx: ServiceContext = Depends(get_context),
) -> dict[str, str]:
    """Refused while an unresolved job still uses the machine."""
    result = run_delete_equipment(
        DeleteEquipmentInput(equipment_id=equipment_id), ctx.equipment_repo, ctx.job_repo
    )
    if not result.success:
        raise_for_errors(result.errors)
    return {"status": "deleted"}


# --- Operators ---


@router.get("/operators", response_model=list[Operator])
def list_operators(
    search: str | None = None,
    _: User = Depends(require("fleet:read")),
    ctx: ServiceContext = Depends(get_context),
) -> tuple[Operator, ...]:
    return run_list_operators(ListOperatorsInput(search=search), ctx.operator_repo).operators


@router.post("/operators", response_model=Operator, status_code=201)
def create_operator(
    req: OperatorCreateRequest,
    _: User = Depends(require("fleet:write")),
    ctx: ServiceContext = Depends(get_context),
) -> Operator | None:
    result = run_create_operator(
        CreateOperatorInput(
            name=req.name,
            email=req.email,
            phone=req.phone,
            specialization=req.specialization,
        ),
        ctx.operator_repo,
    )
    if not result.success:
        raise_for_errors(result.errors)
    return result.operator


@router.get("/operators/{operator_id}", response_model=Operator)
def get_operator(
    operator_id: UUID,
    _: User = Depends(require("fleet:read")),
    ctx: ServiceContext = Depends(get_context),
) -> Operator | None:
    result = run_get_operator(GetOperatorInput(operator_id=operator_id), ctx.operator_repo)
    if not result.success:
        raise_for_errors(result.errors)
    return result.operator
