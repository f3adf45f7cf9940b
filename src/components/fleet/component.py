"""
Fleet component - Equipment and operator records.
"""

from __future__ import annotations

import logging
import math
from typing import Any, get_args

from src.domain.entities import (
    RESOLVED_JOB_STATUSES,
    Equipment,
    EquipmentStatus,
    Operator,
)

from .models import (
    CreateEquipmentInput,
    CreateOperatorInput,
    DeleteEquipmentInput,
    EquipmentListOutput,
    EquipmentOutput,
    FleetValidationError,
    GetEquipmentInput,
    GetOperatorInput,
    ListEquipmentInput,
    ListOperatorsInput,
    OperatorListOutput,
    OperatorOutput,
    UpdateEquipmentInput,
)
from .ports import EquipmentRepoPort, JobRepoPort, OperatorRepoPort

logger = logging.getLogger(__name__)

EQUIPMENT_STATUSES: tuple[str, ...] = get_args(EquipmentStatus)


def validate_equipment_data(**values: Any) -> list[FleetValidationError]:
    """Validate the equipment fields present in values."""
    errors: list[FleetValidationError] = []

    for name in ("name", "type"):
        if name in values and values[name] is not None and not str(values[name]).strip():
            errors.append(
                FleetValidationError(
                    code=f"{name}_required",
                    message=f"Equipment {name} is required",
                    field=name,
                )
            )

    rate = values.get("base_rate")
    if rate is not None and (not math.isfinite(rate) or rate < 0):
        errors.append(
            FleetValidationError(
                code="base_rate_invalid",
                message="Base rate must be a non-negative number",
                field="base_rate",
            )
        )

    status = values.get("status")
    if status is not None and status not in EQUIPMENT_STATUSES:
        errors.append(
            FleetValidationError(
                code="status_invalid",
                message=f"Status must be one of {', '.join(EQUIPMENT_STATUSES)}",
                field="status",
            )
        )

    return errors


def _matches(search: str, *fields: str) -> bool:
    needle = search.strip().lower()
    return any(needle in f.lower() for f in fields)


def _equipment_not_found(equipment_id: object) -> EquipmentOutput:
    return EquipmentOutput(
        equipment=None,
        errors=(
            FleetValidationError(
                code="equipment_not_found",
                message=f"Equipment with ID {equipment_id} not found",
            ),
        ),
    )


# --- Equipment ---


def run_create_equipment(inp: CreateEquipmentInput, repo: EquipmentRepoPort) -> EquipmentOutput:
    errors = validate_equipment_data(
        name=inp.name, type=inp.type, base_rate=inp.base_rate, status=inp.status
    )
    if errors:
        return EquipmentOutput(equipment=None, errors=tuple(errors))

    equipment = Equipment(
        name=inp.name.strip(),
        type=inp.type.strip(),
        description=inp.description,
        base_rate=inp.base_rate,
        status=inp.status,
    )
    repo.save(equipment)
    logger.info("Equipment %s (%s) added", equipment.id, equipment.name)
    return EquipmentOutput(equipment=equipment, success=True)


def run_update_equipment(inp: UpdateEquipmentInput, repo: EquipmentRepoPort) -> EquipmentOutput:
    equipment = repo.get_by_id(inp.equipment_id)
    if equipment is None:
        return _equipment_not_found(inp.equipment_id)

    updates = {
        name: getattr(inp, name)
        for name in ("name", "type", "description", "base_rate", "status")
        if getattr(inp, name) is not None
    }
    errors = validate_equipment_data(**updates)
    if errors:
        return EquipmentOutput(equipment=None, errors=tuple(errors))

    updated = equipment.model_copy(update=updates)
    repo.save(updated)
    if "status" in updates and updates["status"] != equipment.status:
        logger.info(
            "Equipment %s status %s -> %s", equipment.id, equipment.status, updated.status
        )
    return EquipmentOutput(equipment=updated, success=True)


def run_get_equipment(inp: GetEquipmentInput, repo: EquipmentRepoPort) -> EquipmentOutput:
    equipment = repo.get_by_id(inp.equipment_id)
    if equipment is None:
        return _equipment_not_found(inp.equipment_id)
    return EquipmentOutput(equipment=equipment, success=True)


def run_list_equipment(inp: ListEquipmentInput, repo: EquipmentRepoPort) -> EquipmentListOutput:
    items = repo.list_all()
    if inp.status is not None:
        items = [e for e in items if e.status == inp.status]
    if inp.search:
        search = inp.search
        items = [e for e in items if _matches(search, e.name, e.type, e.description)]
    items.sort(key=lambda e: e.name.lower())
    return EquipmentListOutput(equipment=tuple(items), total=len(items))


def run_delete_equipment(
    inp: DeleteEquipmentInput,
    repo: EquipmentRepoPort,
    job_repo: JobRepoPort | None = None,
) -> EquipmentOutput:
    """Remove equipment. Refused while an unresolved job still books it."""
    equipment = repo.get_by_id(inp.equipment_id)
    if equipment is None:
        return _equipment_not_found(inp.equipment_id)

    if job_repo is not None:
        booked = [
            j
            for j in job_repo.list_all()
            if j.equipment_id == equipment.id and j.status not in RESOLVED_JOB_STATUSES
        ]
        if booked:
            return EquipmentOutput(
                equipment=equipment,
                errors=(
                    FleetValidationError(
                        code="equipment_booked",
                        message=f"Equipment has {len(booked)} open job(s)",
                        field="equipment_id",
                    ),
                ),
            )

    repo.delete(equipment.id)
    logger.info("Equipment %s removed", equipment.id)
    return EquipmentOutput(equipment=equipment, success=True)


# --- Operators ---


def run_create_operator(inp: CreateOperatorInput, repo: OperatorRepoPort) -> OperatorOutput:
    errors: list[FleetValidationError] = []
    if not inp.name.strip():
        errors.append(FleetValidationError("name_required", "Operator name is required", "name"))

    email = inp.email.strip().lower()
    if "@" not in email:
        errors.append(FleetValidationError("email_invalid", "A valid email is required", "email"))
    elif repo.get_by_email(email) is not None:
        errors.append(
            FleetValidationError("email_taken", f"Operator {email} already exists", "email")
        )

    if errors:
        return OperatorOutput(operator=None, errors=tuple(errors))

    operator = Operator(
        name=inp.name.strip(),
        email=email,
        phone=inp.phone,
        specialization=inp.specialization,
    )
    repo.save(operator)
    logger.info("Operator %s (%s) added", operator.id, operator.email)
    return OperatorOutput(operator=operator, success=True)


def run_get_operator(inp: GetOperatorInput, repo: OperatorRepoPort) -> OperatorOutput:
    operator = repo.get_by_id(inp.operator_id)
    if operator is None:
        return OperatorOutput(
            operator=None,
            errors=(
                FleetValidationError(
                    code="operator_not_found",
                    message=f"Operator with ID {inp.operator_id} not found",
                ),
            ),
        )
    return OperatorOutput(operator=operator, success=True)


def run_list_operators(inp: ListOperatorsInput, repo: OperatorRepoPort) -> OperatorListOutput:
    operators = repo.list_all()
    if inp.search:
        search = inp.search
        operators = [
            o for o in operators if _matches(search, o.name, o.email, o.specialization)
        ]
    operators.sort(key=lambda o: o.name.lower())
    return OperatorListOutput(operators=tuple(operators), total=len(operators))


def run(
    inp: (
        CreateEquipmentInput
        | UpdateEquipmentInput
        | GetEquipmentInput
        | ListEquipmentInput
        | DeleteEquipmentInput
        | CreateOperatorInput
        | GetOperatorInput
        | ListOperatorsInput
    ),
    *,
    equipment_repo: EquipmentRepoPort | None = None,
    operator_repo: OperatorRepoPort | None = None,
    job_repo: JobRepoPort | None = None,
) -> EquipmentOutput | EquipmentListOutput | OperatorOutput | OperatorListOutput:
    if isinstance(inp, CreateEquipmentInput):
        assert equipment_repo
        return run_create_equipment(inp, equipment_repo)

    elif isinstance(inp, UpdateEquipmentInput):
        assert equipment_repo
        return run_update_equipment(inp, equipment_repo)

    elif isinstance(inp, GetEquipmentInput):
        assert equipment_repo
        return run_get_equipment(inp, equipment_repo)

    elif isinstance(inp, ListEquipmentInput):
        assert equipment_repo
        return run_list_equipment(inp, equipment_repo)

    elif isinstance(inp, DeleteEquipmentInput):
        assert equipment_repo
        return run_delete_equipment(inp, equipment_repo, job_repo)

    elif isinstance(inp, CreateOperatorInput):
        assert operator_repo
        return run_create_operator(inp, operator_repo)

    elif isinstance(inp, GetOperatorInput):
        assert operator_repo
        return run_get_operator(inp, operator_repo)

    elif isinstance(inp, ListOperatorsInput):
        assert operator_repo
        return run_list_operators(inp, operator_repo)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
