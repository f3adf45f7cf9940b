"""
Fleet component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import Equipment, EquipmentStatus, Operator


@dataclass(frozen=True)
class FleetValidationError:
    code: str
    message: str
    field: str | None = None


# --- Equipment Inputs ---


@dataclass(frozen=True)
class CreateEquipmentInput:
    name: str
    type: str
    base_rate: float
    description: str = ""
    status: EquipmentStatus = "available"


@dataclass(frozen=True)
class UpdateEquipmentInput:
    equipment_id: UUID
    name: str | None = None
    type: str | None = None
    description: str | None = None
    base_rate: float | None = None
    status: EquipmentStatus | None = None


@dataclass(frozen=True)
class GetEquipmentInput:
    equipment_id: UUID


@dataclass(frozen=True)
class ListEquipmentInput:
    """Search matches name, type and description, case-insensitively."""

    status: EquipmentStatus | None = None
    search: str | None = None


@dataclass(frozen=True)
class DeleteEquipmentInput:
    equipment_id: UUID


# --- Operator Inputs ---


@dataclass(frozen=True)
class CreateOperatorInput:
    name: str
    email: str
    phone: str = ""
    specialization: str = ""


@dataclass(frozen=True)
class GetOperatorInput:
    operator_id: UUID


@dataclass(frozen=True)
class ListOperatorsInput:
    search: str | None = None


# --- Outputs ---


@dataclass(frozen=True)
class EquipmentOutput:
    equipment: Equipment | None
    errors: tuple[FleetValidationError, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class EquipmentListOutput:
    equipment: tuple[Equipment, ...]
    total: int


@dataclass(frozen=True)
class OperatorOutput:
    operator: Operator | None
    errors: tuple[FleetValidationError, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class OperatorListOutput:
    operators: tuple[Operator, ...]
    total: int
