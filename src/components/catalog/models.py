"""
Catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import Service


@dataclass(frozen=True)
class CatalogValidationError:
    code: str
    message: str
    field: str | None = None


# --- Inputs ---


@dataclass(frozen=True)
class CreateServiceInput:
    name: str
    type: str
    base_rate: float
    unit: str = "hour"
    description: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class UpdateServiceInput:
    service_id: UUID
    name: str | None = None
    type: str | None = None
    base_rate: float | None = None
    unit: str | None = None
    description: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class GetServiceInput:
    service_id: UUID


@dataclass(frozen=True)
class ListServicesInput:
    """Search matches name and description, case-insensitively."""

    type: str | None = None
    active: bool | None = None
    search: str | None = None


@dataclass(frozen=True)
class DeleteServiceInput:
    service_id: UUID


# --- Outputs ---


@dataclass(frozen=True)
class ServiceOutput:
    service: Service | None
    errors: tuple[CatalogValidationError, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class ServiceListOutput:
    services: tuple[Service, ...]
    total: int
