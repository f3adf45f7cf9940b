"""
Catalog component - Service offerings priced next to crane rentals.

Inactive services stay in the catalog but are hidden from quoting.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime
from typing import Any, get_args

from src.domain.entities import Service, ServiceType, ServiceUnit
from src.ports.clock import ClockPort

from .models import (
    CatalogValidationError,
    CreateServiceInput,
    DeleteServiceInput,
    GetServiceInput,
    ListServicesInput,
    ServiceListOutput,
    ServiceOutput,
    UpdateServiceInput,
)
from .ports import ServiceRepoPort

logger = logging.getLogger(__name__)

SERVICE_TYPES: tuple[str, ...] = get_args(ServiceType)
SERVICE_UNITS: tuple[str, ...] = get_args(ServiceUnit)


def validate_service_data(**values: Any) -> list[CatalogValidationError]:
    """Validate the service fields present in values."""
    errors: list[CatalogValidationError] = []

    name = values.get("name")
    if name is not None and not name.strip():
        errors.append(
            CatalogValidationError(
                code="name_required", message="Service name is required", field="name"
            )
        )

    type_ = values.get("type")
    if type_ is not None and type_ not in SERVICE_TYPES:
        errors.append(
            CatalogValidationError(
                code="type_invalid",
                message=f"Type must be one of {', '.join(SERVICE_TYPES)}",
                field="type",
            )
        )

    rate = values.get("base_rate")
    if rate is not None and (not math.isfinite(rate) or rate < 0):
        errors.append(
            CatalogValidationError(
                code="base_rate_invalid",
                message="Base rate must be a non-negative number",
                field="base_rate",
            )
        )

    unit = values.get("unit")
    if unit is not None and unit not in SERVICE_UNITS:
        errors.append(
            CatalogValidationError(
                code="unit_invalid",
                message=f"Unit must be one of {', '.join(SERVICE_UNITS)}",
                field="unit",
            )
        )

    return errors


def _now(clock: ClockPort | None) -> datetime:
    return clock.now_utc() if clock is not None else datetime.now(UTC)


def _not_found(service_id: object) -> ServiceOutput:
    return ServiceOutput(
        service=None,
        errors=(
            CatalogValidationError(
                code="service_not_found",
                message=f"Service with ID {service_id} not found",
            ),
        ),
    )


def run_create_service(
    inp: CreateServiceInput, repo: ServiceRepoPort, clock: ClockPort | None = None
) -> ServiceOutput:
    errors = validate_service_data(
        name=inp.name, type=inp.type, base_rate=inp.base_rate, unit=inp.unit
    )
    if errors:
        return ServiceOutput(service=None, errors=tuple(errors))

    now = _now(clock)
    service = Service(
        name=inp.name.strip(),
        type=inp.type,  # type: ignore[arg-type]
        base_rate=inp.base_rate,
        unit=inp.unit,  # type: ignore[arg-type]
        description=inp.description,
        is_active=inp.is_active,
        created_at=now,
        updated_at=now,
    )
    repo.save(service)
    logger.info("Service %s (%s) added", service.id, service.name)
    return ServiceOutput(service=service, success=True)


def run_update_service(
    inp: UpdateServiceInput, repo: ServiceRepoPort, clock: ClockPort | None = None
) -> ServiceOutput:
    service = repo.get_by_id(inp.service_id)
    if service is None:
        return _not_found(inp.service_id)

    updates = {
        name: getattr(inp, name)
        for name in ("name", "type", "base_rate", "unit", "description", "is_active")
        if getattr(inp, name) is not None
    }
    errors = validate_service_data(**updates)
    if errors:
        return ServiceOutput(service=None, errors=tuple(errors))

    if "name" in updates:
        updates["name"] = updates["name"].strip()
    updates["updated_at"] = _now(clock)
    updated = service.model_copy(update=updates)
    repo.save(updated)
    if updated.is_active != service.is_active:
        logger.info(
            "Service %s %s", service.id, "activated" if updated.is_active else "deactivated"
        )
    return ServiceOutput(service=updated, success=True)


def run_get_service(inp: GetServiceInput, repo: ServiceRepoPort) -> ServiceOutput:
    service = repo.get_by_id(inp.service_id)
    if service is None:
        return _not_found(inp.service_id)
    return ServiceOutput(service=service, success=True)


def run_list_services(inp: ListServicesInput, repo: ServiceRepoPort) -> ServiceListOutput:
    services = repo.list_all()
    if inp.type is not None:
        services = [s for s in services if s.type == inp.type]
    if inp.active is not None:
        services = [s for s in services if s.is_active == inp.active]
    if inp.search:
        needle = inp.search.strip().lower()
        services = [
            s for s in services
            if needle in s.name.lower() or needle in s.description.lower()
        ]
    services.sort(key=lambda s: s.name.lower())
    return ServiceListOutput(services=tuple(services), total=len(services))


def run_delete_service(inp: DeleteServiceInput, repo: ServiceRepoPort) -> ServiceOutput:
    service = repo.get_by_id(inp.service_id)
    if service is None:
        return _not_found(inp.service_id)

    repo.delete(service.id)
    logger.info("Service %s removed", service.id)
    return ServiceOutput(service=service, success=True)


def run(
    inp: (
        CreateServiceInput
        | UpdateServiceInput
        | GetServiceInput
        | ListServicesInput
        | DeleteServiceInput
    ),
    *,
    repo: ServiceRepoPort | None = None,
    clock: ClockPort | None = None,
) -> ServiceOutput | ServiceListOutput:
    assert repo

    if isinstance(inp, CreateServiceInput):
        return run_create_service(inp, repo, clock)

    elif isinstance(inp, UpdateServiceInput):
        return run_update_service(inp, repo, clock)

    elif isinstance(inp, GetServiceInput):
        return run_get_service(inp, repo)

    elif isinstance(inp, ListServicesInput):
        return run_list_services(inp, repo)

    elif isinstance(inp, DeleteServiceInput):
        return run_delete_service(inp, repo)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
