"""
Catalog component - Service offerings priced next to crane rentals.
"""

from .component import (
    SERVICE_TYPES,
    SERVICE_UNITS,
    run,
    run_create_service,
    run_delete_service,
    run_get_service,
    run_list_services,
    run_update_service,
    validate_service_data,
)
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

__all__ = [
    # Entry points
    "run",
    "run_create_service",
    "run_update_service",
    "run_get_service",
    "run_list_services",
    "run_delete_service",
    "validate_service_data",
    "SERVICE_TYPES",
    "SERVICE_UNITS",
    # Input models
    "CreateServiceInput",
    "UpdateServiceInput",
    "GetServiceInput",
    "ListServicesInput",
    "DeleteServiceInput",
    # Output models
    "ServiceOutput",
    "ServiceListOutput",
    "CatalogValidationError",
    # Ports
    "ServiceRepoPort",
]
