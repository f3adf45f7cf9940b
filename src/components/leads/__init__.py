"""
Leads component - Sales pipeline management.
"""

from .component import (
    run,
    run_change_status,
    run_create,
    run_get,
    run_list,
    run_update,
    validate_lead_data,
)
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
from .ports import LeadRepoPort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    "run_change_status",
    "run_get",
    "run_list",
    "validate_lead_data",
    # Input models
    "CreateLeadInput",
    "UpdateLeadInput",
    "ChangeLeadStatusInput",
    "GetLeadInput",
    "ListLeadsInput",
    # Output models
    "LeadOutput",
    "LeadListOutput",
    "LeadValidationError",
    # Ports
    "LeadRepoPort",
]
