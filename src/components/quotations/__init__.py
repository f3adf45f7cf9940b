"""
Quotations component - Versioned pricing proposals per lead.
"""

from .component import (
    next_version,
    run,
    run_create,
    run_get,
    run_latest,
    run_list,
    run_revise,
)
from .models import (
    CreateQuotationInput,
    GetQuotationInput,
    ListQuotationsInput,
    QuotationListOutput,
    QuotationOutput,
    QuotationValidationError,
    ReviseQuotationInput,
)
from .ports import QuotationRepoPort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_revise",
    "run_get",
    "run_list",
    "run_latest",
    "next_version",
    # Input models
    "CreateQuotationInput",
    "ReviseQuotationInput",
    "GetQuotationInput",
    "ListQuotationsInput",
    # Output models
    "QuotationOutput",
    "QuotationListOutput",
    "QuotationValidationError",
    # Ports
    "QuotationRepoPort",
]
