"""
Pricing component - Quotation rent calculation.
"""

from ._impl import (
    INPUT_FIELDS,
    calculate_breakdown,
    calculate_total_rent,
    clamp_inputs,
    default_inputs,
    validate_inputs,
)
from .component import run, run_calculate
from .models import (
    CalculateRentInput,
    InvalidInput,
    PricingValidationError,
    RentBreakdown,
    RentOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_calculate",
    # Functional core
    "INPUT_FIELDS",
    "calculate_breakdown",
    "calculate_total_rent",
    "clamp_inputs",
    "default_inputs",
    "validate_inputs",
    # Models
    "CalculateRentInput",
    "InvalidInput",
    "PricingValidationError",
    "RentBreakdown",
    "RentOutput",
]
