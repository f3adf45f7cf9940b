"""
Pricing component - Quotation rent calculation.

Shell Layer - converts calculator exceptions into output errors.
"""

from __future__ import annotations

from ._impl import calculate_breakdown, clamp_inputs
from .models import CalculateRentInput, InvalidInput, PricingValidationError, RentOutput


def run_calculate(input_data: CalculateRentInput) -> RentOutput:
    """Calculate total rent and its breakdown."""
    inputs = clamp_inputs(input_data.inputs) if input_data.clamp else input_data.inputs

    try:
        breakdown = calculate_breakdown(inputs)
    except InvalidInput as e:
        return RentOutput(
            breakdown=None,
            errors=(
                PricingValidationError(
                    code="invalid_input",
                    message=e.message,
                    field=e.field,
                ),
            ),
            success=False,
        )

    return RentOutput(breakdown=breakdown, errors=(), success=True)


def run(input_data: CalculateRentInput) -> RentOutput:
    if isinstance(input_data, CalculateRentInput):
        return run_calculate(input_data)

    raise TypeError(f"Unknown input type: {type(input_data)}")
