"""
Pricing component - Data models.

Quotation rent calculation inputs, breakdown and errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from src.domain.entities import QuotationInputs
from src.domain.errors import InvalidInput

__all__ = [
    "CalculateRentInput",
    "InvalidInput",
    "PricingValidationError",
    "RentBreakdown",
    "RentOutput",
]

# --- Errors ---


@dataclass(frozen=True)
class PricingValidationError:
    """Pricing validation error."""

    code: str
    message: str
    field: str | None = None


# --- Breakdown ---


@dataclass(frozen=True)
class RentBreakdown:
    """
    Itemized intermediate values of the rent formula.

    Mirrors the order in which the total is assembled so the quotation
    form can display each line next to the final figure.
    """

    daily_rate: Decimal
    basic_rent: Decimal
    resource_costs: Decimal
    usage_factor: Decimal
    elongation_factor: Decimal
    risk_factor: Decimal
    additional_charges: Decimal
    commercial_charge: Decimal
    total_rent: int

    def as_dict(self) -> dict[str, float | int]:
        return {
            "daily_rate": float(self.daily_rate),
            "basic_rent": float(self.basic_rent),
            "resource_costs": float(self.resource_costs),
            "usage_factor": float(self.usage_factor),
            "elongation_factor": float(self.elongation_factor),
            "risk_factor": float(self.risk_factor),
            "additional_charges": float(self.additional_charges),
            "commercial_charge": float(self.commercial_charge),
            "total_rent": self.total_rent,
        }


# --- Input / Output Models ---


@dataclass(frozen=True)
class CalculateRentInput:
    """Input for a rent calculation."""

    inputs: QuotationInputs
    clamp: bool = False


@dataclass(frozen=True)
class RentOutput:
    """Output from a rent calculation."""

    breakdown: RentBreakdown | None
    errors: tuple[PricingValidationError, ...]
    success: bool

    @property
    def total_rent(self) -> int | None:
        return self.breakdown.total_rent if self.breakdown else None
