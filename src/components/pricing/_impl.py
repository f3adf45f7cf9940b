"""
Rent calculation - Functional Core.

Pure, deterministic pricing of a quotation. Arithmetic runs in Decimal at a
local precision wide enough for any float input, so the rounded total does
not depend on float representation. Totals above the float range are
rejected; no response or stored quotation can carry them.

Canonical formula:
    daily_rate         = base_rate * working_hours
    basic_rent         = daily_rate * rental_days
    resource_costs     = (food_charge + accom_charge) * num_resources * rental_days
    usage_factor       = 1 + usage_percent / 100
    elongation_factor  = 1 + elongation_percent / 100
    risk_factor        = basic_rent * risk_percent / 100
    additional_charges = incidental_charge + other_charge
    total_rent         = round_half_up(basic_rent * usage_factor * elongation_factor
                                       + resource_costs + commercial_charge
                                       + risk_factor + additional_charges)
"""

from __future__ import annotations

import math
import sys
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from src.domain.entities import QuotationInputs
from src.rules.models import PricingRules

from .models import InvalidInput, RentBreakdown

INPUT_FIELDS: tuple[str, ...] = tuple(QuotationInputs.model_fields)

_HUNDRED = Decimal(100)
_ONE = Decimal(1)

# float max has 309 integer digits; the rest keeps fractions exact for rounding
_PRECISION = 400
MAX_TOTAL = Decimal(sys.float_info.max)


def _to_decimal(value: float) -> Decimal:
    # str() keeps the shortest repr, so 0.1 becomes Decimal("0.1")
    return Decimal(str(value))


def validate_inputs(inputs: QuotationInputs) -> None:
    """Raise InvalidInput for the first negative or non-finite field."""
    for name in INPUT_FIELDS:
        value = getattr(inputs, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInput(name, "must be a number")
        if not math.isfinite(value):
            raise InvalidInput(name, "must be finite")
        if value < 0:
            raise InvalidInput(name, "must not be negative")


def clamp_inputs(raw: Mapping[str, Any] | QuotationInputs) -> QuotationInputs:
    """
    Coerce raw form values into valid inputs.

    Missing, unparsable, non-finite and negative values become 0. Unknown
    keys are ignored.
    """
    if isinstance(raw, QuotationInputs):
        raw = raw.model_dump()

    values: dict[str, float] = {}
    for name in INPUT_FIELDS:
        try:
            number = float(raw.get(name, 0) or 0)
        except (TypeError, ValueError):
            number = 0.0
        if not math.isfinite(number) or number < 0:
            number = 0.0
        values[name] = number
    return QuotationInputs(**values)


def calculate_breakdown(inputs: QuotationInputs) -> RentBreakdown:
    """
    Compute every intermediate value and the rounded total.

    Raises:
        InvalidInput: for a negative or non-finite field, or when the total
            exceeds MAX_TOTAL.
    """
    validate_inputs(inputs)
    d = {name: _to_decimal(getattr(inputs, name)) for name in INPUT_FIELDS}

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        daily_rate = d["base_rate"] * d["working_hours"]
        basic_rent = daily_rate * d["rental_days"]
        resource_costs = (
            (d["food_charge"] + d["accom_charge"]) * d["num_resources"] * d["rental_days"]
        )
        usage_factor = _ONE + d["usage_percent"] / _HUNDRED
        elongation_factor = _ONE + d["elongation_percent"] / _HUNDRED
        risk_factor = basic_rent * (d["risk_percent"] / _HUNDRED)
        additional_charges = d["incidental_charge"] + d["other_charge"]

        total = (
            basic_rent * usage_factor * elongation_factor
            + resource_costs
            + d["commercial_charge"]
            + risk_factor
            + additional_charges
        )
        rounded = total.to_integral_value(rounding=ROUND_HALF_UP)

    if rounded > MAX_TOTAL:
        raise InvalidInput("total_rent", "exceeds the largest supported amount")

    return RentBreakdown(
        daily_rate=daily_rate,
        basic_rent=basic_rent,
        resource_costs=resource_costs,
        usage_factor=usage_factor,
        elongation_factor=elongation_factor,
        risk_factor=risk_factor,
        additional_charges=additional_charges,
        commercial_charge=d["commercial_charge"],
        total_rent=int(rounded),
    )


def calculate_total_rent(inputs: QuotationInputs) -> int:
    """Total rent in whole currency units."""
    return calculate_breakdown(inputs).total_rent


def default_inputs(
    rules: PricingRules,
    equipment_type: str | None = None,
    base_rate: float | None = None,
) -> QuotationInputs:
    """
    Prefill a new quotation from the configured pricing defaults.

    An explicit base_rate wins over the per-type rate; an unknown type
    leaves the rate at 0 for the sales agent to fill in.
    """
    if base_rate is None:
        base_rate = rules.equipment_rates.get(equipment_type or "", 0)
    return QuotationInputs(
        base_rate=base_rate,
        working_hours=rules.shift_hours,
        food_charge=rules.food_allowance,
        accom_charge=rules.accommodation_rate,
        risk_percent=rules.risk_percent,
        incidental_charge=rules.incidental_charge,
    )
