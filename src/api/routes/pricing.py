from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.errors import raise_for_errors
from src.api.schemas import RentBreakdownResponse, RentCalculationRequest
from src.app_shell.context import ServiceContext
from src.components.pricing import CalculateRentInput, default_inputs, run_calculate
from src.domain.entities import QuotationInputs, User

router = APIRouter()


@router.post("/calculate", response_model=RentBreakdownResponse)
def calculate(
    req: RentCalculationRequest,
    _: User = Depends(require("pricing:calculate")),
) -> dict[str, object]:
    """Price a set of quotation inputs without saving anything."""
    inputs = QuotationInputs.model_validate(req.model_dump(exclude={"clamp"}))
    result = run_calculate(CalculateRentInput(inputs=inputs, clamp=req.clamp))

    if not result.success or result.breakdown is None:
        raise_for_errors(result.errors)

    return result.breakdown.as_dict()


@router.get("/defaults", response_model=QuotationInputs)
def defaults(
    equipment_type: str | None = None,
    _: User = Depends(require("pricing:calculate")),
    ctx: ServiceContext = Depends(get_context),
) -> QuotationInputs:
    """Prefilled inputs for a new quotation."""
    return default_inputs(ctx.rules.pricing, equipment_type)
