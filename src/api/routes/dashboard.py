from dataclasses import asdict

from fastapi import APIRouter, Depends

from src.api.deps import get_context, require
from src.api.schemas import DashboardSummaryResponse
from src.app_shell.context import ServiceContext
from src.components.dashboard import SummaryInput, run_summary
from src.domain.entities import User

router = APIRouter()


@router.get("/summary", response_model=DashboardSummaryResponse)
def summary(
    mine: bool = False,
    user: User = Depends(require("dashboard:read")),
    ctx: ServiceContext = Depends(get_context),
) -> DashboardSummaryResponse:
    """Headline counts; mine=true limits leads and jobs to the caller's leads."""
    result = run_summary(
        SummaryInput(assigned_to=user.id if mine else None),
        leads=ctx.lead_repo,
        jobs=ctx.job_repo,
        equipment=ctx.equipment_repo,
        operators=ctx.operator_repo,
        services=ctx.service_repo,
        quotations=ctx.quotation_repo,
    )
    return DashboardSummaryResponse(**asdict(result))
