"""
Dashboard component - Headline counts for the role dashboards.

Key behaviors:
- Every lead, job and equipment status appears in its breakdown, zero or not
- conversion_rate is won leads over all leads, as a percentage
- utilization is the share of equipment held by a scheduled, accepted or
  in-progress job
- won_quotation_value sums the latest quotation of each won lead
- assigned_to scopes leads and their jobs; fleet and catalog counts are
  always fleet-wide
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import get_args

from src.domain.entities import EquipmentStatus, JobStatus, LeadStatus

from .models import DashboardSummary, SummaryInput
from .ports import (
    EquipmentRepoPort,
    JobRepoPort,
    LeadRepoPort,
    OperatorRepoPort,
    QuotationRepoPort,
    ServiceRepoPort,
)

logger = logging.getLogger(__name__)

ACTIVE_JOB_STATUSES: frozenset[str] = frozenset({"scheduled", "accepted", "in_progress"})


def _breakdown(values: Iterable[str], keys: tuple[str, ...]) -> dict[str, int]:
    counts = Counter(values)
    return {key: counts.get(key, 0) for key in keys}


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return round(part * 100 / whole, 1)


def run_summary(
    inp: SummaryInput,
    *,
    leads: LeadRepoPort,
    jobs: JobRepoPort,
    equipment: EquipmentRepoPort,
    operators: OperatorRepoPort,
    services: ServiceRepoPort,
    quotations: QuotationRepoPort | None = None,
) -> DashboardSummary:
    lead_list = leads.list_all()
    if inp.assigned_to is not None:
        lead_list = [lead for lead in lead_list if lead.assigned_to == inp.assigned_to]

    all_jobs = jobs.list_all()
    job_list = all_jobs
    if inp.assigned_to is not None:
        lead_ids = {lead.id for lead in lead_list}
        job_list = [j for j in all_jobs if j.lead_id in lead_ids]

    fleet = equipment.list_all()
    busy = {j.equipment_id for j in all_jobs if j.status in ACTIVE_JOB_STATUSES}
    held = sum(1 for e in fleet if e.id in busy)

    won = [lead for lead in lead_list if lead.status == "won"]
    won_value = 0
    if quotations is not None:
        for lead in won:
            versions = quotations.list_by_lead(lead.id)
            if versions:
                won_value += max(versions, key=lambda q: q.version).total_rent

    summary = DashboardSummary(
        leads_by_status=_breakdown((lead.status for lead in lead_list), get_args(LeadStatus)),
        jobs_by_status=_breakdown((j.status for j in job_list), get_args(JobStatus)),
        equipment_by_status=_breakdown((e.status for e in fleet), get_args(EquipmentStatus)),
        total_leads=len(lead_list),
        total_jobs=len(job_list),
        total_equipment=len(fleet),
        total_operators=len(operators.list_all()),
        active_services=sum(1 for s in services.list_all() if s.is_active),
        conversion_rate=_percent(len(won), len(lead_list)),
        utilization=_percent(held, len(fleet)),
        won_quotation_value=won_value,
    )
    logger.debug(
        "Dashboard summary: %d leads, %d jobs, %.1f%% utilization",
        summary.total_leads,
        summary.total_jobs,
        summary.utilization,
    )
    return summary
