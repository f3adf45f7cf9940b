"""
Dashboard component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class SummaryInput:
    """assigned_to narrows leads, and the jobs and quotations under them."""

    assigned_to: UUID | None = None


@dataclass(frozen=True)
class DashboardSummary:
    leads_by_status: dict[str, int] = field(default_factory=dict)
    jobs_by_status: dict[str, int] = field(default_factory=dict)
    equipment_by_status: dict[str, int] = field(default_factory=dict)
    total_leads: int = 0
    total_jobs: int = 0
    total_equipment: int = 0
    total_operators: int = 0
    active_services: int = 0
    conversion_rate: float = 0.0
    utilization: float = 0.0
    won_quotation_value: int = 0
