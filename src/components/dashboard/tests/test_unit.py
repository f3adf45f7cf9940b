"""
Dashboard component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from src.adapters.memory.repos import (
    InMemoryEquipmentRepo,
    InMemoryJobRepo,
    InMemoryLeadRepo,
    InMemoryOperatorRepo,
    InMemoryQuotationRepo,
    InMemoryServiceRepo,
)
from src.components.dashboard import DashboardSummary, SummaryInput, run_summary
from src.domain.entities import Equipment, Job, Lead, Operator, Quotation, Service

AGENT = uuid4()
OTHER_AGENT = uuid4()


class Repos:
    def __init__(self) -> None:
        self.leads = InMemoryLeadRepo()
        self.jobs = InMemoryJobRepo()
        self.equipment = InMemoryEquipmentRepo()
        self.operators = InMemoryOperatorRepo()
        self.services = InMemoryServiceRepo()
        self.quotations = InMemoryQuotationRepo()

    def lead(self, status: str, assigned_to: UUID = AGENT) -> Lead:
        lead = Lead(
            customer_name=f"{status} customer",
            service_needed="Tower Crane",
            site_location="Pier 4",
            status=status,  # type: ignore[arg-type]
            assigned_to=assigned_to,
        )
        self.leads.save(lead)
        return lead

    def crane(self, status: str = "available") -> Equipment:
        item = Equipment(name=f"crane {uuid4()}", type="Tower Crane", base_rate=250, status=status)  # type: ignore[arg-type]
        self.equipment.save(item)
        return item

    def job(self, lead: Lead, crane: Equipment, status: str = "scheduled") -> Job:
        job = Job(
            lead_id=lead.id,
            customer_name=lead.customer_name,
            equipment_id=crane.id,
            operator_id=uuid4(),
            start_date=datetime(2024, 3, 1, 8, tzinfo=UTC),
            end_date=datetime(2024, 3, 5, 17, tzinfo=UTC),
            status=status,  # type: ignore[arg-type]
        )
        self.jobs.save(job)
        return job

    def quote(self, lead: Lead, total: int, version: int) -> None:
        self.quotations.save(
            Quotation(lead_id=lead.id, total_rent=total, version=version, created_by=AGENT)
        )

    def summary(self, assigned_to: UUID | None = None) -> DashboardSummary:
        return run_summary(
            SummaryInput(assigned_to=assigned_to),
            leads=self.leads,
            jobs=self.jobs,
            equipment=self.equipment,
            operators=self.operators,
            services=self.services,
            quotations=self.quotations,
        )


@pytest.fixture
def repos() -> Repos:
    return Repos()


class TestEmpty:
    def test_all_zero(self, repos: Repos) -> None:
        summary = repos.summary()

        assert summary.total_leads == 0
        assert summary.conversion_rate == 0.0
        assert summary.utilization == 0.0
        assert summary.won_quotation_value == 0

    def test_every_status_listed(self, repos: Repos) -> None:
        summary = repos.summary()

        assert summary.leads_by_status == {"new": 0, "negotiation": 0, "won": 0, "lost": 0}
        assert set(summary.jobs_by_status) == {
            "scheduled", "accepted", "rejected", "in_progress", "completed", "cancelled"
        }
        assert set(summary.equipment_by_status) == {"available", "in_use", "maintenance"}


class TestLeadCounts:
    def test_conversion_rate(self, repos: Repos) -> None:
        for status in ("new", "new", "negotiation", "won", "lost", "won"):
            repos.lead(status)

        summary = repos.summary()

        assert summary.leads_by_status == {"new": 2, "negotiation": 1, "won": 2, "lost": 1}
        assert summary.conversion_rate == pytest.approx(33.3)

    def test_won_value_uses_latest_version(self, repos: Repos) -> None:
        won = repos.lead("won")
        repos.quote(won, 1000, 1)
        repos.quote(won, 1500, 3)
        repos.quote(won, 1200, 2)
        lost = repos.lead("lost")
        repos.quote(lost, 9999, 1)

        assert repos.summary().won_quotation_value == 1500

    def test_scoped_to_assignee(self, repos: Repos) -> None:
        mine = repos.lead("won")
        theirs = repos.lead("new", assigned_to=OTHER_AGENT)
        crane = repos.crane()
        repos.job(mine, crane)
        repos.job(theirs, repos.crane())

        summary = repos.summary(assigned_to=AGENT)

        assert summary.total_leads == 1
        assert summary.conversion_rate == 100.0
        assert summary.total_jobs == 1
        assert summary.total_equipment == 2
        assert summary.utilization == 100.0


class TestFleetCounts:
    def test_utilization_counts_each_crane_once(self, repos: Repos) -> None:
        lead = repos.lead("won")
        busy = repos.crane("in_use")
        repos.crane()
        repos.crane("maintenance")
        idle = repos.crane()
        repos.job(lead, busy, "in_progress")
        repos.job(lead, busy, "scheduled")
        repos.job(lead, idle, "completed")

        summary = repos.summary()

        assert summary.utilization == 25.0
        assert summary.equipment_by_status == {"available": 2, "in_use": 1, "maintenance": 1}
        assert summary.jobs_by_status["completed"] == 1

    @pytest.mark.parametrize("status", ["rejected", "cancelled", "completed"])
    def test_inactive_jobs_hold_no_equipment(self, repos: Repos, status: str) -> None:
        repos.job(repos.lead("won"), repos.crane(), status)
        assert repos.summary().utilization == 0.0

    def test_operators_and_active_services(self, repos: Repos) -> None:
        repos.operators.save(Operator(name="Lisa Crane", email="lisa@example.com"))
        repos.services.save(Service(name="Lift", type="lifting", base_rate=250))
        repos.services.save(
            Service(name="Rigging", type="attachment", base_rate=350, is_active=False)
        )

        summary = repos.summary()

        assert summary.total_operators == 1
        assert summary.active_services == 1
