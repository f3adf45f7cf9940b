"""
Catalog component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.adapters.memory.repos import InMemoryServiceRepo
from src.components.catalog import (
    CreateServiceInput,
    DeleteServiceInput,
    GetServiceInput,
    ListServicesInput,
    UpdateServiceInput,
    run,
    run_create_service,
    run_delete_service,
    run_get_service,
    run_list_services,
    run_update_service,
)
from src.domain.entities import Service


class StubClock:
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now_utc(self) -> datetime:
        return self._now


@pytest.fixture
def repo() -> InMemoryServiceRepo:
    return InMemoryServiceRepo(
        [
            Service(
                name="Standard Lifting Service",
                type="lifting",
                base_rate=250,
                unit="hour",
                description="Standard crane lifting service with operator",
            ),
            Service(
                name="Heavy Transport Package",
                type="transport",
                base_rate=1500,
                unit="day",
                description="Heavy equipment transport with escort",
            ),
            Service(
                name="Specialized Rigging Attachment",
                type="attachment",
                base_rate=350,
                unit="day",
                description="Custom rigging for complex lifts",
                is_active=False,
            ),
        ]
    )


def _by_name(repo: InMemoryServiceRepo, name: str) -> Service:
    return next(s for s in repo.list_all() if s.name == name)


class TestCreateService:
    def test_create(self, repo: InMemoryServiceRepo) -> None:
        now = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        result = run_create_service(
            CreateServiceInput(
                name=" Site Survey ", type="consultation", base_rate=400, unit="shift"
            ),
            repo,
            StubClock(now),
        )

        assert result.success is True
        assert result.service is not None
        assert result.service.name == "Site Survey"
        assert result.service.is_active is True
        assert result.service.created_at == now
        assert repo.get_by_id(result.service.id) is not None

    def test_invalid_fields_reported_together(self, repo: InMemoryServiceRepo) -> None:
        result = run_create_service(
            CreateServiceInput(name=" ", type="demolition", base_rate=-5, unit="week"), repo
        )

        assert result.success is False
        codes = {e.code for e in result.errors}
        assert codes == {"name_required", "type_invalid", "base_rate_invalid", "unit_invalid"}
        assert len(repo.list_all()) == 3

    def test_non_finite_rate(self, repo: InMemoryServiceRepo) -> None:
        result = run_create_service(
            CreateServiceInput(name="Escort", type="transport", base_rate=float("inf")), repo
        )
        assert result.errors[0].field == "base_rate"


class TestUpdateService:
    def test_deactivate(self, repo: InMemoryServiceRepo) -> None:
        lifting = _by_name(repo, "Standard Lifting Service")
        later = datetime(2024, 6, 1, tzinfo=UTC)

        result = run_update_service(
            UpdateServiceInput(service_id=lifting.id, is_active=False), repo, StubClock(later)
        )

        assert result.success is True
        stored = repo.get_by_id(lifting.id)
        assert stored is not None
        assert stored.is_active is False
        assert stored.base_rate == 250
        assert stored.updated_at == later

    def test_partial_update_validates_given_fields(self, repo: InMemoryServiceRepo) -> None:
        lifting = _by_name(repo, "Standard Lifting Service")

        result = run_update_service(
            UpdateServiceInput(service_id=lifting.id, unit="fortnight"), repo
        )

        assert result.success is False
        assert result.errors[0].code == "unit_invalid"
        assert repo.get_by_id(lifting.id).unit == "hour"  # type: ignore[union-attr]

    def test_update_missing(self, repo: InMemoryServiceRepo) -> None:
        result = run_update_service(UpdateServiceInput(service_id=uuid4(), name="x"), repo)
        assert result.errors[0].code == "service_not_found"


class TestListServices:
    def test_sorted_by_name(self, repo: InMemoryServiceRepo) -> None:
        names = [s.name for s in run_list_services(ListServicesInput(), repo).services]
        assert names == sorted(names)

    def test_filter_active(self, repo: InMemoryServiceRepo) -> None:
        result = run_list_services(ListServicesInput(active=True), repo)

        assert result.total == 2
        assert all(s.is_active for s in result.services)

    def test_filter_inactive_and_type(self, repo: InMemoryServiceRepo) -> None:
        result = run_list_services(ListServicesInput(type="attachment", active=False), repo)
        assert [s.name for s in result.services] == ["Specialized Rigging Attachment"]

    def test_search_description(self, repo: InMemoryServiceRepo) -> None:
        result = run_list_services(ListServicesInput(search="ESCORT"), repo)
        assert [s.name for s in result.services] == ["Heavy Transport Package"]


class TestGetAndDelete:
    def test_get(self, repo: InMemoryServiceRepo) -> None:
        transport = _by_name(repo, "Heavy Transport Package")
        result = run_get_service(GetServiceInput(service_id=transport.id), repo)
        assert result.service == transport

    def test_delete(self, repo: InMemoryServiceRepo) -> None:
        transport = _by_name(repo, "Heavy Transport Package")

        result = run_delete_service(DeleteServiceInput(service_id=transport.id), repo)

        assert result.success is True
        assert repo.get_by_id(transport.id) is None

    def test_delete_missing(self, repo: InMemoryServiceRepo) -> None:
        result = run_delete_service(DeleteServiceInput(service_id=uuid4()), repo)
        assert result.errors[0].code == "service_not_found"


class TestDispatch:
    def test_run_routes_by_input(self, repo: InMemoryServiceRepo) -> None:
        result = run(ListServicesInput(type="lifting"), repo=repo)
        assert result.total == 1  # type: ignore[union-attr]

    def test_run_unknown_input(self, repo: InMemoryServiceRepo) -> None:
        with pytest.raises(ValueError):
            run("nope", repo=repo)  # type: ignore[arg-type]
