"""
Fleet component unit tests.
"""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

import pytest

from src.adapters.memory.repos import (
    InMemoryEquipmentRepo,
    InMemoryJobRepo,
    InMemoryOperatorRepo,
)
from src.components.fleet import (
    CreateEquipmentInput,
    CreateOperatorInput,
    DeleteEquipmentInput,
    GetEquipmentInput,
    GetOperatorInput,
    ListEquipmentInput,
    ListOperatorsInput,
    UpdateEquipmentInput,
    run,
    run_create_equipment,
    run_create_operator,
    run_delete_equipment,
    run_get_operator,
    run_list_equipment,
    run_list_operators,
    run_update_equipment,
)
from src.domain.entities import Equipment, Job


@pytest.fixture
def equipment_repo() -> InMemoryEquipmentRepo:
    repo = InMemoryEquipmentRepo()
    repo.save(Equipment(name="Liebherr 280 EC-H", type="Tower Crane", base_rate=250))
    repo.save(
        Equipment(
            name="Grove GMK5250L",
            type="Mobile Crane",
            description="250t all-terrain",
            base_rate=180,
            status="maintenance",
        )
    )
    return repo


@pytest.fixture
def operator_repo() -> InMemoryOperatorRepo:
    return InMemoryOperatorRepo()


class TestEquipment:
    def test_create(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        result = run_create_equipment(
            CreateEquipmentInput(name=" Tadano ATF 220G ", type="Mobile Crane", base_rate=200),
            equipment_repo,
        )

        assert result.success is True
        assert result.equipment is not None
        assert result.equipment.name == "Tadano ATF 220G"
        assert result.equipment.status == "available"

    def test_create_invalid(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        result = run_create_equipment(
            CreateEquipmentInput(name="", type="Mobile Crane", base_rate=-1), equipment_repo
        )

        codes = {e.code for e in result.errors}
        assert codes == {"name_required", "base_rate_invalid"}

    def test_update_status(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        crane = run_list_equipment(ListEquipmentInput(search="liebherr"), equipment_repo).equipment[0]

        result = run_update_equipment(
            UpdateEquipmentInput(equipment_id=crane.id, status="maintenance"), equipment_repo
        )

        assert result.success is True
        assert equipment_repo.get_by_id(crane.id).status == "maintenance"  # type: ignore[union-attr]

    def test_update_rejects_unknown_status(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        crane = equipment_repo.list_all()[0]

        result = run_update_equipment(
            UpdateEquipmentInput(equipment_id=crane.id, status="broken"),  # type: ignore[arg-type]
            equipment_repo,
        )

        assert result.errors[0].code == "status_invalid"

    def test_update_missing(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        result = run_update_equipment(UpdateEquipmentInput(equipment_id=uuid4()), equipment_repo)
        assert result.errors[0].code == "equipment_not_found"

    def test_filter_by_status(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        result = run_list_equipment(ListEquipmentInput(status="available"), equipment_repo)
        assert [e.name for e in result.equipment] == ["Liebherr 280 EC-H"]

    def test_search_description(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        result = run_list_equipment(ListEquipmentInput(search="ALL-TERRAIN"), equipment_repo)
        assert result.total == 1

    def test_get(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        crane = equipment_repo.list_all()[0]
        result = run(GetEquipmentInput(equipment_id=crane.id), equipment_repo=equipment_repo)
        assert result.equipment == crane  # type: ignore[union-attr]


class TestDeleteEquipment:
    def _job(self, equipment: Equipment, status: str) -> Job:
        return Job(
            lead_id=uuid4(),
            customer_name="Acme Construction",
            equipment_id=equipment.id,
            operator_id=uuid4(),
            start_date=datetime(2023, 10, 15, 8),
            end_date=datetime(2023, 10, 20, 17),
            status=status,  # type: ignore[arg-type]
        )

    def test_refused_while_booked(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        crane = equipment_repo.list_all()[0]
        jobs = InMemoryJobRepo([self._job(crane, "accepted")])

        result = run_delete_equipment(DeleteEquipmentInput(equipment_id=crane.id), equipment_repo, jobs)

        assert result.errors[0].code == "equipment_booked"
        assert equipment_repo.get_by_id(crane.id) is not None

    def test_allowed_after_completion(self, equipment_repo: InMemoryEquipmentRepo) -> None:
        crane = equipment_repo.list_all()[0]
        jobs = InMemoryJobRepo([self._job(crane, "completed")])

        result = run_delete_equipment(DeleteEquipmentInput(equipment_id=crane.id), equipment_repo, jobs)

        assert result.success is True
        assert equipment_repo.get_by_id(crane.id) is None


class TestOperators:
    def test_create_normalises_email(self, operator_repo: InMemoryOperatorRepo) -> None:
        result = run_create_operator(
            CreateOperatorInput(name="Mike Operator", email=" Mike@Example.com", phone="555-0101"),
            operator_repo,
        )

        assert result.success is True
        assert result.operator is not None
        assert result.operator.email == "mike@example.com"

    def test_duplicate_email(self, operator_repo: InMemoryOperatorRepo) -> None:
        inp = CreateOperatorInput(name="Mike Operator", email="mike@example.com")
        run_create_operator(inp, operator_repo)

        result = run_create_operator(inp, operator_repo)

        assert result.errors[0].code == "email_taken"

    def test_invalid_email(self, operator_repo: InMemoryOperatorRepo) -> None:
        result = run_create_operator(CreateOperatorInput(name="Mike", email="mike"), operator_repo)
        assert result.errors[0].code == "email_invalid"

    def test_list_and_get(self, operator_repo: InMemoryOperatorRepo) -> None:
        run_create_operator(
            CreateOperatorInput(name="Sarah Lift", email="sarah@example.com", specialization="Tower"),
            operator_repo,
        )
        run_create_operator(CreateOperatorInput(name="Ann Rig", email="ann@example.com"), operator_repo)

        everyone = run_list_operators(ListOperatorsInput(), operator_repo)
        tower = run(ListOperatorsInput(search="tower"), operator_repo=operator_repo)

        assert [o.name for o in everyone.operators] == ["Ann Rig", "Sarah Lift"]
        assert tower.total == 1  # type: ignore[union-attr]
        found = run_get_operator(GetOperatorInput(operator_id=everyone.operators[0].id), operator_repo)
        assert found.operator == everyone.operators[0]
        assert run_get_operator(GetOperatorInput(operator_id=uuid4()), operator_repo).success is False

    def test_run_unknown_input(self) -> None:
        with pytest.raises(ValueError):
            run("nope")  # type: ignore[arg-type]
