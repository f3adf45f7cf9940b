from datetime import UTC, datetime
from uuid import uuid4

import pytest
from fastapi import HTTPException

from src.api.errors import raise_for_errors
from src.components.leads import LeadValidationError
from src.components.scheduling import SchedulingValidationError
from src.domain.entities import Job


def test_not_found_maps_to_404():
    with pytest.raises(HTTPException) as exc:
        raise_for_errors([LeadValidationError(code="lead_not_found", message="Lead missing")])

    assert exc.value.status_code == 404
    assert exc.value.detail == "Lead missing"


def test_booking_conflict_maps_to_409_with_jobs():
    job = Job(
        lead_id=uuid4(),
        customer_name="Acme",
        equipment_id=uuid4(),
        operator_id=uuid4(),
        start_date=datetime(2031, 1, 1, tzinfo=UTC),
        end_date=datetime(2031, 1, 2, tzinfo=UTC),
    )

    with pytest.raises(HTTPException) as exc:
        raise_for_errors(
            [SchedulingValidationError(code="booking_conflict", message="Taken")], [job]
        )

    assert exc.value.status_code == 409
    assert exc.value.detail["conflicts"][0]["id"] == str(job.id)


def test_other_errors_map_to_400_with_all_errors():
    errors = [
        LeadValidationError(code="customer_name_required", message="m1", field="customer_name"),
        LeadValidationError(code="site_location_required", message="m2", field="site_location"),
    ]

    with pytest.raises(HTTPException) as exc:
        raise_for_errors(errors)

    assert exc.value.status_code == 400
    assert [e["code"] for e in exc.value.detail["errors"]] == [
        "customer_name_required",
        "site_location_required",
    ]
