"""Demo records for a fresh in-memory context."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.domain.entities import Equipment, Job, Lead, Operator, Service, User

if TYPE_CHECKING:
    from src.app_shell.context import ServiceContext

logger = logging.getLogger(__name__)

DEMO_USERS = [
    ("Admin User", "admin@aspcranes.com", "admin123", "admin"),
    ("John Sales", "john@aspcranes.com", "sales123", "sales_agent"),
    ("Sara Manager", "sara@aspcranes.com", "manager123", "operations_manager"),
    ("Mike Operator", "mike@aspcranes.com", "operator123", "operator"),
]

DEMO_EQUIPMENT = [
    ("Tower Crane TC-50", "Tower Crane", "50m height, 5 ton capacity", 5000),
    ("Mobile Crane MC-30", "Mobile Crane", "30 ton capacity, extends to 40m", 3500),
    ("Crawler Crane CC-100", "Crawler Crane", "100 ton capacity, heavy duty", 8000),
    ("Tower Crane TC-80", "Tower Crane", "80m height, 8 ton capacity", 7500),
    ("Mobile Crane MC-50", "Mobile Crane", "50 ton capacity, extends to 60m", 5000),
]

DEMO_OPERATORS = [
    ("Mike Operator", "mike@aspcranes.com", "555-123-4567", "Tower Crane"),
    ("Lisa Crane", "lisa@aspcranes.com", "555-987-6543", "Mobile Crane"),
    ("Tom Heavy", "tom@aspcranes.com", "555-456-7890", "Crawler Crane"),
    ("Sarah Heights", "sarah@aspcranes.com", "555-789-0123", "Tower Crane"),
    ("Dave Mobile", "dave@aspcranes.com", "555-234-5678", "Mobile Crane"),
]

DEMO_SERVICES = [
    (
        "Standard Lifting Service",
        "lifting",
        250,
        "hour",
        "Standard crane lifting service with operator",
        True,
    ),
    (
        "Heavy Transport Package",
        "transport",
        1500,
        "day",
        "Heavy equipment transport with escort",
        True,
    ),
    (
        "Specialized Rigging Attachment",
        "attachment",
        350,
        "day",
        "Custom rigging for complex lifts",
        False,
    ),
]

DEMO_LEADS = [
    (
        "Acme Construction",
        "Tower Crane - 50m",
        "123 Construction Ave, New York",
        "new",
        "Client needs crane for a 3-month project starting in November.",
        datetime(2023, 10, 1, 10, 0, tzinfo=UTC),
    ),
    (
        "BuildRight Inc",
        "Mobile Crane - 30 ton",
        "456 Builder St, Chicago",
        "negotiation",
        "Client comparing prices with competitors.",
        datetime(2023, 9, 25, 14, 30, tzinfo=UTC),
    ),
    (
        "Skyrise Developers",
        "Tower Crane - 80m",
        "789 Highrise Blvd, Miami",
        "won",
        "Contract signed. Ready for scheduling.",
        datetime(2023, 9, 15, 9, 20, tzinfo=UTC),
    ),
    (
        "MetroBuilders LLC",
        "Crawler Crane - 100 ton",
        "101 Metro Lane, Seattle",
        "lost",
        "Client went with competitor due to lower pricing.",
        datetime(2023, 9, 10, 13, 15, tzinfo=UTC),
    ),
    (
        "Harbor Construction",
        "Mobile Crane - 50 ton",
        "202 Harbor Drive, San Francisco",
        "new",
        "New inquiry for port development project.",
        datetime(2023, 10, 2, 15, 45, tzinfo=UTC),
    ),
]


def seed_demo_data(ctx: ServiceContext) -> None:
    """Populate an empty context with the demo staff, fleet, services, leads and one job."""
    if ctx.user_repo.list_all():
        logger.info("Context already has users, skipping demo seed")
        return

    users: dict[str, User] = {}
    for name, email, password, role in DEMO_USERS:
        user = User(
            email=email,
            name=name,
            password_hash=ctx.auth_adapter.hash_password(password),
            role=role,  # type: ignore[arg-type]
        )
        ctx.user_repo.save(user)
        users[role] = user

    equipment: dict[str, Equipment] = {}
    for eq_name, eq_type, description, rate in DEMO_EQUIPMENT:
        item = Equipment(name=eq_name, type=eq_type, description=description, base_rate=rate)
        ctx.equipment_repo.save(item)
        equipment[eq_name] = item

    operators: dict[str, Operator] = {}
    for op_name, email, phone, specialization in DEMO_OPERATORS:
        operator = Operator(name=op_name, email=email, phone=phone, specialization=specialization)
        ctx.operator_repo.save(operator)
        operators[op_name] = operator

    for svc_name, svc_type, svc_rate, unit, description, active in DEMO_SERVICES:
        ctx.service_repo.save(
            Service(
                name=svc_name,
                type=svc_type,  # type: ignore[arg-type]
                base_rate=svc_rate,
                unit=unit,  # type: ignore[arg-type]
                description=description,
                is_active=active,
            )
        )

    leads: dict[str, Lead] = {}
    for customer, service, site, status, notes, created in DEMO_LEADS:
        lead = Lead(
            customer_name=customer,
            service_needed=service,
            site_location=site,
            status=status,  # type: ignore[arg-type]
            assigned_to=users["sales_agent"].id,
            notes=notes,
            created_at=created,
            updated_at=created,
        )
        ctx.lead_repo.save(lead)
        leads[customer] = lead

    skyrise = leads["Skyrise Developers"]
    ctx.job_repo.save(
        Job(
            lead_id=skyrise.id,
            customer_name=skyrise.customer_name,
            equipment_id=equipment["Tower Crane TC-80"].id,
            operator_id=operators["Sarah Heights"].id,
            start_date=datetime(2023, 11, 1, 8, 0, tzinfo=UTC),
            end_date=datetime(2024, 1, 30, 17, 0, tzinfo=UTC),
            location=skyrise.site_location,
            notes="Long-term project, will need regular maintenance checks.",
            created_at=datetime(2023, 9, 25, 14, 30, tzinfo=UTC),
            updated_at=datetime(2023, 9, 25, 14, 30, tzinfo=UTC),
        )
    )

    logger.info(
        "Seeded %d users, %d equipment, %d operators, %d services, %d leads",
        len(users),
        len(equipment),
        len(operators),
        len(DEMO_SERVICES),
        len(leads),
    )
