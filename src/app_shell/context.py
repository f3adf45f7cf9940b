from __future__ import annotations

import logging
from dataclasses import dataclass

from src.adapters.auth.crypto import JWTAuthAdapter
from src.adapters.clock import SystemClock
from src.adapters.memory.repos import (
    InMemoryEquipmentRepo,
    InMemoryJobReportRepo,
    InMemoryJobRepo,
    InMemoryLeadRepo,
    InMemoryNotificationRepo,
    InMemoryOperatorRepo,
    InMemoryQuotationRepo,
    InMemoryServiceRepo,
    InMemoryUserRepo,
)
from src.components.auth import AuthAdapterPort
from src.components.feedback import FeedbackConfig, config_from_rules
from src.components.notifications import RepoNotifier
from src.components.scheduling import JobScheduler, create_scheduler
from src.domain.policy import PolicyEngine
from src.ports.clock import ClockPort
from src.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    """Everything a request handler or CLI command needs, wired once per process."""

    rules: Rules
    policy: PolicyEngine
    clock: ClockPort
    auth_adapter: AuthAdapterPort
    user_repo: InMemoryUserRepo
    lead_repo: InMemoryLeadRepo
    quotation_repo: InMemoryQuotationRepo
    equipment_repo: InMemoryEquipmentRepo
    operator_repo: InMemoryOperatorRepo
    service_repo: InMemoryServiceRepo
    job_repo: InMemoryJobRepo
    report_repo: InMemoryJobReportRepo
    notification_repo: InMemoryNotificationRepo
    notifier: RepoNotifier
    scheduler: JobScheduler
    feedback_config: FeedbackConfig

    @classmethod
    def create(
        cls,
        rules: Rules,
        secret_key: str | None = None,
        clock: ClockPort | None = None,
        auth_adapter: AuthAdapterPort | None = None,
        seed: bool = False,
    ) -> ServiceContext:
        clock = clock or SystemClock()
        auth_adapter = auth_adapter or JWTAuthAdapter(secret_key)

        # Adapters
        user_repo = InMemoryUserRepo()
        lead_repo = InMemoryLeadRepo()
        quotation_repo = InMemoryQuotationRepo()
        equipment_repo = InMemoryEquipmentRepo()
        operator_repo = InMemoryOperatorRepo()
        service_repo = InMemoryServiceRepo()
        job_repo = InMemoryJobRepo()
        report_repo = InMemoryJobReportRepo()
        notification_repo = InMemoryNotificationRepo()
        notifier = RepoNotifier(notification_repo, clock)

        # Services
        scheduler = create_scheduler(
            jobs=job_repo,
            leads=lead_repo,
            equipment=equipment_repo,
            operators=operator_repo,
            clock=clock,
            users=user_repo,
            notifier=notifier,
            rules=rules.scheduling,
        )

        ctx = cls(
            rules=rules,
            policy=PolicyEngine(rules),
            clock=clock,
            auth_adapter=auth_adapter,
            user_repo=user_repo,
            lead_repo=lead_repo,
            quotation_repo=quotation_repo,
            equipment_repo=equipment_repo,
            operator_repo=operator_repo,
            service_repo=service_repo,
            job_repo=job_repo,
            report_repo=report_repo,
            notification_repo=notification_repo,
            notifier=notifier,
            scheduler=scheduler,
            feedback_config=config_from_rules(rules.feedback),
        )

        if seed:
            from src.app_shell.seed import seed_demo_data

            seed_demo_data(ctx)

        logger.info("Service context ready (rules %s)", rules.project.rules_version)
        return ctx
