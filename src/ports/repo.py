from typing import Protocol
from uuid import UUID

from src.domain.entities import (
    Equipment,
    Job,
    JobReport,
    Lead,
    Notification,
    Operator,
    Quotation,
    Service,
    User,
)


class UserRepoPort(Protocol):
    def get_by_email(self, email: str) -> User | None:
        ...

    def get_by_id(self, user_id: UUID) -> User | None:
        ...

    def list_all(self) -> list[User]:
        ...

    def save(self, user: User) -> User:
        ...


class LeadRepoPort(Protocol):
    def get_by_id(self, lead_id: UUID) -> Lead | None:
        ...

    def list_all(self) -> list[Lead]:
        ...

    def save(self, lead: Lead) -> Lead:
        ...


class QuotationRepoPort(Protocol):
    def get_by_id(self, quotation_id: UUID) -> Quotation | None:
        ...

    def list_by_lead(self, lead_id: UUID) -> list[Quotation]:
        """All versions for a lead, in any order."""
        ...

    def save(self, quotation: Quotation) -> Quotation:
        ...


class EquipmentRepoPort(Protocol):
    def get_by_id(self, equipment_id: UUID) -> Equipment | None:
        ...

    def list_all(self) -> list[Equipment]:
        ...

    def save(self, equipment: Equipment) -> Equipment:
        ...

    def delete(self, equipment_id: UUID) -> None:
        ...


class OperatorRepoPort(Protocol):
    def get_by_id(self, operator_id: UUID) -> Operator | None:
        ...

    def get_by_email(self, email: str) -> Operator | None:
        ...

    def list_all(self) -> list[Operator]:
        ...

    def save(self, operator: Operator) -> Operator:
        ...


class ServiceRepoPort(Protocol):
    def get_by_id(self, service_id: UUID) -> Service | None:
        ...

    def list_all(self) -> list[Service]:
        ...

    def save(self, service: Service) -> Service:
        ...

    def delete(self, service_id: UUID) -> None:
        ...


class JobRepoPort(Protocol):
    def get_by_id(self, job_id: UUID) -> Job | None:
        ...

    def list_all(self) -> list[Job]:
        ...

    def save(self, job: Job) -> Job:
        ...


class JobReportRepoPort(Protocol):
    def get_by_job(self, job_id: UUID) -> JobReport | None:
        ...

    def save(self, report: JobReport) -> JobReport:
        ...


class NotificationRepoPort(Protocol):
    def get_by_id(self, notification_id: UUID) -> Notification | None:
        ...

    def list_by_user(self, user_id: UUID) -> list[Notification]:
        ...

    def save(self, notification: Notification) -> Notification:
        ...
