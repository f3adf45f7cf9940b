"""In-memory repository adapters.

Implement the repository ports in src.ports.repo. Records are copied on the
way in and out, so callers never alias stored state.

Suitable for tests, demos and single-process deployments.
"""

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

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


T = TypeVar("T", bound=BaseModel)


class _InMemoryRepo(Generic[T]):
    def __init__(self, items: list[T] | None = None) -> None:
        self._items: dict[UUID, T] = {}
        for item in items or []:
            self.save(item)

    def save(self, item: T) -> T:
        self._items[item.id] = item.model_copy(deep=True)  # type: ignore[attr-defined]
        return item

    def get_by_id(self, item_id: UUID) -> T | None:
        item = self._items.get(item_id)
        return item.model_copy(deep=True) if item else None

    def list_all(self) -> list[T]:
        return [i.model_copy(deep=True) for i in self._items.values()]

    def delete(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)

    def clear(self) -> None:
        """Clear all records - useful for testing."""
        self._items.clear()


class InMemoryUserRepo(_InMemoryRepo[User]):
    def get_by_email(self, email: str) -> User | None:
        needle = email.strip().lower()
        return next((u for u in self.list_all() if u.email.lower() == needle), None)


class InMemoryLeadRepo(_InMemoryRepo[Lead]):
    pass


class InMemoryQuotationRepo(_InMemoryRepo[Quotation]):
    def list_by_lead(self, lead_id: UUID) -> list[Quotation]:
        return [q for q in self.list_all() if q.lead_id == lead_id]


class InMemoryEquipmentRepo(_InMemoryRepo[Equipment]):
    pass


class InMemoryOperatorRepo(_InMemoryRepo[Operator]):
    def get_by_email(self, email: str) -> Operator | None:
        needle = email.strip().lower()
        return next((o for o in self.list_all() if o.email.lower() == needle), None)


class InMemoryServiceRepo(_InMemoryRepo[Service]):
    pass


class InMemoryJobRepo(_InMemoryRepo[Job]):
    pass


class InMemoryJobReportRepo:
    def __init__(self) -> None:
        self._reports: dict[UUID, JobReport] = {}

    def get_by_job(self, job_id: UUID) -> JobReport | None:
        report = self._reports.get(job_id)
        return report.model_copy(deep=True) if report else None

    def save(self, report: JobReport) -> JobReport:
        self._reports[report.job_id] = report.model_copy(deep=True)
        return report


class InMemoryNotificationRepo(_InMemoryRepo[Notification]):
    def list_by_user(self, user_id: UUID) -> list[Notification]:
        return [n for n in self.list_all() if n.user_id == user_id]
