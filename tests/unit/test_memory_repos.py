from datetime import UTC, datetime
from uuid import uuid4

from src.adapters.memory.repos import (
    InMemoryJobReportRepo,
    InMemoryNotificationRepo,
    InMemoryOperatorRepo,
    InMemoryQuotationRepo,
    InMemoryUserRepo,
)
from src.domain.entities import JobReport, Notification, Operator, Quotation, User


def make_user(email="a@example.com"):
    return User(email=email, name="A", password_hash="h", role="sales_agent")


class TestCopySemantics:
    def test_mutating_returned_record_does_not_change_store(self):
        repo = InMemoryUserRepo()
        user = repo.save(make_user())

        fetched = repo.get_by_id(user.id)
        fetched.name = "Changed"

        assert repo.get_by_id(user.id).name == "A"

    def test_mutating_saved_record_needs_another_save(self):
        repo = InMemoryUserRepo()
        user = make_user()
        repo.save(user)

        user.name = "Changed"
        assert repo.get_by_id(user.id).name == "A"

        repo.save(user)
        assert repo.get_by_id(user.id).name == "Changed"


class TestLookups:
    def test_user_email_is_case_insensitive(self):
        repo = InMemoryUserRepo([make_user("john@example.com")])
        assert repo.get_by_email(" John@Example.com ") is not None
        assert repo.get_by_email("other@example.com") is None

    def test_operator_by_email(self):
        repo = InMemoryOperatorRepo([Operator(name="Mike", email="mike@example.com")])
        assert repo.get_by_email("MIKE@example.com").name == "Mike"

    def test_quotations_by_lead(self):
        lead_a, lead_b, author = uuid4(), uuid4(), uuid4()
        repo = InMemoryQuotationRepo()
        repo.save(Quotation(lead_id=lead_a, total_rent=1, created_by=author))
        repo.save(Quotation(lead_id=lead_a, total_rent=2, version=2, created_by=author))
        repo.save(Quotation(lead_id=lead_b, total_rent=3, created_by=author))

        assert {q.total_rent for q in repo.list_by_lead(lead_a)} == {1, 2}

    def test_notifications_by_user(self):
        me, other = uuid4(), uuid4()
        repo = InMemoryNotificationRepo()
        for user_id in (me, me, other):
            repo.save(Notification(user_id=user_id, type="job_assigned", title="t", message="m"))

        assert len(repo.list_by_user(me)) == 2

    def test_report_keyed_by_job(self):
        job_id = uuid4()
        repo = InMemoryJobReportRepo()
        assert repo.get_by_job(job_id) is None

        repo.save(JobReport(job_id=job_id, safety_notes="first"))
        repo.save(JobReport(job_id=job_id, safety_notes="second"))

        assert repo.get_by_job(job_id).safety_notes == "second"


def test_delete_and_clear():
    repo = InMemoryUserRepo([make_user("a@example.com"), make_user("b@example.com")])
    first = repo.list_all()[0]

    repo.delete(first.id)
    assert len(repo.list_all()) == 1

    repo.delete(first.id)  # already gone
    repo.clear()
    assert repo.list_all() == []


def test_timestamps_survive_copy():
    created = datetime(2024, 1, 1, tzinfo=UTC)
    repo = InMemoryUserRepo()
    user = make_user()
    user.created_at = created
    repo.save(user)

    assert repo.get_by_id(user.id).created_at == created
