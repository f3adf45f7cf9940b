"""
Notifications component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from src.adapters.memory.repos import InMemoryNotificationRepo
from src.components.notifications import (
    CreateNotificationInput,
    ListNotificationsInput,
    MarkReadInput,
    RepoNotifier,
    run,
    run_create,
    run_list,
    run_mark_read,
    unread_count,
)


class MockTimePort:
    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, minutes: int) -> None:
        self._now += timedelta(minutes=minutes)


@pytest.fixture
def repo() -> InMemoryNotificationRepo:
    return InMemoryNotificationRepo()


@pytest.fixture
def clock() -> MockTimePort:
    return MockTimePort()


USER = uuid4()


def _create(repo: InMemoryNotificationRepo, clock: MockTimePort, title: str = "New Job Assigned"):
    return run_create(
        CreateNotificationInput(
            user_id=USER,
            type="job_assigned",
            title=title,
            message="You have been assigned to a new job",
            link="/operator/jobs/1",
        ),
        repo,
        clock,
    )


class TestCreate:
    def test_create(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        result = _create(repo, clock)

        assert result.success is True
        assert result.notification is not None
        assert result.notification.read is False
        assert result.notification.created_at == clock.now_utc()

    def test_title_required(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        result = _create(repo, clock, title="  ")
        assert result.success is False
        assert repo.list_all() == []


class TestList:
    def test_newest_first(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        _create(repo, clock, "first")
        clock.advance(5)
        _create(repo, clock, "second")

        result = run_list(ListNotificationsInput(user_id=USER), repo)

        assert [n.title for n in result.notifications] == ["second", "first"]
        assert result.total == 2
        assert result.unread == 2

    def test_other_users_hidden(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        _create(repo, clock)
        result = run_list(ListNotificationsInput(user_id=uuid4()), repo)
        assert result.total == 0

    def test_unread_only(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        first = _create(repo, clock, "first").notification
        _create(repo, clock, "second")
        assert first is not None
        run_mark_read(MarkReadInput(notification_id=first.id, user_id=USER), repo)

        result = run_list(ListNotificationsInput(user_id=USER, unread_only=True), repo)

        assert [n.title for n in result.notifications] == ["second"]
        assert result.unread == 1


class TestMarkRead:
    def test_mark_read(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        created = _create(repo, clock).notification
        assert created is not None

        result = run_mark_read(MarkReadInput(notification_id=created.id, user_id=USER), repo)

        assert result.success is True
        assert unread_count(USER, repo) == 0

    def test_mark_read_wrong_user(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        created = _create(repo, clock).notification
        assert created is not None

        result = run_mark_read(MarkReadInput(notification_id=created.id, user_id=uuid4()), repo)

        assert result.success is False
        assert unread_count(USER, repo) == 1

    def test_mark_read_missing(self, repo: InMemoryNotificationRepo) -> None:
        result = run(MarkReadInput(notification_id=uuid4(), user_id=USER), repo=repo)
        assert result.success is False  # type: ignore[union-attr]


class TestRepoNotifier:
    def test_notify_persists(self, repo: InMemoryNotificationRepo, clock: MockTimePort) -> None:
        notifier = RepoNotifier(repo, clock)
        notifier.notify(USER, "quotation_created", "Quotation Created", "v1 for BuildRight Inc")

        assert unread_count(USER, repo) == 1
        assert repo.list_by_user(USER)[0].type == "quotation_created"
