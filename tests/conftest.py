from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.auth.crypto import JWTAuthAdapter
from src.api.deps import get_context
from src.api.main import app
from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules
from src.rules.models import Rules

RULES_PATH = Path(__file__).resolve().parents[1] / "rules.yaml"
TEST_SECRET = "test-secret"


class FixedClock:
    """Clock frozen at construction; tests move it explicitly.

    Starts at wall-clock time because token expiry is checked against it.
    """

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now or datetime.now(UTC).replace(microsecond=0)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, **kwargs: float) -> None:
        self._now += timedelta(**kwargs)


class FastAuthAdapter(JWTAuthAdapter):
    """Real JWT tokens, but a reversible password "hash" so seeding stays fast."""

    def hash_password(self, password: str) -> str:
        return f"plain${password}"

    def verify_password(self, plain: str, hashed: str) -> bool:
        return hashed == f"plain${plain}"


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the project root."""
    return load_rules(RULES_PATH)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ctx(rules: Rules, clock: FixedClock) -> ServiceContext:
    """In-memory context with the demo data seeded."""
    return ServiceContext.create(
        rules,
        clock=clock,
        auth_adapter=FastAuthAdapter(TEST_SECRET),
        seed=True,
    )


@pytest.fixture
def client(ctx: ServiceContext) -> Iterator[TestClient]:
    app.dependency_overrides[get_context] = lambda: ctx
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _login(client: TestClient, email: str, password: str) -> dict[str, str]:
    """Log in through the form endpoint and return an Authorization header."""
    response = client.post("/api/auth/login", data={"username": email, "password": password})
    assert response.status_code == 200, response.text
    # Drop the cookie so each request uses only the header it is given
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    return _login(client, "admin@aspcranes.com", "admin123")


@pytest.fixture
def sales_headers(client: TestClient) -> dict[str, str]:
    return _login(client, "john@aspcranes.com", "sales123")


@pytest.fixture
def manager_headers(client: TestClient) -> dict[str, str]:
    return _login(client, "sara@aspcranes.com", "manager123")


@pytest.fixture
def operator_headers(client: TestClient) -> dict[str, str]:
    return _login(client, "mike@aspcranes.com", "operator123")


@pytest.fixture
def login_as(client: TestClient) -> Callable[[str, str], dict[str, str]]:
    return lambda email, password: _login(client, email, password)
