import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_context, get_rules, get_settings
from src.app_shell.config import validate_ops_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_ops_rules(rules)
    except Exception:
        logger.critical("Rules load failed from %s", settings.rules_path, exc_info=True)
        raise
    logger.info("Rules loaded from %s", settings.rules_path)

    # Wire repositories (and demo data) before the first request
    if get_context not in app.dependency_overrides:
        get_context()

    yield


app = FastAPI(
    title="Crane CRM API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    auth,
    dashboard,
    feedback,
    fleet,
    jobs,
    leads,
    notifications,
    pricing,
    quotations,
    services,
    users,
)

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(pricing.router, prefix="/api/pricing", tags=["Pricing"])
app.include_router(leads.router, prefix="/api/leads", tags=["Leads"])
app.include_router(quotations.router, prefix="/api/quotations", tags=["Quotations"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])
app.include_router(fleet.router, prefix="/api/fleet", tags=["Fleet"])
app.include_router(services.router, prefix="/api/services", tags=["Services"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
app.include_router(feedback.router, prefix="/api/feedback", tags=["Feedback"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
