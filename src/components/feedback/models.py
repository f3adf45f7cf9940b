"""
Feedback component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import JobReport


@dataclass(frozen=True)
class FeedbackValidationError:
    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class SafetyCheckDefinition:
    id: str
    label: str


@dataclass(frozen=True)
class FeedbackConfig:
    """Checklist and limits from the rules file."""

    safety_checks: tuple[SafetyCheckDefinition, ...] = ()
    max_rating: float = 5
    rating_step: float = 0.5
    max_discount_percent: float = 100


# --- Input Models ---


@dataclass(frozen=True)
class GetReportInput:
    job_id: UUID


@dataclass(frozen=True)
class SubmitSafetyChecklistInput:
    """Checks left out keep their default (checked)."""

    job_id: UUID
    checks: Mapping[str, bool] = field(default_factory=dict)
    notes: str = ""


@dataclass(frozen=True)
class RequestFeedbackInput:
    job_id: UUID
    requested_by: UUID


@dataclass(frozen=True)
class SubmitFeedbackInput:
    job_id: UUID
    rating: float
    comments: str = ""


@dataclass(frozen=True)
class RequestDiscountInput:
    job_id: UUID
    percentage: float
    reason: str
    requested_by: UUID


@dataclass(frozen=True)
class DecideDiscountInput:
    job_id: UUID
    approve: bool
    decided_by: UUID


# --- Output Models ---


@dataclass(frozen=True)
class ReportOutput:
    report: JobReport | None
    errors: tuple[FeedbackValidationError, ...] = field(default_factory=tuple)
    success: bool = False
