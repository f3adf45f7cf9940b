"""
Job summary validation - Functional Core.

Pure checks for the post-job checklist, customer rating and discount
request.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal

from src.domain.entities import SafetyCheck
from src.rules.models import FeedbackRules

from .models import FeedbackConfig, FeedbackValidationError, SafetyCheckDefinition


def config_from_rules(rules: FeedbackRules | None) -> FeedbackConfig:
    if rules is None:
        return FeedbackConfig()
    return FeedbackConfig(
        safety_checks=tuple(SafetyCheckDefinition(id=c.id, label=c.label) for c in rules.safety_checks),
        max_rating=rules.max_rating,
        rating_step=rules.rating_step,
        max_discount_percent=rules.max_discount_percent,
    )


def default_checklist(config: FeedbackConfig) -> list[SafetyCheck]:
    return [SafetyCheck(id=d.id, label=d.label, checked=True) for d in config.safety_checks]


def build_checklist(
    config: FeedbackConfig, checks: Mapping[str, bool]
) -> tuple[list[SafetyCheck], list[FeedbackValidationError]]:
    known = {d.id for d in config.safety_checks}
    errors = [
        FeedbackValidationError(
            code="unknown_safety_check",
            message=f"Unknown safety check: {check_id}",
            field="checks",
        )
        for check_id in sorted(set(checks) - known)
    ]
    checklist = [
        SafetyCheck(id=d.id, label=d.label, checked=bool(checks.get(d.id, True)))
        for d in config.safety_checks
    ]
    return checklist, errors


def validate_rating(config: FeedbackConfig, rating: float) -> list[FeedbackValidationError]:
    """Ratings run from 0 to max_rating in rating_step increments."""
    if not math.isfinite(rating) or not 0 <= rating <= config.max_rating:
        return [
            FeedbackValidationError(
                code="rating_out_of_range",
                message=f"Rating must be between 0 and {config.max_rating:g}",
                field="rating",
            )
        ]
    if Decimal(str(rating)) % Decimal(str(config.rating_step)) != 0:
        return [
            FeedbackValidationError(
                code="rating_step",
                message=f"Rating must be a multiple of {config.rating_step:g}",
                field="rating",
            )
        ]
    return []


def validate_discount(
    config: FeedbackConfig, percentage: float, reason: str
) -> list[FeedbackValidationError]:
    errors: list[FeedbackValidationError] = []
    if not math.isfinite(percentage) or not 0 < percentage <= config.max_discount_percent:
        errors.append(
            FeedbackValidationError(
                code="discount_out_of_range",
                message=f"Discount must be above 0 and at most {config.max_discount_percent:g}%",
                field="percentage",
            )
        )
    if not reason.strip():
        errors.append(
            FeedbackValidationError(
                code="reason_required",
                message="A reason is required for a discount request",
                field="reason",
            )
        )
    return errors
