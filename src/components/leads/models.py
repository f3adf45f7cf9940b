"""
Leads component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import Lead, LeadStatus

# --- Validation Errors ---


@dataclass(frozen=True)
class LeadValidationError:
    """Lead validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateLeadInput:
    customer_name: str
    service_needed: str
    site_location: str
    assigned_to: UUID | None = None
    notes: str = ""
    files: tuple[str, ...] = ()


@dataclass(frozen=True)
class UpdateLeadInput:
    lead_id: UUID
    customer_name: str | None = None
    service_needed: str | None = None
    site_location: str | None = None
    assigned_to: UUID | None = None
    notes: str | None = None
    files: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ChangeLeadStatusInput:
    lead_id: UUID
    status: LeadStatus


@dataclass(frozen=True)
class GetLeadInput:
    lead_id: UUID


@dataclass(frozen=True)
class ListLeadsInput:
    status: LeadStatus | None = None
    assigned_to: UUID | None = None


# --- Output Models ---


@dataclass(frozen=True)
class LeadOutput:
    lead: Lead | None
    errors: tuple[LeadValidationError, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class LeadListOutput:
    leads: tuple[Lead, ...]
    total: int
