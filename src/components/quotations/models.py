"""
Quotations component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities import Quotation, QuotationInputs


@dataclass(frozen=True)
class QuotationValidationError:
    """Quotation validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateQuotationInput:
    lead_id: UUID
    inputs: QuotationInputs
    created_by: UUID


@dataclass(frozen=True)
class ReviseQuotationInput:
    """Partial input changes applied on top of an existing version."""

    quotation_id: UUID
    updates: Mapping[str, float]
    created_by: UUID


@dataclass(frozen=True)
class GetQuotationInput:
    quotation_id: UUID


@dataclass(frozen=True)
class ListQuotationsInput:
    lead_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class QuotationOutput:
    quotation: Quotation | None
    errors: tuple[QuotationValidationError, ...] = field(default_factory=tuple)
    success: bool = False


@dataclass(frozen=True)
class QuotationListOutput:
    """All versions for a lead, oldest first."""

    quotations: tuple[Quotation, ...]
    total: int

    @property
    def latest(self) -> Quotation | None:
        return self.quotations[-1] if self.quotations else None
