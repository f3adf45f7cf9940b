from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import (
    EquipmentStatus,
    Job,
    JobStatus,
    LeadStatus,
    QuotationInputs,
    RoleType,
    ServiceType,
    ServiceUnit,
)


# --- Auth / Users ---
class Token(BaseModel):
    access_token: str
    token_type: str


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    role: RoleType
    avatar: str | None = None
    status: str


class UserCreateRequest(BaseModel):
    email: str
    password: str
    role: str
    name: str | None = None


class UserUpdateRequest(BaseModel):
    role: str | None = None
    status: str | None = None
    name: str | None = None


# --- Pricing ---
class RentCalculationRequest(QuotationInputs):
    """Quotation inputs; with clamp, bad values become 0 instead of failing."""

    clamp: bool = False


class RentBreakdownResponse(BaseModel):
    daily_rate: float
    basic_rent: float
    resource_costs: float
    usage_factor: float
    elongation_factor: float
    risk_factor: float
    additional_charges: float
    commercial_charge: float
    total_rent: int


# --- Leads ---
class LeadCreateRequest(BaseModel):
    customer_name: str
    service_needed: str
    site_location: str
    assigned_to: UUID | None = None
    notes: str = ""
    files: list[str] = Field(default_factory=list)


class LeadUpdateRequest(BaseModel):
    customer_name: str | None = None
    service_needed: str | None = None
    site_location: str | None = None
    assigned_to: UUID | None = None
    notes: str | None = None
    files: list[str] | None = None


class LeadStatusRequest(BaseModel):
    status: LeadStatus


# --- Quotations ---
class QuotationCreateRequest(QuotationInputs):
    lead_id: UUID


class QuotationReviseRequest(BaseModel):
    updates: dict[str, float]


# --- Jobs ---
class JobCreateRequest(BaseModel):
    lead_id: UUID
    equipment_id: UUID
    operator_id: UUID
    start_date: datetime
    end_date: datetime
    location: str = ""
    notes: str = ""
    customer_name: str | None = None


class AvailabilityRequest(BaseModel):
    equipment_id: UUID
    operator_id: UUID
    start_date: datetime
    end_date: datetime
    exclude_job_id: UUID | None = None


class JobStatusRequest(BaseModel):
    status: JobStatus


class JobRescheduleRequest(BaseModel):
    start_date: datetime
    end_date: datetime


class AvailabilityResponse(BaseModel):
    available: bool
    conflicts: list[Job]


# --- Fleet ---
class EquipmentCreateRequest(BaseModel):
    name: str
    type: str
    base_rate: float
    description: str = ""
    status: EquipmentStatus = "available"


class EquipmentUpdateRequest(BaseModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    base_rate: float | None = None
    status: EquipmentStatus | None = None


class OperatorCreateRequest(BaseModel):
    name: str
    email: str
    phone: str = ""
    specialization: str = ""


# --- Services ---
class ServiceCreateRequest(BaseModel):
    name: str
    type: ServiceType
    base_rate: float
    unit: ServiceUnit = "hour"
    description: str = ""
    is_active: bool = True


class ServiceUpdateRequest(BaseModel):
    name: str | None = None
    type: ServiceType | None = None
    base_rate: float | None = None
    unit: ServiceUnit | None = None
    description: str | None = None
    is_active: bool | None = None


# --- Dashboard ---
class DashboardSummaryResponse(BaseModel):
    leads_by_status: dict[str, int]
    jobs_by_status: dict[str, int]
    equipment_by_status: dict[str, int]
    total_leads: int
    total_jobs: int
    total_equipment: int
    total_operators: int
    active_services: int
    conversion_rate: float
    utilization: float
    won_quotation_value: int


# --- Feedback ---
class SafetyChecklistRequest(BaseModel):
    checks: dict[str, bool] = Field(default_factory=dict)
    notes: str = ""


class CustomerFeedbackRequest(BaseModel):
    rating: float
    comments: str = ""


class DiscountRequestBody(BaseModel):
    percentage: float
    reason: str


class DiscountDecisionRequest(BaseModel):
    decision: Literal["approve", "reject"]


# --- Notifications ---
class UnreadCountResponse(BaseModel):
    unread: int
