from datetime import datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["admin", "sales_agent", "operations_manager", "operator"]
LeadStatus = Literal["new", "negotiation", "won", "lost"]
JobStatus = Literal[
    "scheduled", "accepted", "rejected", "in_progress", "completed", "cancelled"
]
EquipmentStatus = Literal["available", "in_use", "maintenance"]
ServiceType = Literal["lifting", "transport", "attachment", "operator", "consultation"]
ServiceUnit = Literal["hour", "day", "shift"]
DiscountStatus = Literal["pending", "approved", "rejected"]
NotificationType = Literal[
    "job_assigned",
    "job_rejected",
    "job_completed",
    "job_rescheduled",
    "feedback_requested",
    "lead_status_change",
    "quotation_created",
]

# Bookings in these states no longer hold their equipment or operator.
RESOLVED_JOB_STATUSES: frozenset[str] = frozenset({"completed", "cancelled"})

# --- User & Auth ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    name: str
    password_hash: str
    role: RoleType
    avatar: str | None = None
    status: Literal["active", "disabled"] = "active"
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

# --- Sales ---

class Lead(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    customer_name: str
    service_needed: str
    site_location: str
    status: LeadStatus = "new"
    assigned_to: UUID | None = None
    notes: str = ""
    files: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

class QuotationInputs(BaseModel):
    """Pricing inputs entered on the quotation form."""

    base_rate: float = 0  # currency / hour
    working_hours: float = 0  # hours / day
    rental_days: float = 0
    food_charge: float = 0  # currency / person / day
    accom_charge: float = 0  # currency / person / day
    num_resources: float = 0
    usage_percent: float = 0
    elongation_percent: float = 0
    commercial_charge: float = 0
    risk_percent: float = 0
    incidental_charge: float = 0
    other_charge: float = 0

class Quotation(QuotationInputs):
    id: UUID = Field(default_factory=uuid4)
    lead_id: UUID
    total_rent: int
    version: int = 1
    created_by: UUID
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def inputs(self) -> QuotationInputs:
        return QuotationInputs.model_validate(
            self.model_dump(include=set(QuotationInputs.model_fields))
        )

# --- Fleet ---

class Equipment(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    type: str
    description: str = ""
    base_rate: float
    status: EquipmentStatus = "available"

class Operator(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    phone: str = ""
    specialization: str = ""

class Service(BaseModel):
    """A priced catalog offering quoted alongside crane rentals."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    type: ServiceType
    base_rate: float
    unit: ServiceUnit = "hour"
    description: str = ""
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

# --- Scheduling ---

class Job(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    lead_id: UUID
    customer_name: str
    equipment_id: UUID
    operator_id: UUID
    start_date: datetime
    end_date: datetime
    location: str = ""
    status: JobStatus = "scheduled"
    notes: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

# --- Job Summary & Feedback ---

class SafetyCheck(BaseModel):
    id: str
    label: str
    checked: bool = True

class CustomerFeedback(BaseModel):
    rating: float
    comments: str = ""
    submitted_at: datetime = Field(default_factory=datetime.utcnow)

class DiscountRequest(BaseModel):
    percentage: float
    reason: str
    status: DiscountStatus = "pending"
    requested_by: UUID
    decided_by: UUID | None = None
    requested_at: datetime = Field(default_factory=datetime.utcnow)
    decided_at: datetime | None = None

class JobReport(BaseModel):
    """Post-job summary: safety checklist, customer feedback, discount request."""

    id: UUID = Field(default_factory=uuid4)
    job_id: UUID
    safety_checks: list[SafetyCheck] = Field(default_factory=list)
    safety_notes: str = ""
    feedback: CustomerFeedback | None = None
    feedback_requested_at: datetime | None = None
    discount: DiscountRequest | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

# --- Notifications ---

class Notification(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    type: NotificationType
    title: str
    message: str
    read: bool = False
    link: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
