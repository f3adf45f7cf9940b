from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str
    currency: str = "USD"

class AuthRules(BaseModel):
    token_ttl_minutes: int = 24 * 60
    password_min_length: int = 8

class RbacRules(BaseModel):
    roles: dict[str, list[str]]
    public_permissions: list[str] = Field(default_factory=list)

class PricingRules(BaseModel):
    """Defaults used to prefill a new quotation."""

    equipment_rates: dict[str, float] = Field(default_factory=dict)
    shift_hours: float = 8
    food_allowance: float = 0
    accommodation_rate: float = 0
    risk_percent: float = 0
    incidental_charge: float = 0

class SchedulingRules(BaseModel):
    max_booking_days: int = 365
    block_maintenance_equipment: bool = True

class SafetyCheckRule(BaseModel):
    id: str
    label: str

class FeedbackRules(BaseModel):
    safety_checks: list[SafetyCheckRule]
    max_rating: float = 5
    rating_step: float = 0.5
    max_discount_percent: float = 100

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    auth: AuthRules
    rbac: RbacRules
    pricing: PricingRules
    scheduling: SchedulingRules
    feedback: FeedbackRules
    ops: OpsRules
