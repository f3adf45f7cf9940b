"""
Feedback component - Post-job summary.
"""

from ._impl import (
    build_checklist,
    config_from_rules,
    default_checklist,
    validate_discount,
    validate_rating,
)
from .component import (
    run,
    run_decide_discount,
    run_get_report,
    run_request_discount,
    run_request_feedback,
    run_submit_feedback,
    run_submit_safety,
)
from .models import (
    DecideDiscountInput,
    FeedbackConfig,
    FeedbackValidationError,
    GetReportInput,
    ReportOutput,
    RequestDiscountInput,
    RequestFeedbackInput,
    SafetyCheckDefinition,
    SubmitFeedbackInput,
    SubmitSafetyChecklistInput,
)
from .ports import JobReportRepoPort

__all__ = [
    # Entry points
    "run",
    "run_get_report",
    "run_submit_safety",
    "run_request_feedback",
    "run_submit_feedback",
    "run_request_discount",
    "run_decide_discount",
    # Functional core
    "build_checklist",
    "config_from_rules",
    "default_checklist",
    "validate_discount",
    "validate_rating",
    # Models
    "FeedbackConfig",
    "SafetyCheckDefinition",
    "GetReportInput",
    "SubmitSafetyChecklistInput",
    "RequestFeedbackInput",
    "SubmitFeedbackInput",
    "RequestDiscountInput",
    "DecideDiscountInput",
    "ReportOutput",
    "FeedbackValidationError",
    # Ports
    "JobReportRepoPort",
]
