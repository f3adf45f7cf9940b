"""
Dashboard component - Headline counts for the role dashboards.
"""

from .component import ACTIVE_JOB_STATUSES, run_summary
from .models import DashboardSummary, SummaryInput

__all__ = [
    # Entry points
    "run_summary",
    "ACTIVE_JOB_STATUSES",
    # Input models
    "SummaryInput",
    # Output models
    "DashboardSummary",
]
