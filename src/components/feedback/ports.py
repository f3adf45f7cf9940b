"""
Feedback component - Port interfaces.
"""

from src.components.notifications.ports import NotifierPort
from src.ports.clock import ClockPort
from src.ports.repo import JobReportRepoPort, JobRepoPort, LeadRepoPort

__all__ = ["ClockPort", "JobReportRepoPort", "JobRepoPort", "LeadRepoPort", "NotifierPort"]
