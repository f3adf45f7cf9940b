"""
Scheduling component port definitions.
"""

from src.components.notifications.ports import NotifierPort
from src.ports.clock import ClockPort
from src.ports.repo import (
    EquipmentRepoPort,
    JobRepoPort,
    LeadRepoPort,
    OperatorRepoPort,
    UserRepoPort,
)

__all__ = [
    "ClockPort",
    "EquipmentRepoPort",
    "JobRepoPort",
    "LeadRepoPort",
    "NotifierPort",
    "OperatorRepoPort",
    "UserRepoPort",
]
