"""
Dashboard component - Port interfaces.
"""

from src.ports.repo import (
    EquipmentRepoPort,
    JobRepoPort,
    LeadRepoPort,
    OperatorRepoPort,
    QuotationRepoPort,
    ServiceRepoPort,
)

__all__ = [
    "EquipmentRepoPort",
    "JobRepoPort",
    "LeadRepoPort",
    "OperatorRepoPort",
    "QuotationRepoPort",
    "ServiceRepoPort",
]
