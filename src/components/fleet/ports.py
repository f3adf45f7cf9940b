"""
Fleet component - Port interfaces.
"""

from src.ports.repo import EquipmentRepoPort, JobRepoPort, OperatorRepoPort

__all__ = ["EquipmentRepoPort", "JobRepoPort", "OperatorRepoPort"]
