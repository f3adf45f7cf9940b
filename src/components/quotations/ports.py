"""
Quotations component - Port interfaces.
"""

from src.components.notifications.ports import NotifierPort
from src.ports.clock import ClockPort
from src.ports.repo import LeadRepoPort, QuotationRepoPort

__all__ = ["ClockPort", "LeadRepoPort", "NotifierPort", "QuotationRepoPort"]
